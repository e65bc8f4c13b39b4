"""Tests for the HTTP-backed frame."""
from typing import Dict, List

import pytest
from requests.structures import CaseInsensitiveDict

from frame_inspector.domain.frame import FrameAccessError
from frame_inspector.infrastructure.frame.http_frame import HttpFrame, decode_data_url
from frame_inspector.infrastructure.frame.page_fetcher import FetchedPage, PageFetchError

HOST_ORIGIN = "http://localhost:5000"
CROSS_ORIGIN_MESSAGE = (
    'Blocked a frame with origin "http://localhost:5000" from accessing a cross-origin frame.'
)

SAME_ORIGIN_HTML = """<html><head><title>Same Origin Test Page</title></head>
<body><p>Hello</p><form action="/submit"><input name="q"></form></body></html>"""


class StubFetcher:
    """Serves canned pages keyed by absolute URL and records requests."""

    def __init__(self, pages: Dict[str, FetchedPage]):
        self.pages = pages
        self.requested: List[str] = []

    def __call__(self, url: str) -> FetchedPage:
        self.requested.append(url)
        if url not in self.pages:
            raise PageFetchError(f"Connection refused: {url}")
        return self.pages[url]


def _page(url: str, html: str = SAME_ORIGIN_HTML, **headers) -> FetchedPage:
    return FetchedPage(
        url=url,
        status_code=200,
        text=html,
        headers=CaseInsensitiveDict({name.replace("_", "-"): value for name, value in headers.items()}),
    )


class Signals:
    """Collects which completion callback a navigation fired."""

    def __init__(self):
        self.fired: List[str] = []

    def on_load(self) -> None:
        self.fired.append("load")

    def on_error(self) -> None:
        self.fired.append("error")


@pytest.fixture
def signals() -> Signals:
    return Signals()


@pytest.fixture
def fetcher() -> StubFetcher:
    return StubFetcher({
        "http://localhost:5000/api/test-pages/same-origin": _page(
            "http://localhost:5000/api/test-pages/same-origin", X_Frame_Options="SAMEORIGIN"
        ),
        "http://localhost:5000/api/test-pages/blocked": _page(
            "http://localhost:5000/api/test-pages/blocked", X_Frame_Options="DENY"
        ),
        "https://www.google.com": _page("https://www.google.com/", X_Frame_Options="SAMEORIGIN"),
        "https://open.example/": _page("https://open.example/"),
    })


@pytest.fixture
def frame(host_context, fetcher) -> HttpFrame:
    return HttpFrame(host_context, fetcher)


@pytest.mark.unit
class TestDecodeDataUrl:
    """Tests for decode_data_url function."""

    def test_percent_encoded(self):
        assert decode_data_url("data:text/html,%3Ch1%3EHi%3C%2Fh1%3E") == ("<h1>Hi</h1>", None)

    def test_plain_markup(self):
        assert decode_data_url("data:text/html,<h1>Hi</h1>")[0] == "<h1>Hi</h1>"

    def test_base64_with_charset(self):
        text, charset = decode_data_url("data:text/html;charset=utf-8;base64,PGgxPkhpPC9oMT4=")

        assert text == "<h1>Hi</h1>"
        assert charset == "utf-8"

    @pytest.mark.parametrize("charset", ["bogus", "rot13"])
    def test_unknown_charset_falls_back_to_utf8(self, charset):
        """Test that an unusable charset label decodes as UTF-8."""
        assert decode_data_url(f"data:text/html;charset={charset},<p>x</p>") == ("<p>x</p>", None)

    @pytest.mark.parametrize("url", ["data:text/html", "http://x/,y", "data:;base64,abc"])
    def test_malformed(self, url):
        with pytest.raises(ValueError):
            decode_data_url(url)


@pytest.mark.unit
class TestHttpFrame:
    """Tests for HttpFrame navigation and access rules."""

    def test_initial_blank_document_is_reachable(self, frame: HttpFrame):
        """Test the state before any navigation."""
        assert frame.src == ""
        assert frame.has_window is True
        assert (frame.width, frame.height) == (800, 384)
        assert frame.content_document is not None
        assert frame.window_location() == "about:blank"
        assert frame.window_origin() == HOST_ORIGIN

    def test_same_origin_page(self, frame: HttpFrame, fetcher: StubFetcher, signals: Signals):
        """Test that relative targets resolve against the host page."""
        frame.navigate("/api/test-pages/same-origin", signals.on_load, signals.on_error)

        assert signals.fired == ["load"]
        assert frame.src == "http://localhost:5000/api/test-pages/same-origin"
        assert fetcher.requested == ["http://localhost:5000/api/test-pages/same-origin"]
        document = frame.content_document
        assert document.title == "Same Origin Test Page"
        assert document.referrer == "http://localhost:5000/"
        assert frame.window_location() == "http://localhost:5000/api/test-pages/same-origin"
        assert frame.window_origin() == HOST_ORIGIN

    def test_page_refused_by_headers_still_loads(self, frame: HttpFrame, signals: Signals):
        """Test that a DENY page fires load but exposes no document."""
        frame.navigate("/api/test-pages/blocked", signals.on_load, signals.on_error)

        assert signals.fired == ["load"]
        assert frame.content_document is None
        with pytest.raises(FrameAccessError, match="cross-origin frame"):
            frame.window_location()

    def test_cross_origin_page_is_unreachable(self, frame: HttpFrame, signals: Signals):
        """Test that a framable cross-origin page hides its document."""
        frame.navigate("https://open.example/", signals.on_load, signals.on_error)

        assert signals.fired == ["load"]
        assert frame.src == "https://open.example/"
        assert frame.content_document is None
        with pytest.raises(FrameAccessError) as exc_info:
            frame.window_origin()
        assert str(exc_info.value) == CROSS_ORIGIN_MESSAGE

    def test_external_site_refusing_framing(self, frame: HttpFrame, signals: Signals):
        frame.navigate("https://www.google.com", signals.on_load, signals.on_error)

        assert signals.fired == ["load"]
        assert frame.content_document is None

    def test_fetch_failure_fires_error(self, frame: HttpFrame, signals: Signals):
        frame.navigate("http://unreachable.invalid/", signals.on_load, signals.on_error)

        assert signals.fired == ["error"]
        assert frame.content_document is None

    def test_data_url_is_opaque(self, frame: HttpFrame, fetcher: StubFetcher, signals: Signals):
        """Test that data URLs load without fetching and stay unreachable."""
        target = "data:text/html,<h1>Data URL Test</h1>"

        frame.navigate(target, signals.on_load, signals.on_error)

        assert signals.fired == ["load"]
        assert frame.src == target
        assert fetcher.requested == []
        assert frame.content_document is None

    def test_data_url_with_unknown_charset_loads(self, frame: HttpFrame, signals: Signals):
        frame.navigate("data:text/html;charset=bogus,<p>x</p>", signals.on_load, signals.on_error)

        assert signals.fired == ["load"]
        assert frame.src == "data:text/html;charset=bogus,<p>x</p>"

    def test_malformed_data_url_fires_error(self, frame: HttpFrame, signals: Signals):
        frame.navigate("data:text/html", signals.on_load, signals.on_error)

        assert signals.fired == ["error"]

    def test_unsupported_scheme_fires_error(self, frame: HttpFrame, fetcher: StubFetcher, signals: Signals):
        frame.navigate("mailto:someone@example.com", signals.on_load, signals.on_error)

        assert signals.fired == ["error"]
        assert fetcher.requested == []

    def test_about_blank(self, frame: HttpFrame, signals: Signals):
        """Test that navigating back to about:blank restores access."""
        frame.navigate("https://open.example/", signals.on_load, signals.on_error)
        frame.navigate("about:blank", signals.on_load, signals.on_error)

        assert signals.fired == ["load", "load"]
        assert frame.window_location() == "about:blank"
        assert frame.content_document is not None

    def test_sandbox_tokens(self, host_context, fetcher):
        frame = HttpFrame(host_context, fetcher, sandbox=["allow-scripts"])

        assert frame.sandbox == ("allow-scripts",)
