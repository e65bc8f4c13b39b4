"""HTTP-backed frame - simulates a browser frame hosted at a fixed origin.

Navigation fetches the target (or decodes it, for data: URIs), applies the
framing headers, and then exposes the document only when the loaded page is
same-origin with the host. Pages refused by their framing headers still fire
the load callback, as browsers do; their document is simply unreachable.
"""
import base64
import binascii
import logging
from typing import Optional, Sequence, Tuple
from urllib.parse import unquote_to_bytes, urljoin

from ...domain.frame import FrameAccessError, FrameDocument, FrameHandle, LoadCallback
from ...domain.value_objects.host_context import HostContext
from ...domain.value_objects.origin import OPAQUE_ORIGIN, origin_of
from .framing_policy import is_framing_allowed
from .html_document import HtmlDocument
from .page_fetcher import PageFetcher, PageFetchError

logger = logging.getLogger(__name__)

ABOUT_BLANK = "about:blank"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 384


def decode_data_url(url: str) -> Tuple[str, Optional[str]]:
    """
    Decode a ``data:`` URL into its text payload and effective charset.

    The charset is None when undeclared or unknown; the payload is then decoded as UTF-8.

    Raises:
        ValueError: If the URL is not a well-formed data URL
    """
    header, sep, payload = url[len("data:"):].partition(",")
    if not url.startswith("data:") or not sep:
        raise ValueError(f"Malformed data URL: {url[:40]}")

    params = [part.strip() for part in header.split(";")]
    charset = None
    for param in params[1:]:
        if param.lower().startswith("charset="):
            charset = param.split("=", 1)[1]

    raw = unquote_to_bytes(payload)
    if params[-1].lower() == "base64":
        try:
            raw = base64.b64decode(raw)
        except binascii.Error as e:
            raise ValueError(f"Malformed base64 data URL: {e}") from e
    try:
        return raw.decode(charset or "utf-8", errors="replace"), charset
    except LookupError:
        # Unknown or non-text codec labels fall back to the default.
        logger.debug(f"Unknown data URL charset {charset!r}, decoding as utf-8")
        return raw.decode("utf-8", errors="replace"), None


class HttpFrame(FrameHandle):
    """Frame element whose content is loaded over HTTP."""

    def __init__(
        self,
        host: HostContext,
        fetch: PageFetcher,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        sandbox: Sequence[str] = ()
    ):
        self._host = host
        self._fetch = fetch
        self._width = width
        self._height = height
        self._sandbox = tuple(sandbox)
        self._src = ""
        self._location = ABOUT_BLANK
        self._document: Optional[FrameDocument] = HtmlDocument("", ABOUT_BLANK)
        self._accessible = True

    @property
    def src(self) -> str:
        return self._src

    @property
    def has_window(self) -> bool:
        return True

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def sandbox(self) -> Sequence[str]:
        return self._sandbox

    @property
    def content_document(self) -> Optional[FrameDocument]:
        return self._document if self._accessible else None

    def _check_access(self) -> None:
        if not self._accessible:
            raise FrameAccessError(
                f'Blocked a frame with origin "{self._host.normalized_origin}" '
                f"from accessing a cross-origin frame."
            )

    def window_location(self) -> str:
        self._check_access()
        return self._location

    def window_origin(self) -> str:
        self._check_access()
        if self._location == ABOUT_BLANK:
            return self._host.normalized_origin
        return origin_of(self._location) or OPAQUE_ORIGIN

    def _show(self, location: str, document: Optional[FrameDocument], accessible: bool) -> None:
        self._location = location
        self._document = document
        self._accessible = accessible

    def navigate(self, target: str, on_load: LoadCallback, on_error: LoadCallback) -> None:
        """Load target synchronously and fire exactly one of the callbacks."""
        if target.startswith("data:"):
            self._src = target
            self._navigate_data(target, on_load, on_error)
            return

        if target == ABOUT_BLANK:
            self._src = target
            self._show(ABOUT_BLANK, HtmlDocument("", ABOUT_BLANK), True)
            on_load()
            return

        url = urljoin(self._host.page_url, target)
        self._src = url
        if origin_of(url) in (None, OPAQUE_ORIGIN):
            logger.warning(f"Unsupported frame target: {target}")
            self._show(url, None, False)
            on_error()
            return

        self._navigate_http(url, on_load, on_error)

    def _navigate_data(self, target: str, on_load: LoadCallback, on_error: LoadCallback) -> None:
        try:
            html, charset = decode_data_url(target)
        except ValueError as e:
            logger.warning(f"Data URL load failed: {e}")
            self._show(target, None, False)
            on_error()
            return

        # data: documents get an opaque origin, so the host can never reach into them.
        self._show(target, HtmlDocument(html, target, charset=charset), False)
        on_load()

    def _navigate_http(self, url: str, on_load: LoadCallback, on_error: LoadCallback) -> None:
        try:
            page = self._fetch(url)
        except PageFetchError as e:
            logger.warning(f"Frame load failed for {url}: {e}")
            self._show(url, None, False)
            on_error()
            return

        if not is_framing_allowed(page.headers, page.url, self._host.origin):
            logger.info(f"Framing refused by response headers for {page.url}")
            self._show(page.url, None, False)
            on_load()
            return

        document = HtmlDocument(
            page.text,
            page.url,
            referrer=self._host.page_url,
            charset=page.encoding,
        )
        same_origin = origin_of(page.url) == self._host.normalized_origin
        self._show(page.url, document, same_origin)
        on_load()
