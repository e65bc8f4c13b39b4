"""Pytest configuration and shared fixtures."""
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from frame_inspector.domain.entities.inspector_session import InspectorSession
from frame_inspector.domain.frame import (
    FrameAccessError, FrameDocument, FrameForm, FrameHandle, FrameInput, LoadCallback
)
from frame_inspector.domain.value_objects.host_context import HostContext

HOST_ORIGIN = "http://localhost:5000"
CROSS_ORIGIN_MESSAGE = (
    'Blocked a frame with origin "http://localhost:5000" from accessing a cross-origin frame.'
)


class FakeInput(FrameInput):
    """In-memory input element."""

    def __init__(self, type_: str = "text", value: str = ""):
        self._type = type_
        self._value = value

    @property
    def type(self) -> str:
        return self._type

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        self._value = new_value


class FakeForm(FrameForm):
    """In-memory form element."""

    def __init__(self, action: str = "", method: str = "", inputs: Sequence[FakeInput] = ()):
        self._action = action
        self._method = method
        self._inputs = list(inputs)

    @property
    def action(self) -> str:
        return self._action

    @property
    def method(self) -> str:
        return self._method

    def inputs(self) -> Sequence[FrameInput]:
        return self._inputs


class FakeDocument(FrameDocument):
    """In-memory document; body_error makes the text preview read fail."""

    def __init__(
        self,
        title: str = "Fake Page",
        url: str = "http://localhost:5000/api/test-pages/same-origin",
        body: Optional[str] = "Hello from the fake page",
        forms: Sequence[FakeForm] = (),
        extra_inputs: Sequence[FakeInput] = (),
        referrer: str = "http://localhost:5000/",
        body_error: Optional[str] = None,
        forms_error: Optional[str] = None,
    ):
        self._title = title
        self._url = url
        self._body = body
        self._forms = list(forms)
        self._extra_inputs = list(extra_inputs)
        self._referrer = referrer
        self._body_error = body_error
        self._forms_error = forms_error

    @property
    def title(self) -> str:
        return self._title

    @property
    def url(self) -> str:
        return self._url

    @property
    def domain(self) -> str:
        return "localhost"

    @property
    def ready_state(self) -> str:
        return "complete"

    @property
    def character_set(self) -> str:
        return "UTF-8"

    @property
    def referrer(self) -> str:
        return self._referrer

    def element_count(self) -> int:
        return 12

    def forms(self) -> Sequence[FrameForm]:
        if self._forms_error:
            raise FrameAccessError(self._forms_error)
        return self._forms

    def inputs(self) -> Sequence[FrameInput]:
        form_inputs = [field for form in self._forms for field in form.inputs()]
        return form_inputs + self._extra_inputs

    def image_count(self) -> int:
        return 2

    def link_count(self) -> int:
        return 3

    def body_text(self) -> Optional[str]:
        if self._body_error:
            raise FrameAccessError(self._body_error)
        return self._body


class FakeFrame(FrameHandle):
    """
    Frame double.

    document=None models a cross-origin frame: no document reference and a
    location read that raises FrameAccessError. complete_with chooses which
    completion signal navigate() fires ("load", "error", or None to leave it pending).
    """

    def __init__(
        self,
        src: str = "http://localhost:5000/api/test-pages/same-origin",
        document: Optional[FakeDocument] = None,
        sandbox: Sequence[str] = (),
        has_window: bool = True,
        complete_with: Optional[str] = "load",
        document_error: Optional[str] = None,
    ):
        self._src = src
        self.document = document
        self._sandbox = tuple(sandbox)
        self._has_window = has_window
        self.complete_with = complete_with
        self.document_error = document_error
        self.navigations: List[str] = []
        self._pending: Optional[Tuple[LoadCallback, LoadCallback]] = None

    @property
    def src(self) -> str:
        return self._src

    @property
    def has_window(self) -> bool:
        return self._has_window

    @property
    def width(self) -> int:
        return 800

    @property
    def height(self) -> int:
        return 384

    @property
    def sandbox(self) -> Sequence[str]:
        return self._sandbox

    @property
    def content_document(self) -> Optional[FrameDocument]:
        if self.document_error:
            raise FrameAccessError(self.document_error)
        return self.document

    def window_location(self) -> str:
        if self.document is None:
            raise FrameAccessError(CROSS_ORIGIN_MESSAGE)
        return self.document.url

    def window_origin(self) -> str:
        if self.document is None:
            raise FrameAccessError(CROSS_ORIGIN_MESSAGE)
        return HOST_ORIGIN

    def navigate(self, target: str, on_load: LoadCallback, on_error: LoadCallback) -> None:
        self._src = target
        self.navigations.append(target)
        self._pending = (on_load, on_error)
        if self.complete_with == "load":
            self.fire_load()
        elif self.complete_with == "error":
            self.fire_error()

    def fire_load(self) -> None:
        if self._pending:
            on_load, _ = self._pending
            self._pending = None
            on_load()

    def fire_error(self) -> None:
        if self._pending:
            _, on_error = self._pending
            self._pending = None
            on_error()


class RecordingScheduler:
    """Scheduler double that records deferred callbacks until run_pending()."""

    def __init__(self):
        self.calls: List[Tuple[float, Callable[[], None]]] = []

    def __call__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.calls.append((delay_seconds, callback))

    @property
    def delays(self) -> List[float]:
        return [delay for delay, _ in self.calls]

    def run_pending(self) -> None:
        while self.calls:
            _, callback = self.calls.pop(0)
            callback()


@pytest.fixture
def sample_datetime() -> datetime:
    """Provide a fixed datetime for testing."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(sample_datetime: datetime) -> Callable[[], datetime]:
    """Clock that always returns sample_datetime."""
    return lambda: sample_datetime


@pytest.fixture
def session(fixed_clock) -> InspectorSession:
    """Provide a fresh inspector session."""
    return InspectorSession(clock=fixed_clock)


@pytest.fixture
def host_context() -> HostContext:
    """Provide the host page context the frame lives in."""
    return HostContext(
        origin=HOST_ORIGIN,
        user_agent="Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
                   "Chrome/124.0.0.0 Safari/537.36 frame-inspector-tests"
    )


@pytest.fixture
def doubles() -> SimpleNamespace:
    """Expose the frame test doubles."""
    return SimpleNamespace(
        Frame=FakeFrame,
        Document=FakeDocument,
        Form=FakeForm,
        Input=FakeInput,
    )


@pytest.fixture
def same_origin_frame() -> FakeFrame:
    """Frame whose document is reachable."""
    return FakeFrame(document=FakeDocument())


@pytest.fixture
def cross_origin_frame() -> FakeFrame:
    """Frame showing a cross-origin page."""
    return FakeFrame(src="https://www.google.com/", document=None)


@pytest.fixture
def scheduler() -> RecordingScheduler:
    """Provide a recording scheduler."""
    return RecordingScheduler()
