"""Frame access contract - what a probe may read from an embedded frame.

A frame handle mirrors the surface a browser exposes for an embedded frame
element. Attributes of the element itself (source, size, sandbox) are always
readable. Anything behind the frame's window requires same-origin access: the
document reference is None when the frame is cross-origin, and reading the
window location raises FrameAccessError.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence


class FrameAccessError(Exception):
    """Raised when frame state is read across an origin boundary."""


LoadCallback = Callable[[], None]


class FrameInput(ABC):
    """Form input element."""

    @property
    @abstractmethod
    def type(self) -> str:
        ...

    @property
    @abstractmethod
    def value(self) -> str:
        ...

    @value.setter
    @abstractmethod
    def value(self, new_value: str) -> None:
        ...


class FrameForm(ABC):
    """Form element."""

    @property
    @abstractmethod
    def action(self) -> str:
        ...

    @property
    @abstractmethod
    def method(self) -> str:
        ...

    @abstractmethod
    def inputs(self) -> Sequence[FrameInput]:
        """Input elements owned by this form, in document order."""


class FrameDocument(ABC):
    """Document loaded inside a frame."""

    @property
    @abstractmethod
    def title(self) -> str:
        ...

    @property
    @abstractmethod
    def url(self) -> str:
        ...

    @property
    @abstractmethod
    def domain(self) -> str:
        ...

    @property
    @abstractmethod
    def ready_state(self) -> str:
        ...

    @property
    @abstractmethod
    def character_set(self) -> str:
        ...

    @property
    @abstractmethod
    def referrer(self) -> str:
        ...

    @abstractmethod
    def element_count(self) -> int:
        ...

    @abstractmethod
    def forms(self) -> Sequence[FrameForm]:
        ...

    @abstractmethod
    def inputs(self) -> Sequence[FrameInput]:
        """Every input element in the document."""

    @abstractmethod
    def image_count(self) -> int:
        ...

    @abstractmethod
    def link_count(self) -> int:
        ...

    @abstractmethod
    def body_text(self) -> Optional[str]:
        """Rendered body text, or None when the document has no body."""


class FrameHandle(ABC):
    """Embedded frame element."""

    @property
    @abstractmethod
    def src(self) -> str:
        ...

    @property
    @abstractmethod
    def has_window(self) -> bool:
        ...

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @property
    @abstractmethod
    def sandbox(self) -> Sequence[str]:
        ...

    @property
    @abstractmethod
    def content_document(self) -> Optional[FrameDocument]:
        """Document inside the frame; None when cross-origin or not loaded."""

    @abstractmethod
    def window_location(self) -> str:
        """Location href of the frame window. Raises FrameAccessError cross-origin."""

    @abstractmethod
    def window_origin(self) -> str:
        """Location origin of the frame window. Raises FrameAccessError cross-origin."""

    @abstractmethod
    def navigate(self, target: str, on_load: LoadCallback, on_error: LoadCallback) -> None:
        """
        Point the frame at target and arm one-shot completion callbacks.

        A later navigate supersedes callbacks that have not fired yet.
        """
