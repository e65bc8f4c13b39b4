"""Guarded field reads - tagged outcomes for privileged frame reads."""
from dataclasses import dataclass
from typing import Callable, Generic, Mapping, Optional, TypeVar

from ...domain.frame import FrameAccessError

T = TypeVar("T")


@dataclass(frozen=True)
class FieldRead(Generic[T]):
    """Outcome of a guarded read: either a value or the access error message."""
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    def value_or(self, fallback: T) -> T:
        """Return the read value, or fallback when the read was blocked."""
        return self.value if self.ok else fallback


def guarded_read(read: Callable[[], T]) -> FieldRead[T]:
    """
    Run a privileged read and capture a cross-origin violation as a value.

    Only FrameAccessError is captured; the message is kept verbatim so callers
    can surface exactly what the frame reported.
    """
    try:
        return FieldRead(ok=True, value=read())
    except FrameAccessError as e:
        return FieldRead(ok=False, error=str(e))


def require(value: Optional[T], message: str) -> T:
    """Raise FrameAccessError with message when value is missing."""
    if value is None:
        raise FrameAccessError(message)
    return value


def format_report(fields: Mapping[str, object]) -> str:
    """Render fields as ``key: value`` lines in insertion order."""
    return "\n".join(f"{key}: {value}" for key, value in fields.items())


def format_error(context: str, error: Optional[str]) -> str:
    """Render a probe failure as ``<context>: <message>``."""
    return f"{context}: {error}"
