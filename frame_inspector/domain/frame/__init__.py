"""Frame access domain package."""
from .frame_access import (
    FrameAccessError,
    FrameDocument,
    FrameForm,
    FrameHandle,
    FrameInput,
    LoadCallback,
)

__all__ = [
    "FrameAccessError",
    "FrameDocument",
    "FrameForm",
    "FrameHandle",
    "FrameInput",
    "LoadCallback",
]
