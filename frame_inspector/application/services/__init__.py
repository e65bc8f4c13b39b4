"""Application services package."""
from .guarded_read import FieldRead, guarded_read, require, format_report, format_error

__all__ = [
    "FieldRead",
    "guarded_read",
    "require",
    "format_report",
    "format_error",
]
