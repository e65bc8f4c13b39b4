"""Frame inspector - same-origin policy exploration toolkit."""

__version__ = "1.0.0"
