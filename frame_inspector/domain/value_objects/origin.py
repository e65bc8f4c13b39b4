"""Origin value object helpers."""
import re
from typing import Optional
from urllib.parse import urlsplit

OPAQUE_ORIGIN = "null"

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def origin_of(url: str) -> Optional[str]:
    """
    Serialize the origin of an absolute URL.

    Hierarchical schemes yield ``scheme://host[:port]`` with default ports
    dropped; every other scheme (data:, about:, file:) yields the opaque
    origin ``"null"``. Relative or unparseable input yields None.
    """
    if not url or not _SCHEME_RE.match(url):
        return None
    try:
        parts = urlsplit(url.strip())
        scheme = parts.scheme.lower()
        if scheme not in _DEFAULT_PORTS:
            return OPAQUE_ORIGIN
        host = parts.hostname
        port = parts.port
    except ValueError:
        return None
    if not host:
        return None
    if ":" in host:
        host = f"[{host}]"
    if port is None or port == _DEFAULT_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def is_same_origin(url: str, other_origin: str) -> bool:
    """Check whether url shares a (non-opaque) origin with other_origin."""
    origin = origin_of(url)
    if origin is None or origin == OPAQUE_ORIGIN:
        return False
    return origin == (origin_of(other_origin) or other_origin)
