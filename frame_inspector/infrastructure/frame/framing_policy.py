"""Framing policy - evaluates X-Frame-Options and CSP frame-ancestors."""
import logging
from typing import List, Mapping, Optional

from ...domain.value_objects.origin import origin_of

logger = logging.getLogger(__name__)


def _frame_ancestors(csp: str) -> Optional[List[str]]:
    """Return the frame-ancestors source list of a CSP header, if declared."""
    for directive in csp.split(";"):
        tokens = directive.split()
        if tokens and tokens[0].lower() == "frame-ancestors":
            return tokens[1:]
    return None


def _ancestor_allowed(source: str, document_origin: Optional[str], host_origin: str) -> bool:
    source = source.strip()
    lowered = source.lower()
    if lowered == "'self'":
        return document_origin is not None and document_origin == host_origin
    if lowered == "*":
        return True
    if lowered.endswith(":") and "/" not in lowered:
        return host_origin.startswith(lowered)
    return origin_of(source) == host_origin


def is_framing_allowed(headers: Mapping[str, str], document_url: str, host_origin: str) -> bool:
    """
    Decide whether a response may be rendered inside a frame on host_origin.

    CSP frame-ancestors, when declared, takes precedence over X-Frame-Options.
    """
    document_origin = origin_of(document_url)
    host_origin = origin_of(host_origin) or host_origin

    ancestors = _frame_ancestors(headers.get("Content-Security-Policy", ""))
    if ancestors is not None:
        if any(source.lower() == "'none'" for source in ancestors):
            return False
        return any(_ancestor_allowed(source, document_origin, host_origin) for source in ancestors)

    x_frame_options = headers.get("X-Frame-Options", "").strip().lower()
    if x_frame_options == "deny":
        return False
    if x_frame_options == "sameorigin":
        return document_origin == host_origin
    if x_frame_options:
        logger.debug(f"Ignoring unsupported X-Frame-Options value: {x_frame_options}")
    return True
