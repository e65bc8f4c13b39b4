"""Extraction probe use cases - Functional programming style.

Each probe is a best-effort read against an embedded frame. Privileged reads
go through guarded_read(), so a cross-origin violation either degrades a
single field to a sentinel or ends the probe with an error result; it never
escapes the probe. Every probe appends exactly one result to the session.
"""
import logging
import random
import string
from typing import Any, Callable, Dict, Optional

from ...domain.entities.extraction_result import ExtractionResult, Severity
from ...domain.entities.inspector_session import InspectorSession
from ...domain.frame import FrameDocument, FrameHandle
from ...domain.value_objects.host_context import HostContext
from ...domain.value_objects.origin import origin_of
from ..services.guarded_read import format_error, format_report, guarded_read, require

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200
USER_AGENT_LENGTH = 100
FILLABLE_INPUT_TYPES = ("text", "email")


def _random_token() -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=6))


def _succeed(
    session: InspectorSession,
    title: str,
    info: Dict[str, Any],
    severity: Severity,
    message: str
) -> ExtractionResult:
    result = session.add_result(title, format_report(info), severity)
    session.log(message, Severity.SUCCESS)
    return result


def _fail(session: InspectorSession, title: str, context: str, error: Optional[str]) -> ExtractionResult:
    error_msg = format_error(context, error)
    result = session.add_result(title, error_msg, Severity.ERROR)
    session.log(error_msg, Severity.ERROR)
    logger.info(f"Probe blocked: {error_msg}")
    return result


def gather_basic_info(session: InspectorSession, frame: Optional[FrameHandle]) -> Optional[ExtractionResult]:
    """
    Report frame element properties, plus window location when reachable.

    A blocked location read is reported inline; the overall result stays a
    success because the element properties are always available.
    """
    if frame is None:
        return None

    session.log("Attempting to gather basic iframe information...")

    baseline = guarded_read(lambda: {
        "Source URL": frame.src,
        "Content Window": "Available" if frame.has_window else "Not Available",
        "Width": f"{frame.width}px",
        "Height": f"{frame.height}px",
        "Loading State": "Loaded" if frame.content_document is not None else "Loading/Blocked",
    })
    if not baseline.ok:
        return _fail(session, "Basic Properties Error", "Error gathering basic info", baseline.error)

    info = dict(baseline.value)
    if frame.has_window:
        location = guarded_read(lambda: (frame.window_location(), frame.window_origin()))
        if location.ok:
            info["Window Location"], info["Window Origin"] = location.value
        else:
            info["Window Location"] = f"BLOCKED: {location.error}"
            session.log("Cross-origin access blocked for location", Severity.WARNING)

    return _succeed(
        session, "Basic Iframe Properties", info, Severity.SUCCESS,
        "Basic information gathered successfully"
    )


def _text_preview(document: FrameDocument) -> str:
    text = document.body_text()
    if text is None:
        return "No body content"
    preview = text[:PREVIEW_LENGTH]
    return preview + ("..." if len(preview) == PREVIEW_LENGTH else "")


def gather_document_info(session: InspectorSession, frame: Optional[FrameHandle]) -> Optional[ExtractionResult]:
    """Report document metadata and a body text preview; requires same-origin access."""
    if frame is None:
        return None

    session.log("Attempting to access iframe document content...")

    document_read = guarded_read(
        lambda: require(frame.content_document, "Document access blocked (likely cross-origin)")
    )
    if not document_read.ok:
        return _fail(session, "Document Access Blocked", "Cannot access document", document_read.error)

    document = document_read.value
    details = guarded_read(lambda: {
        "Title": document.title or "No title",
        "URL": document.url,
        "Domain": document.domain,
        "Ready State": document.ready_state,
        "Character Set": document.character_set,
        "Elements Count": str(document.element_count()),
        "Forms Count": str(len(document.forms())),
        "Images Count": str(document.image_count()),
        "Links Count": str(document.link_count()),
    })
    if not details.ok:
        return _fail(session, "Document Access Blocked", "Cannot access document", details.error)

    info = dict(details.value)
    info["Body Text Preview"] = guarded_read(lambda: _text_preview(document)).value_or("Access denied")

    return _succeed(
        session, "Document Information", info, Severity.SUCCESS,
        "Document information accessed successfully"
    )


def _network_fields(frame: FrameHandle, host: HostContext) -> Dict[str, str]:
    info = {
        "Iframe Source": frame.src,
        "Current Origin": host.normalized_origin,
        "Protocol": host.protocol,
        "User Agent": host.user_agent[:USER_AGENT_LENGTH] + "...",
    }

    frame_origin = origin_of(frame.src)
    if frame_origin is None:
        info["Iframe Origin"] = "Cannot determine (data URL or invalid)"
    else:
        info["Iframe Origin"] = frame_origin
        info["Same Origin"] = "Yes" if frame_origin == host.normalized_origin else "No"

    sandbox = list(frame.sandbox)
    info["Sandbox Attributes"] = " ".join(sandbox) if sandbox else "None"
    return info


def _referrer(frame: FrameHandle) -> Optional[str]:
    document = frame.content_document
    if document is None:
        return None
    return document.referrer or "None"


def gather_network_info(
    session: InspectorSession,
    frame: Optional[FrameHandle],
    host: HostContext
) -> Optional[ExtractionResult]:
    """Report source, origin comparison, sandbox and referrer details."""
    if frame is None:
        return None

    session.log("Gathering network and security information...")

    baseline = guarded_read(lambda: _network_fields(frame, host))
    if not baseline.ok:
        return _fail(session, "Network Information Error", "Error gathering network info", baseline.error)

    info = dict(baseline.value)
    referrer = guarded_read(lambda: _referrer(frame))
    if not referrer.ok:
        info["Referrer"] = "Access blocked"
    elif referrer.value is not None:
        info["Referrer"] = referrer.value

    return _succeed(
        session, "Network & Security Information", info, Severity.INFO,
        "Network information gathered"
    )


def _interact_with_forms(document: FrameDocument, random_token: Callable[[], str]) -> Dict[str, str]:
    forms = document.forms()
    info = {
        "Forms Found": str(len(forms)),
        "Input Elements": str(len(document.inputs())),
    }

    if forms:
        first_form = forms[0]
        info["First Form Action"] = first_form.action or "No action"
        info["First Form Method"] = first_form.method or "GET"

        filled_inputs = 0
        for form_input in first_form.inputs():
            if form_input.type in FILLABLE_INPUT_TYPES:
                form_input.value = f"Test value {random_token()}"
                filled_inputs += 1
        info["Inputs Modified"] = str(filled_inputs)

    return info


def attempt_form_interaction(
    session: InspectorSession,
    frame: Optional[FrameHandle],
    random_token: Callable[[], str] = _random_token
) -> Optional[ExtractionResult]:
    """Count forms and fill text/email inputs of the first one; requires same-origin access."""
    if frame is None:
        return None

    session.log("Attempting to interact with iframe forms...")

    document_read = guarded_read(
        lambda: require(frame.content_document, "Document access blocked - cannot interact with forms")
    )
    if not document_read.ok:
        return _fail(session, "Form Interaction Blocked", "Cannot interact with forms", document_read.error)

    interaction = guarded_read(lambda: _interact_with_forms(document_read.value, random_token))
    if not interaction.ok:
        return _fail(session, "Form Interaction Blocked", "Cannot interact with forms", interaction.error)

    return _succeed(
        session, "Form Interaction Results", interaction.value, Severity.SUCCESS,
        "Form interaction completed successfully"
    )
