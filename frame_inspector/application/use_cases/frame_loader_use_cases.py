"""Frame loader use cases - Functional programming style."""
import logging
from typing import Callable, Optional

from ...domain.entities.extraction_result import Severity
from ...domain.entities.inspector_session import InspectorSession
from ...domain.frame import FrameHandle
from ...domain.value_objects.presets import BLOCKED_PRESET, resolve_preset
from ..commands.load_preset_command import LoadPresetCommand
from ..services.guarded_read import guarded_read

logger = logging.getLogger(__name__)

ACCESS_CHECK_DELAY_SECONDS = 1.0

Schedule = Callable[[float, Callable[[], None]], object]


def edit_target(session: InspectorSession, target: str) -> None:
    """Replace the target reference with a user-typed value."""
    session.target = target


def load_frame(
    session: InspectorSession,
    frame: Optional[FrameHandle],
    schedule: Schedule,
    access_check_delay: float = ACCESS_CHECK_DELAY_SECONDS
) -> bool:
    """
    Load the session target into the frame.

    Returns:
        True when a navigation was started
    """
    target = session.target
    if not target:
        session.log("Please enter a URL", Severity.ERROR)
        return False

    session.update_status("Loading...", Severity.WARNING)
    session.log(f"Loading iframe with URL: {target}")

    if frame is None:
        logger.warning("Load requested with no frame mounted")
        return False

    def on_load() -> None:
        session.update_status("Loaded", Severity.SUCCESS)
        session.log("Iframe loaded successfully", Severity.SUCCESS)
        schedule(access_check_delay, lambda: verify_content_access(session, frame))

    def on_error() -> None:
        session.update_status("Load Error", Severity.ERROR)
        session.log(
            "Failed to load iframe - this could be due to network issues or security headers",
            Severity.ERROR
        )

    frame.navigate(target, on_load, on_error)
    logger.info(f"Frame navigation started for {target}")
    return True


def verify_content_access(session: InspectorSession, frame: FrameHandle) -> None:
    """
    Re-check a loaded frame and flag network pages whose document is unreachable.

    Browsers still fire the load signal for pages refused by X-Frame-Options or
    CSP frame-ancestors, so this delayed check is what surfaces the block.
    """
    document_read = guarded_read(lambda: frame.content_document)
    if not document_read.ok:
        session.log("Cross-origin access restrictions detected", Severity.INFO)
        return

    if document_read.value is None and frame.src.startswith("http"):
        session.log("Content may be blocked by X-Frame-Options or CSP headers", Severity.WARNING)
        session.update_status("Content Blocked", Severity.WARNING)


def load_preset(
    session: InspectorSession,
    frame: Optional[FrameHandle],
    command: LoadPresetCommand,
    schedule: Schedule,
    access_check_delay: float = ACCESS_CHECK_DELAY_SECONDS
) -> bool:
    """
    Point the session at a preset target and reload after a short delay.

    Returns:
        True when the preset exists and a reload was scheduled
    """
    target = resolve_preset(command.preset)
    if target is None:
        logger.warning(f"Unknown preset requested: {command.preset}")
        return False

    session.target = target

    if command.preset == BLOCKED_PRESET:
        session.log("Loading blocked test page (demonstrates X-Frame-Options: DENY)", Severity.WARNING)

    schedule(
        command.delay_seconds,
        lambda: load_frame(session, frame, schedule, access_check_delay)
    )
    return True
