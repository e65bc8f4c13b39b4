"""
Headless frame inspection - loads a target into a frame and runs every probe.

Prints the resulting status badge, results panel and console panel as JSON.
Preset names (same-origin, form-test, secure-test, blocked-test, google,
data-url) are accepted in place of a target.

Usage:
    python -m frame_inspector.inspect_frame <target-or-preset>

The frame is hosted at FRAME_INSPECTOR_HOST_ORIGIN; relative targets such as
/api/test-pages/same-origin are fetched from there, so the API should be running.
"""
import json
import logging
import sys
from typing import Any, Dict, List

from dotenv import load_dotenv

from .application.commands.load_preset_command import LoadPresetCommand
from .application.use_cases.frame_loader_use_cases import (
    ACCESS_CHECK_DELAY_SECONDS,
    Schedule,
    edit_target,
    load_frame,
    load_preset,
)
from .application.use_cases.probe_use_cases import (
    attempt_form_interaction,
    gather_basic_info,
    gather_document_info,
    gather_network_info,
)
from .config.config import get_fetch_timeout, get_host_origin, get_log_level, get_user_agent
from .domain.entities.inspector_session import InspectorSession
from .domain.frame import FrameHandle
from .domain.value_objects.host_context import HostContext
from .domain.value_objects.presets import PRESETS
from .infrastructure.frame import HttpFrame, build_requests_fetcher
from .infrastructure.scheduling import blocking_schedule
from .presentation.views.panels import render_console_panel, render_results_panel, render_status_badge

logger = logging.getLogger(__name__)


def run_inspection(
    target: str,
    frame: FrameHandle,
    host: HostContext,
    schedule: Schedule = blocking_schedule,
    access_check_delay: float = ACCESS_CHECK_DELAY_SECONDS
) -> InspectorSession:
    """Load target (or preset) into frame and run the four probes in order."""
    session = InspectorSession()

    if target in PRESETS:
        load_preset(session, frame, LoadPresetCommand(preset=target), schedule, access_check_delay)
    else:
        edit_target(session, target)
        load_frame(session, frame, schedule, access_check_delay)

    gather_basic_info(session, frame)
    gather_document_info(session, frame)
    gather_network_info(session, frame, host)
    attempt_form_interaction(session, frame)

    logger.info(f"Inspection of {session.target} produced {len(session.results)} results")
    return session


def build_report(session: InspectorSession) -> Dict[str, Any]:
    """Render a session into a JSON-ready report."""
    console: List[Dict[str, str]] = render_console_panel(session.console)
    return {
        "target": session.target,
        "status": render_status_badge(session.status),
        "results": render_results_panel(session.results),
        "console": console,
    }


def main(argv: List[str]) -> int:
    if len(argv) < 2:
        print(__doc__.strip())
        return 1

    host = HostContext(origin=get_host_origin(), user_agent=get_user_agent())
    frame = HttpFrame(host, build_requests_fetcher(host.user_agent, get_fetch_timeout()))

    session = run_inspection(argv[1], frame, host)
    print(json.dumps(build_report(session), indent=2, ensure_ascii=False))
    return 0


def cli() -> None:
    """Console script entrypoint."""
    load_dotenv()
    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
