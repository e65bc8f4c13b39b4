"""Inspector session entity - Session-scoped UI state container."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List

from .extraction_result import ExtractionResult, LogEntry, FrameStatus, Severity, _now
from ..value_objects.presets import DEFAULT_TARGET

READY_STATUS = FrameStatus(label="Ready", severity=Severity.SUCCESS)


def _initial_console(clock: Callable[[], datetime]) -> List[LogEntry]:
    return [
        LogEntry("Iframe tool initialized", Severity.SUCCESS, clock()),
        LogEntry("Ready for extraction operations", Severity.INFO, clock()),
    ]


@dataclass
class InspectorSession:
    """
    Inspector session - owns the state the inspector panels render.

    Results and console entries are append-only; the only way to shrink them
    is clear_results() / clear_console(). Frame status is overwritten on each
    load lifecycle transition. A session has a single writer.
    """
    target: str = DEFAULT_TARGET
    status: FrameStatus = READY_STATUS
    clock: Callable[[], datetime] = _now
    results: List[ExtractionResult] = field(default_factory=list)
    console: List[LogEntry] = field(default_factory=list)

    def __post_init__(self):
        if not self.console:
            self.console = _initial_console(self.clock)

    def log(self, message: str, severity: Severity = Severity.INFO) -> LogEntry:
        """Append a console entry."""
        entry = LogEntry(message=message, severity=severity, timestamp=self.clock())
        self.console.append(entry)
        return entry

    def add_result(self, title: str, content: str, severity: Severity = Severity.INFO) -> ExtractionResult:
        """Append an extraction result."""
        result = ExtractionResult(title=title, content=content, severity=severity)
        self.results.append(result)
        return result

    def update_status(self, label: str, severity: Severity = Severity.INFO) -> FrameStatus:
        """Overwrite the current frame status."""
        self.status = FrameStatus(label=label, severity=severity)
        return self.status

    def clear_results(self) -> None:
        """Drop every result and note it on the console."""
        self.results = []
        self.log("Results cleared", Severity.INFO)

    def clear_console(self) -> None:
        """Reset the console to a single marker entry."""
        self.console = [LogEntry("Console cleared", Severity.INFO, self.clock())]
