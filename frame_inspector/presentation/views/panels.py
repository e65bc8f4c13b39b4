"""Panel views - Render inspector session state for display."""
from datetime import datetime
from typing import Any, Dict, List, Sequence

from ...domain.entities.extraction_result import ExtractionResult, FrameStatus, LogEntry, Severity

EMPTY_RESULTS_HINT = "Click any extraction button to see results here"

RESULT_CLASSES = {
    Severity.ERROR: "border-destructive bg-red-950/20",
    Severity.WARNING: "border-yellow-500 bg-yellow-950/20",
    Severity.SUCCESS: "border-green-500 bg-green-950/20",
}
CONSOLE_CLASSES = {
    Severity.ERROR: "status-error",
    Severity.WARNING: "status-warning",
    Severity.SUCCESS: "status-success",
}
STATUS_BADGE_VARIANTS = {
    Severity.ERROR: "destructive",
    Severity.WARNING: "secondary",
    Severity.SUCCESS: "default",
}


def result_class(severity: Severity) -> str:
    return RESULT_CLASSES.get(severity, "border-border")


def console_class(severity: Severity) -> str:
    return CONSOLE_CLASSES.get(severity, "text-muted-foreground")


def status_badge_variant(severity: Severity) -> str:
    return STATUS_BADGE_VARIANTS.get(severity, "secondary")


def format_console_time(timestamp: datetime) -> str:
    """Format a timestamp as local wall-clock time."""
    return timestamp.astimezone().strftime("%H:%M:%S")


def render_results_panel(results: Sequence[ExtractionResult]) -> Dict[str, Any]:
    """Render results oldest first, or the empty-state hint."""
    return {
        "empty": not results,
        "hint": EMPTY_RESULTS_HINT if not results else None,
        "items": [
            {
                "index": index,
                "title": result.title,
                "content": result.content,
                "severity": result.severity.value,
                "css_class": result_class(result.severity),
                "badge_variant": "destructive" if result.severity == Severity.ERROR else "secondary",
            }
            for index, result in enumerate(results)
        ],
    }


def render_console_panel(entries: Sequence[LogEntry]) -> List[Dict[str, str]]:
    """Render console entries oldest first as ``[HH:MM:SS] message`` lines."""
    return [
        {
            "line": f"[{format_console_time(entry.timestamp)}] {entry.message}",
            "severity": entry.severity.value,
            "css_class": console_class(entry.severity),
        }
        for entry in entries
    ]


def render_status_badge(status: FrameStatus) -> Dict[str, str]:
    return {"label": status.label, "variant": status_badge_variant(status.severity)}
