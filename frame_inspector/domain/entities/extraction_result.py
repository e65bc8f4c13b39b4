"""Extraction result entities - Domain model for probe outcomes."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any
from enum import Enum


class Severity(str, Enum):
    """Severity enumeration shared by results, log entries and frame status."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ExtractionResult:
    """Extraction result - immutable outcome of a single probe."""
    title: str
    content: str
    severity: Severity = Severity.INFO

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "title": self.title,
            "content": self.content,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class LogEntry:
    """Console log entry - immutable."""
    message: str
    severity: Severity = Severity.INFO
    timestamp: datetime = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary."""
        return {
            "message": self.message,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class FrameStatus:
    """Frame load status - overwritten, never accumulated."""
    label: str
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        """Convert status to dictionary."""
        return {"label": self.label, "severity": self.severity.value}
