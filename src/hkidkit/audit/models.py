"""Data models for audit logging."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LogEvent"]


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Unique run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data payload.
    line : int | None
        1-based input line number if the event concerns a single value.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    line: int | None = None
