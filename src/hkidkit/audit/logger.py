"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle. Identifier values are never written in clear;
events carry an HMAC of the cleaned value keyed with a per-run secret
that is never logged.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from hkidkit.audit.digests import new_digest_key, value_digest
from hkidkit.audit.helpers import get_iso_timestamp
from hkidkit.audit.models import LogEvent
from hkidkit.models import Invalid, ValidationOutcome

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    """

    def __init__(self, run_id: str, log_path: Path, digest_key: bytes | None = None) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        digest_key : bytes | None, optional
            Key for value digests. A fresh random key is drawn when omitted,
            so digests from different runs cannot be matched.
        """
        self.run_id = run_id
        self.log_path = log_path
        self._digest_key = digest_key if digest_key is not None else new_digest_key()

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        line: int | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "run_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        line : int | None, optional
            Input line number if the event concerns a single value.
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            line=line,
        )
        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        json.dump(event_dict, self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={"command": command, "parameters": parameters},
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success" or "failed").
        duration_seconds : float
            Total execution time in seconds.
        counters : dict[str, int] | None, optional
            Final counters for the run.
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if counters:
            data["counters"] = counters

        self.event("run_finished", data=data, level="INFO" if status == "success" else "ERROR")

    def value_checked(self, line: int, cleaned: str, outcome: ValidationOutcome) -> None:
        """Log value_checked event for one validated input line.

        Parameters
        ----------
        line : int
            1-based input line number.
        cleaned : str
            Cleaned input value; only its keyed digest is logged.
        outcome : ValidationOutcome
            Validation outcome.
        """
        data: dict[str, Any] = {
            "value_digest": value_digest(self._digest_key, cleaned),
            "valid": outcome.is_valid,
        }
        level = "INFO"
        if isinstance(outcome, Invalid):
            data["error"] = outcome.kind.value
            level = "WARN"

        self.event("value_checked", data=data, level=level, line=line)

    def artifact_written(self, path: str, sha256: str, record_count: int | None = None) -> None:
        """Log artifact_written event.

        Parameters
        ----------
        path : str
            Path to artifact.
        sha256 : str
            SHA256 hash of artifact.
        record_count : int | None, optional
            Number of records in artifact.
        """
        data: dict[str, Any] = {"path": path, "sha256": sha256}
        if record_count is not None:
            data["record_count"] = record_count

        self.event("artifact_written", data=data)

    def error(self, exception_class: str, message: str) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
        )
