"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle for efficient I/O.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from risparse.audit.models import LogEvent
from risparse.models import Citation
from risparse.utils import calculate_string_sha256, get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write for durability.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = log_path

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
        source: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "citation_parsed").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        source : str | None, optional
            Source identifier (input file name), if any.
        """
        if data is None:
            data = {}

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            source=source,
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
        citations_parsed: int | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed", "partial").
        duration_seconds : float
            Total execution time in seconds.
        citations_parsed : int | None, optional
            Total citations parsed.
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if citations_parsed is not None:
            data["citations_parsed"] = citations_parsed

        self.event("run_finished", data=data)

    def citation_parsed(
        self,
        citation: Citation,
        text: str,
        source: str | None = None,
    ) -> None:
        """Log citation_parsed event.

        Parameters
        ----------
        citation : Citation
            Parsed citation.
        text : str
            Text the citation was parsed from, for the source digest.
        source : str | None, optional
            Source identifier.
        """
        self.event(
            "citation_parsed",
            data={
                "reference_type": str(citation.reference_type),
                "authors": len(citation.authors),
                "keywords": len(citation.keywords),
                "unknown_tags": len(citation.unknown_tags),
                "sha256": calculate_string_sha256(text),
            },
            source=source,
        )

    def parse_failed(self, exc: Exception, source: str | None = None) -> None:
        """Log parse_failed event for an input that is not a valid citation.

        Parameters
        ----------
        exc : Exception
            Error raised by the parser.
        source : str | None, optional
            Source identifier.
        """
        self.event(
            "parse_failed",
            data={"exception_class": type(exc).__name__, "message": str(exc)},
            level="WARN",
            source=source,
        )

    def error(
        self,
        exception_class: str,
        message: str,
        source: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        source : str | None, optional
            Source where error occurred.
        traceback : str | None, optional
            Stack trace (only in verbose mode).
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if traceback is not None:
            data["traceback"] = traceback

        self.event("error", data=data, source=source, level="ERROR")
