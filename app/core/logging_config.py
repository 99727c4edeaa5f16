"""
Logging setup for the Jobs API.

Log calls attach request context through ``extra=``:
- ``job_id`` on anything that touches a single job
- ``method`` / ``path`` on rejected requests

The JSON formatter lifts those onto the top level of each record; the plain
formatter appends job_id when there is one.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO
from pythonjsonlogger.json import JsonFormatter

CONTEXT_FIELDS = ("job_id", "method", "path")


class JobsJsonFormatter(JsonFormatter):
    """One JSON object per line, with the service name and request context."""

    def __init__(self, *args, service: str = "jobs-api", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = self.service

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                # UUIDs and the like go out as plain strings
                log_record[field] = str(value)


class PlainFormatter(logging.Formatter):
    """Human-readable lines for local development."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        job_id = getattr(record, "job_id", None)
        return f"{line} [job_id={job_id}]" if job_id is not None else line


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service: str = "jobs-api",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure root logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines (production) or plain text (development)
        service: Value of the "service" field in JSON records
        stream: Where to write; defaults to stdout
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if json_logs:
        handler.setFormatter(JobsJsonFormatter("%(timestamp)s %(level)s %(logger)s %(message)s", service=service))
    else:
        handler.setFormatter(PlainFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(handler)

    # SQL echo is only wanted when asked for explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
