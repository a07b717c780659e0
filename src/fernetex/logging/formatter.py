"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

from fernetex.constants import SERVICE_NAME


class JSONLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "DEBUG", "service": "fernetex",
         "logger": "fernetex.codec", "message": "...", "error_kind": "..."}
    """

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Set by the codec on rejected tokens
        error_kind = getattr(record, "error_kind", None)
        if error_kind:
            entry["error_kind"] = str(error_kind)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
