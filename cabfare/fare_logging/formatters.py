"""Log formatters for fare quoting, as JSON or human-readable lines."""

import json
import logging
from datetime import UTC, datetime

_PLACEHOLDER = "-"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the fare context fields when set."""

    CONTEXT_FIELDS = ("cab_id", "trip_type", "correlation_id", "fare", "cache_hit")

    def __init__(self, environment: str = "development"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": self.environment,
        }

        for field in self.CONTEXT_FIELDS:
            value = getattr(record, field, _PLACEHOLDER)
            if value != _PLACEHOLDER:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class DevFormatter(logging.Formatter):
    """Single-line format showing which cab and trip type a record belongs to."""

    def __init__(self) -> None:
        super().__init__(
            fmt=(
                "%(asctime)s [%(levelname)8s] [cab=%(cab_id)s trip=%(trip_type)s] "
                "%(name)s: %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )
