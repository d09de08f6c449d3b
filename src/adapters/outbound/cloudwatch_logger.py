"""CloudWatch Logger Adapter - Structured JSON records on top of a channel."""
import json
import logging
from datetime import datetime
from typing import Any

from src.domain.value_objects import LogLevel


class CloudWatchLogger:
    """
    Implementation of LoggerPort that writes structured JSON logs.

    Each record is a single JSON document so that CloudWatch Logs
    Insights can query its fields. Level filtering is left to the
    channel's logger.
    """

    def __init__(self, logger: logging.Logger, context: dict | None = None):
        """
        Initialize the CloudWatch logger.

        Args:
            logger: Channel logger built by the log manager
            context: Additional context to include in all log entries
        """
        self._logger = logger
        self._context = context or {}

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self.log("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self.log("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self.log("warning", message, **kwargs)

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        """Log an error message, optionally with exception details."""
        if exception:
            kwargs["error"] = str(exception)
            kwargs["error_type"] = type(exception).__name__
        self.log("error", message, **kwargs)

    def set_context(self, **kwargs: Any) -> None:
        """
        Set additional context to include in all log entries.

        Useful for adding request_id, account_id, etc.
        """
        self._context.update(kwargs)

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """
        Log a message at a named level - outputs JSON.

        Raises:
            ValueError: If the level name is unknown
        """
        log_level = LogLevel.from_name(level)
        if not self._logger.isEnabledFor(log_level.numeric):
            return

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": log_level.value.upper(),
            "message": message,
            **self._context,
            **kwargs,
        }
        self._logger.log(log_level.numeric, json.dumps(log_entry, default=str))
