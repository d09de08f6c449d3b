"""Console Logger Adapter - Stream channels with console formatting."""
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from src.adapters.outbound.channel_logger import channel_logger
from src.domain.entities import LogChannelConfig
from src.domain.value_objects import LogLevel


class ConsoleFormatter(logging.Formatter):
    """
    Format records as ``[timestamp] LEVEL: message (k=v | ...)``.

    Structured fields are taken from the record's ``fields`` attribute.
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "NOTICE": "\033[34m",    # Blue
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = False):
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        timestamp = created.strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname
        if self._use_colors:
            level = f"{self.COLORS.get(level, '')}{level}{self.RESET}"

        output = f"[{timestamp}] {level}: {record.getMessage()}"

        fields = getattr(record, "fields", None)
        if fields:
            details = " | ".join(f"{k}={v}" for k, v in fields.items())
            output += f" ({details})"

        if record.exc_info:
            output += "\n" + self.formatException(record.exc_info)
        return output


class StderrLoggerFactory:
    """Factory for channels writing to standard error."""

    def __init__(self, use_colors: bool = True):
        self._use_colors = use_colors

    def __call__(self, config: LogChannelConfig) -> logging.Logger:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(config.level.numeric)
        handler.setFormatter(ConsoleFormatter(use_colors=self._use_colors and sys.stderr.isatty()))

        logger = channel_logger(config)
        logger.addHandler(handler)
        return logger


class ConsoleLogger:
    """
    Implementation of LoggerPort for console channels.

    Keyword arguments are handed to the formatter as ``k=v`` fields.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

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

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Log a message at a named level."""
        log_level = LogLevel.from_name(level)
        self._logger.log(log_level.numeric, message, extra={"fields": kwargs})
