"""Logger Port - Interface for structured logging operations."""
from typing import Any, Protocol


class LoggerPort(Protocol):
    """
    Port interface for structured logging on top of a channel.

    Keyword arguments become fields of the emitted record.
    """

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        ...

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        ...

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        ...

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        """Log an error message, optionally with exception details."""
        ...

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Log a message at any named channel level (notice, alert, ...)."""
        ...
