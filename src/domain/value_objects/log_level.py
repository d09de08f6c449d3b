"""Log level enumeration for channel severity thresholds."""
import logging
from enum import Enum

from src.domain.errors import ChannelConfigurationError

# Severities without a stdlib counterpart sit between the standard levels.
NOTICE = 25
ALERT = 55
EMERGENCY = 60

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")


class LogLevel(str, Enum):
    """Minimum severity a channel accepts."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"

    @property
    def numeric(self) -> int:
        """Return the stdlib logging level number."""
        mapping = {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.NOTICE: NOTICE,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.CRITICAL: logging.CRITICAL,
            LogLevel.ALERT: ALERT,
            LogLevel.EMERGENCY: EMERGENCY,
        }
        return mapping[self]

    @classmethod
    def from_name(cls, value: "str | LogLevel") -> "LogLevel":
        """
        Look up a level by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, LogLevel):
            return value
        return cls(value.strip().lower())

    @classmethod
    def parse(cls, value: "str | LogLevel") -> "LogLevel":
        """
        Parse a level name, case-insensitively.

        Raises:
            ChannelConfigurationError: If the name is not a known level
        """
        try:
            return cls.from_name(value)
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ChannelConfigurationError(
                f"Unknown log level {value!r} (expected one of: {choices})"
            ) from None
