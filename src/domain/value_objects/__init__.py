"""Value objects for log channel configuration."""
from src.domain.value_objects.driver import Driver
from src.domain.value_objects.log_level import LogLevel

__all__ = ["Driver", "LogLevel"]
