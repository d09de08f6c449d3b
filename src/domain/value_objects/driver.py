"""Driver enumeration for log channel construction strategies."""
from enum import Enum


class Driver(str, Enum):
    """How a channel's handler is constructed."""

    CUSTOM = "custom"
    STDERR = "stderr"

    @property
    def is_delegated(self) -> bool:
        """Check if construction is delegated to the channel's `via` factory."""
        return self == Driver.CUSTOM
