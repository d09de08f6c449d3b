"""Domain errors."""


class ChannelConfigurationError(Exception):
    """
    A log channel could not be resolved or built.

    Raised while logging is being configured at startup, never while a
    record is being written.
    """

    def __init__(self, message: str, channel: str | None = None):
        super().__init__(message)
        self.channel = channel
