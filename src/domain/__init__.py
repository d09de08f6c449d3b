"""Domain layer for the CloudWatch log channel."""
from src.domain.entities import LogChannelConfig, SdkCredentials, SdkOptions
from src.domain.errors import ChannelConfigurationError
from src.domain.value_objects import Driver, LogLevel

__all__ = [
    "LogChannelConfig",
    "SdkOptions",
    "SdkCredentials",
    "Driver",
    "LogLevel",
    "ChannelConfigurationError",
]
