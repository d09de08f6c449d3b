"""Application layer - Channel resolution and logger construction."""
from src.application.channel_resolver import (
    CLOUDWATCH_CHANNEL,
    STDERR_CHANNEL,
    default_channel_name,
    resolve_channel,
    resolve_channels,
)
from src.application.log_manager import LogManager, create_log_manager, load_factory

__all__ = [
    "LogManager",
    "create_log_manager",
    "load_factory",
    "resolve_channels",
    "resolve_channel",
    "default_channel_name",
    "CLOUDWATCH_CHANNEL",
    "STDERR_CHANNEL",
]
