"""CloudWatch Log Channel - Environment-driven logging channels.

Resolves the ``cloudwatch`` log channel from environment variables and
builds its CloudWatch Logs handler.
"""

__version__ = "0.1.0"

# Application layer
from src.application import LogManager, create_log_manager, resolve_channel, resolve_channels
from src.domain import ChannelConfigurationError, LogChannelConfig, LogLevel

# Re-export for convenience
__all__ = [
    "__version__",
    # Domain
    "LogChannelConfig",
    "LogLevel",
    "ChannelConfigurationError",
    # Application
    "LogManager",
    "create_log_manager",
    "resolve_channels",
    "resolve_channel",
]
