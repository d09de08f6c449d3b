"""Domain entities for log channel configuration."""
from src.domain.entities.log_channel_config import LogChannelConfig, SdkCredentials, SdkOptions

__all__ = ["LogChannelConfig", "SdkOptions", "SdkCredentials"]
