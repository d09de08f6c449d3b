"""CloudWatch Logger Factory - Builds the ``cloudwatch`` channel with watchtower."""
import logging
from typing import Any

import boto3
import watchtower
from botocore.exceptions import BotoCoreError, ClientError

from src.adapters.outbound.channel_logger import channel_logger
from src.domain.entities import LogChannelConfig, SdkOptions
from src.domain.errors import ChannelConfigurationError


class CloudWatchLoggerFactory:
    """
    Factory for channels shipping records to CloudWatch Logs.

    Batching, retries and stream creation are handled by
    watchtower.CloudWatchLogHandler; this factory only translates the
    channel record into a boto3 client and handler settings.
    """

    def __init__(self, session_factory: Any = None):
        """
        Initialize the factory.

        Args:
            session_factory: Callable returning a boto3 session from credential kwargs
                (defaults to boto3.Session)
        """
        self._session_factory = session_factory or boto3.Session

    def __call__(self, config: LogChannelConfig) -> logging.Logger:
        """
        Build the logger for a CloudWatch channel.

        Args:
            config: Resolved channel record with sdk, group and stream set

        Returns:
            Logger writing to the configured log group and stream

        Raises:
            ChannelConfigurationError: If the record is incomplete or the client
                cannot be created
        """
        self._validate(config)

        try:
            client = self._create_client(config.sdk)
            handler = watchtower.CloudWatchLogHandler(
                log_group_name=config.group_name,
                log_stream_name=config.stream_name,
                boto3_client=client,
                log_group_retention_days=config.retention,
            )
        except (BotoCoreError, ClientError) as e:
            raise ChannelConfigurationError(
                f"Cannot create CloudWatch handler for [{config.name}]: {e}",
                channel=config.name,
            ) from e

        handler.setLevel(config.level.numeric)

        logger = channel_logger(config)
        logger.addHandler(handler)
        return logger

    def _create_client(self, sdk: SdkOptions) -> Any:
        """Create the CloudWatch Logs client; sdk.version is informational for boto3."""
        credentials = sdk.credentials
        session_params = {}
        if not credentials.is_empty:
            session_params["aws_access_key_id"] = credentials.key
            session_params["aws_secret_access_key"] = credentials.secret
            if credentials.token:
                session_params["aws_session_token"] = credentials.token

        session = self._session_factory(**session_params)
        return session.client("logs", region_name=sdk.region)

    @staticmethod
    def _validate(config: LogChannelConfig) -> None:
        errors = []
        if config.sdk is None:
            errors.append("missing sdk options")
        else:
            if not config.sdk.region:
                errors.append("region is empty")
            credentials = config.sdk.credentials
            if bool(credentials.key) != bool(credentials.secret):
                errors.append("credentials need both key and secret, or neither")
        if not config.group_name:
            errors.append("group_name is empty")
        if not config.stream_name:
            errors.append("stream_name is empty")
        if config.retention is not None and config.retention <= 0:
            errors.append("retention must be a positive number of days")

        if errors:
            raise ChannelConfigurationError(
                f"Invalid CloudWatch channel [{config.name}]: {'; '.join(errors)}",
                channel=config.name,
            )
