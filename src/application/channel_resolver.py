"""Channel Resolver - Builds log channel records from the environment."""
import os
from collections.abc import Mapping

from src.domain.entities import LogChannelConfig, SdkCredentials, SdkOptions
from src.domain.errors import ChannelConfigurationError
from src.domain.value_objects import Driver, LogLevel

CLOUDWATCH_CHANNEL = "cloudwatch"
STDERR_CHANNEL = "stderr"

# Dotted reference resolved by the log manager when the channel is built
CLOUDWATCH_FACTORY = "src.adapters.outbound.cloudwatch_logger_factory.CloudWatchLoggerFactory"

DEFAULT_REGION = "eu-west-1"
DEFAULT_LOG_GROUP = "group-log"
DEFAULT_LOG_STREAM = "error-log"
DEFAULT_RETENTION_DAYS = 30
SDK_VERSION = "latest"


def _env(environ: Mapping[str, str], name: str, default: str) -> str:
    """Return the variable verbatim when present, otherwise the default."""
    value = environ.get(name)
    return default if value is None else value


def cloudwatch_channel(environ: Mapping[str, str]) -> LogChannelConfig:
    """Resolve the ``cloudwatch`` channel."""
    credentials = SdkCredentials(
        key=_env(environ, "AWS_ACCESS_KEY_ID", ""),
        secret=_env(environ, "AWS_SECRET_ACCESS_KEY", ""),
        token=environ.get("AWS_SESSION_TOKEN"),
    )
    return LogChannelConfig(
        name=CLOUDWATCH_CHANNEL,
        driver=Driver.CUSTOM,
        via=CLOUDWATCH_FACTORY,
        sdk=SdkOptions(
            region=_env(environ, "AWS_DEFAULT_REGION", DEFAULT_REGION),
            version=SDK_VERSION,
            credentials=credentials,
        ),
        retention=DEFAULT_RETENTION_DAYS,
        level=LogLevel.INFO,
        group_name=_env(environ, "CLOUDWATCH_LOG_GROUP", DEFAULT_LOG_GROUP),
        stream_name=_env(environ, "CLOUDWATCH_LOG_STREAM", DEFAULT_LOG_STREAM),
    )


def stderr_channel(environ: Mapping[str, str]) -> LogChannelConfig:
    """Resolve the ``stderr`` channel."""
    level = LogLevel.parse(_env(environ, "LOG_LEVEL", LogLevel.DEBUG.value))
    return LogChannelConfig(name=STDERR_CHANNEL, driver=Driver.STDERR, level=level)


CHANNEL_BUILDERS = {
    CLOUDWATCH_CHANNEL: cloudwatch_channel,
    STDERR_CHANNEL: stderr_channel,
}


def resolve_channels(environ: Mapping[str, str] | None = None) -> dict[str, LogChannelConfig]:
    """
    Resolve every configured channel.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Dictionary mapping channel name to its immutable record

    Raises:
        ChannelConfigurationError: If an environment value cannot be parsed
    """
    environ = os.environ if environ is None else environ
    channels = {}
    for name, builder in CHANNEL_BUILDERS.items():
        try:
            channels[name] = builder(environ)
        except ChannelConfigurationError as e:
            raise ChannelConfigurationError(f"Channel '{name}': {e}", channel=name) from e
    return channels


def resolve_channel(name: str, environ: Mapping[str, str] | None = None) -> LogChannelConfig:
    """Resolve a single channel by name."""
    builder = CHANNEL_BUILDERS.get(name)
    if builder is None:
        raise ChannelConfigurationError(f"Log channel [{name}] is not defined.", channel=name)
    return builder(os.environ if environ is None else environ)


def default_channel_name(environ: Mapping[str, str] | None = None) -> str:
    """Name of the channel used when none is requested explicitly."""
    environ = os.environ if environ is None else environ
    return _env(environ, "LOG_CHANNEL", CLOUDWATCH_CHANNEL)
