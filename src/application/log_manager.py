"""Log Manager - Resolves channel names to ready-to-use loggers."""
import importlib
import logging
from collections.abc import Mapping

from src.domain.entities import LogChannelConfig
from src.domain.errors import ChannelConfigurationError
from src.domain.value_objects import Driver
from src.ports.outbound import LoggerFactoryPort


def load_factory(reference: str) -> LoggerFactoryPort:
    """
    Import a factory from its dotted reference.

    Classes are instantiated without arguments; any other callable is
    returned as is.

    Raises:
        ChannelConfigurationError: If the reference cannot be imported or instantiated
    """
    module_name, _, attribute = reference.rpartition(".")
    if not module_name or not attribute:
        raise ChannelConfigurationError(f"Invalid factory reference: {reference!r}")

    try:
        module = importlib.import_module(module_name)
        target = getattr(module, attribute)
    except (ImportError, AttributeError) as e:
        raise ChannelConfigurationError(f"Cannot load factory {reference!r}: {e}") from e

    if isinstance(target, type):
        try:
            factory = target()
        except Exception as e:
            raise ChannelConfigurationError(f"Cannot instantiate factory {reference!r}: {e}") from e
    else:
        factory = target
    if not callable(factory):
        raise ChannelConfigurationError(f"Factory {reference!r} is not callable")
    return factory


class LogManager:
    """
    Resolves log channels to loggers.

    Each channel is built at most once. Construction failures surface as
    ChannelConfigurationError so that logging setup fails at startup
    instead of on the first record.
    """

    def __init__(
        self,
        channels: Mapping[str, LogChannelConfig],
        default_channel: str,
        drivers: Mapping[Driver, LoggerFactoryPort] | None = None,
    ):
        """
        Initialize the log manager.

        Args:
            channels: Resolved channel records keyed by name
            default_channel: Channel used when no name is given
            drivers: Factories for built-in (non-delegated) drivers
        """
        self._channels = dict(channels)
        self._default_channel = default_channel
        self._drivers = dict(drivers or {})
        self._loggers: dict[str, logging.Logger] = {}

    @property
    def default_channel(self) -> str:
        return self._default_channel

    @property
    def channel_names(self) -> list[str]:
        return list(self._channels)

    def config(self, name: str | None = None) -> LogChannelConfig:
        """Return the resolved record of a channel."""
        name = name or self._default_channel
        try:
            return self._channels[name]
        except KeyError:
            raise ChannelConfigurationError(
                f"Log channel [{name}] is not defined.", channel=name
            ) from None

    def channel(self, name: str | None = None) -> logging.Logger:
        """
        Get the logger of a channel, building it on first use.

        Args:
            name: Channel name (defaults to the default channel)

        Returns:
            Logger with the channel's handlers attached

        Raises:
            ChannelConfigurationError: If the channel is unknown or cannot be built
        """
        config = self.config(name)
        if config.name not in self._loggers:
            self._loggers[config.name] = self._build(config)
        return self._loggers[config.name]

    def build_all(self) -> dict[str, logging.Logger]:
        """Eagerly build every configured channel."""
        return {name: self.channel(name) for name in self._channels}

    def close(self) -> None:
        """Flush and detach the handlers of every built channel."""
        for logger in self._loggers.values():
            for handler in list(logger.handlers):
                handler.flush()
                handler.close()
                logger.removeHandler(handler)
        self._loggers.clear()

    def _build(self, config: LogChannelConfig) -> logging.Logger:
        try:
            factory = self._resolve_factory(config)
            return factory(config)
        except ChannelConfigurationError as e:
            if e.channel is None:
                e.channel = config.name
            raise
        except Exception as e:
            raise ChannelConfigurationError(
                f"Failed to build log channel [{config.name}]: {e}", channel=config.name
            ) from e

    def _resolve_factory(self, config: LogChannelConfig) -> LoggerFactoryPort:
        if config.driver.is_delegated:
            if not config.via:
                raise ChannelConfigurationError(
                    f"Channel [{config.name}] uses the custom driver without a factory",
                    channel=config.name,
                )
            return load_factory(config.via)

        factory = self._drivers.get(config.driver)
        if factory is None:
            raise ChannelConfigurationError(
                f"Driver [{config.driver.value}] is not supported.", channel=config.name
            )
        return factory


def create_log_manager(environ: Mapping[str, str] | None = None) -> LogManager:
    """
    Factory function to create a LogManager from the environment.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Configured LogManager instance
    """
    from src.adapters.outbound import StderrLoggerFactory
    from src.application.channel_resolver import default_channel_name, resolve_channels

    return LogManager(
        channels=resolve_channels(environ),
        default_channel=default_channel_name(environ),
        drivers={Driver.STDERR: StderrLoggerFactory()},
    )
