"""CLI Adapter - Command-line interface for inspecting and testing log channels."""
import json
import logging
import sys

import click

from src.adapters.outbound import CloudWatchLogger, ConsoleLogger, StderrLoggerFactory
from src.application import create_log_manager
from src.domain.entities import LogChannelConfig
from src.domain.errors import ChannelConfigurationError
from src.domain.value_objects import Driver, LogLevel
from src.ports.outbound import LoggerPort

LEVEL_CHOICES = [level.value for level in LogLevel]


def _cli_logger(verbose: bool = False) -> LoggerPort:
    """Logger for the CLI's own diagnostics, independent of the environment."""
    config = LogChannelConfig(
        name="cli",
        driver=Driver.STDERR,
        level=LogLevel.DEBUG if verbose else LogLevel.INFO,
    )
    return ConsoleLogger(StderrLoggerFactory()(config))


def _structured(config: LogChannelConfig, logger: logging.Logger) -> LoggerPort:
    """Wrap a channel logger in the adapter matching its output format."""
    if config.driver == Driver.STDERR:
        return ConsoleLogger(logger)
    return CloudWatchLogger(logger)


@click.group()
@click.version_option(version="0.1.0", prog_name="cloudwatch-log-channel")
def cli() -> None:
    """
    CloudWatch Log Channel - Resolve and test log channels.

    Channels are resolved from environment variables once per command.
    """
    pass


@cli.command()
def list_channels() -> None:
    """
    List configured channels with their driver and minimum level.
    """
    try:
        manager = create_log_manager()
    except ChannelConfigurationError as e:
        _cli_logger().error(f"Configuration failed: {e}", exception=e)
        sys.exit(1)

    click.echo("Configured channels:\n")
    for name in manager.channel_names:
        config = manager.config(name)
        marker = " (default)" if name == manager.default_channel else ""
        click.echo(f"  {name}{marker}")
        click.echo(f"    Driver: {config.driver.value}")
        click.echo(f"    Level: {config.level.value}")
        if config.via:
            click.echo(f"    Via: {config.via}")
        click.echo()


@cli.command()
@click.argument("channel", required=False)
@click.option(
    "--show-secrets",
    is_flag=True,
    help="Print credentials unmasked.",
)
def show(channel: str | None, show_secrets: bool) -> None:
    """
    Print the resolved configuration of CHANNEL as JSON.

    Defaults to the channel named by LOG_CHANNEL (cloudwatch).
    """
    try:
        manager = create_log_manager()
        config = manager.config(channel)
    except ChannelConfigurationError as e:
        _cli_logger().error(f"Configuration failed: {e}", exception=e)
        sys.exit(1)

    click.echo(json.dumps(config.to_dict(mask_secrets=not show_secrets), indent=2))


@cli.command()
@click.argument("message")
@click.option(
    "--channel", "-c",
    default=None,
    help="Channel to write to. Default: LOG_CHANNEL or cloudwatch.",
)
@click.option(
    "--level", "-l",
    default="info",
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    help="Severity of the record.",
)
@click.option(
    "--field", "-f",
    multiple=True,
    help="Extra structured field as KEY=VALUE. Can be specified multiple times.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (DEBUG level logging).",
)
def send(message: str, channel: str | None, level: str, field: tuple, verbose: bool) -> None:
    """
    Build a channel and send MESSAGE through it.

    Examples:

        # Send to the default channel
        cloudwatch-log-channel send "deploy finished"

        # Send a warning with fields to stderr
        cloudwatch-log-channel send "disk low" -c stderr -l warning -f host=web-1
    """
    logger = _cli_logger(verbose)

    fields = {}
    for item in field:
        key, sep, value = item.partition("=")
        if not sep or not key or key in ("level", "message"):
            raise click.BadParameter(
                f"expected KEY=VALUE (KEY not level or message), got {item!r}",
                param_hint="--field",
            )
        fields[key] = value

    manager = None
    try:
        manager = create_log_manager()
        config = manager.config(channel)
        logger.debug(f"Building channel {config.name}", driver=config.driver.value)

        channel_logger = _structured(config, manager.channel(config.name))
        channel_logger.log(level, message, **fields)

        if LogLevel.from_name(level).numeric < config.level.numeric:
            logger.warning(
                f"Record dropped by channel {config.name}",
                record_level=level,
                minimum=config.level.value,
            )
        else:
            logger.info(f"Record sent to channel {config.name}")

    except ChannelConfigurationError as e:
        logger.error(f"Configuration failed: {e}", exception=e)
        sys.exit(1)
    finally:
        if manager is not None:
            manager.close()


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
