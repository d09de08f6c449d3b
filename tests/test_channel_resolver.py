"""Tests for resolving channels from the environment."""
import pytest

from src.application.channel_resolver import (
    CLOUDWATCH_FACTORY,
    default_channel_name,
    resolve_channel,
    resolve_channels,
)
from src.domain.errors import ChannelConfigurationError
from src.domain.value_objects import Driver, LogLevel


class TestCloudWatchChannel:
    """Test resolution of the cloudwatch channel."""

    def test_defaults_without_environment(self):
        """With no variables set every field takes its literal default."""
        config = resolve_channel("cloudwatch", environ={})

        assert config.sdk.region == "eu-west-1"
        assert config.sdk.version == "latest"
        assert config.sdk.credentials.key == ""
        assert config.sdk.credentials.secret == ""
        assert config.sdk.credentials.token is None
        assert config.group_name == "group-log"
        assert config.stream_name == "error-log"
        assert config.retention == 30
        assert config.level is LogLevel.INFO

    def test_driver_and_factory(self):
        """The channel delegates construction to the CloudWatch factory."""
        config = resolve_channel("cloudwatch", environ={})
        assert config.driver is Driver.CUSTOM
        assert config.via == CLOUDWATCH_FACTORY

    def test_group_override_keeps_other_defaults(self):
        """Only the overridden field changes."""
        default = resolve_channel("cloudwatch", environ={})
        config = resolve_channel("cloudwatch", environ={"CLOUDWATCH_LOG_GROUP": "prod-logs"})

        assert config.group_name == "prod-logs"
        assert config.sdk == default.sdk
        assert config.stream_name == default.stream_name
        assert config.retention == default.retention
        assert config.level == default.level

    def test_values_copied_verbatim(self, sample_env):
        """Present variables are used without transformation."""
        environ = dict(sample_env, CLOUDWATCH_LOG_STREAM="  Mixed Case  ")
        config = resolve_channel("cloudwatch", environ=environ)

        assert config.sdk.region == "us-east-1"
        assert config.sdk.credentials.key == "AKIAEXAMPLE"
        assert config.sdk.credentials.secret == "secret-example"
        assert config.group_name == "prod-logs"
        assert config.stream_name == "  Mixed Case  "

    def test_empty_value_is_kept(self):
        """A variable set to an empty string is not replaced by the default."""
        config = resolve_channel("cloudwatch", environ={"AWS_DEFAULT_REGION": ""})
        assert config.sdk.region == ""

    def test_fixed_fields_ignore_environment(self, sample_env):
        """Driver, level and retention never come from the environment."""
        environ = dict(sample_env, LOG_LEVEL="error")
        config = resolve_channel("cloudwatch", environ=environ)
        assert config.driver is Driver.CUSTOM
        assert config.level is LogLevel.INFO
        assert config.retention == 30

    def test_session_token(self):
        config = resolve_channel("cloudwatch", environ={"AWS_SESSION_TOKEN": "tok"})
        assert config.sdk.credentials.token == "tok"

    def test_reads_process_environment(self, clean_env, monkeypatch):
        """Without an explicit mapping os.environ is used."""
        monkeypatch.setenv("CLOUDWATCH_LOG_STREAM", "from-os")
        config = resolve_channel("cloudwatch")
        assert config.stream_name == "from-os"
        assert config.group_name == "group-log"


class TestResolveChannels:
    """Test resolution of the whole channel mapping."""

    def test_all_channels_resolved(self):
        channels = resolve_channels(environ={})
        assert set(channels) == {"cloudwatch", "stderr"}
        assert channels["stderr"].driver is Driver.STDERR
        assert channels["stderr"].level is LogLevel.DEBUG

    def test_stderr_level_from_environment(self):
        channels = resolve_channels(environ={"LOG_LEVEL": "WARNING"})
        assert channels["stderr"].level is LogLevel.WARNING

    def test_malformed_level_fails(self):
        """An unparseable value fails resolution and names the channel."""
        with pytest.raises(ChannelConfigurationError) as exc_info:
            resolve_channels(environ={"LOG_LEVEL": "loud"})
        assert exc_info.value.channel == "stderr"
        assert "loud" in str(exc_info.value)

    def test_unknown_channel(self):
        with pytest.raises(ChannelConfigurationError, match="daily"):
            resolve_channel("daily", environ={})


class TestDefaultChannel:
    """Test the default channel name."""

    def test_defaults_to_cloudwatch(self):
        assert default_channel_name(environ={}) == "cloudwatch"

    def test_from_environment(self):
        assert default_channel_name(environ={"LOG_CHANNEL": "stderr"}) == "stderr"
