"""Test configuration and shared fixtures."""
import pytest

CHANNEL_ENV_VARS = [
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "CLOUDWATCH_LOG_GROUP",
    "CLOUDWATCH_LOG_STREAM",
    "LOG_LEVEL",
    "LOG_CHANNEL",
]


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove every variable the channels read from the process environment."""
    for name in CHANNEL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_env() -> dict:
    """A fully populated environment mapping."""
    return {
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "AKIAEXAMPLE",
        "AWS_SECRET_ACCESS_KEY": "secret-example",
        "CLOUDWATCH_LOG_GROUP": "prod-logs",
        "CLOUDWATCH_LOG_STREAM": "api",
    }
