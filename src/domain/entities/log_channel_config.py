"""LogChannelConfig entity describing one named logging destination."""
from dataclasses import dataclass, field

from src.domain.value_objects.driver import Driver
from src.domain.value_objects.log_level import LogLevel

MASK = "********"


@dataclass(frozen=True)
class SdkCredentials:
    """Static AWS credentials handed to the SDK client."""

    key: str = ""
    secret: str = ""
    token: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when neither key nor secret is set (use the default chain)."""
        return not self.key and not self.secret

    def to_dict(self, mask_secrets: bool = False) -> dict:
        data = {
            "key": self.key,
            "secret": MASK if mask_secrets and self.secret else self.secret,
        }
        if self.token is not None:
            data["token"] = MASK if mask_secrets and self.token else self.token
        return data


@dataclass(frozen=True)
class SdkOptions:
    """Options for constructing the AWS SDK client."""

    region: str
    version: str = "latest"
    credentials: SdkCredentials = field(default_factory=SdkCredentials)

    def to_dict(self, mask_secrets: bool = False) -> dict:
        return {
            "region": self.region,
            "version": self.version,
            "credentials": self.credentials.to_dict(mask_secrets=mask_secrets),
        }


@dataclass(frozen=True)
class LogChannelConfig:
    """
    Resolved configuration of a single log channel.

    Built once when logging is configured and never mutated afterwards.
    Channels with the ``custom`` driver are handed to the factory named by
    ``via``, which receives this record and returns a ready logger.
    """

    name: str
    driver: Driver
    level: LogLevel
    via: str | None = None
    sdk: SdkOptions | None = None
    retention: int | None = None
    group_name: str | None = None
    stream_name: str | None = None

    def to_dict(self, mask_secrets: bool = False) -> dict:
        """
        Render the record in the shape factories consume.

        Args:
            mask_secrets: Replace the secret and token with a fixed mask

        Returns:
            Plain dictionary; unset optional fields are omitted
        """
        data: dict = {"driver": self.driver.value}
        if self.via is not None:
            data["via"] = self.via
        if self.sdk is not None:
            data["sdk"] = self.sdk.to_dict(mask_secrets=mask_secrets)
        if self.retention is not None:
            data["retention"] = self.retention
        data["level"] = self.level.value
        if self.group_name is not None:
            data["group_name"] = self.group_name
        if self.stream_name is not None:
            data["stream_name"] = self.stream_name
        return data

    def __str__(self) -> str:
        return f"LogChannelConfig({self.name}, {self.driver.value}, {self.level.value})"
