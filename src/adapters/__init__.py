"""Adapters - Concrete implementations of ports."""
from src.adapters.outbound import (
    CloudWatchLogger,
    ConsoleFormatter,
    ConsoleLogger,
    StderrLoggerFactory,
)

__all__ = [
    "CloudWatchLogger",
    "ConsoleFormatter",
    "ConsoleLogger",
    "StderrLoggerFactory",
]
