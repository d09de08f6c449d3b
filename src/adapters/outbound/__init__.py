"""Outbound adapters - Log channel factories and structured logging.

The CloudWatch factory lives in
``src.adapters.outbound.cloudwatch_logger_factory`` and is loaded through
the channel's ``via`` reference, so stream-only setups never import boto3.
"""
from src.adapters.outbound.cloudwatch_logger import CloudWatchLogger
from src.adapters.outbound.console_logger import (
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
