"""Ports - Abstract interfaces for external dependencies."""
from src.ports.outbound import LoggerFactoryPort, LoggerPort

__all__ = ["LoggerFactoryPort", "LoggerPort"]
