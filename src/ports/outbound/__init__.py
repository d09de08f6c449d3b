"""Outbound ports - Interfaces for driven adapters."""
from src.ports.outbound.logger_factory_port import LoggerFactoryPort
from src.ports.outbound.logger_port import LoggerPort

__all__ = ["LoggerFactoryPort", "LoggerPort"]
