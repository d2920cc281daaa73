"""Logging adapters implementing LoggerProtocol."""

from barista_authz.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
