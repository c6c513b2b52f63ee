"""Logging adapters implementing LoggerProtocol."""

from docshelf.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
