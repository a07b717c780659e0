"""Structured logging: JSON formatter and setup."""

from fernetex.logging.formatter import JSONLogFormatter
from fernetex.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
