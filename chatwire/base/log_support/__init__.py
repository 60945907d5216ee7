"""Logging building blocks used by ``chatwire.base.logging``: JSON formatter and call context."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext

__all__ = ["JsonFormatter", "ISO", "LogContext"]
