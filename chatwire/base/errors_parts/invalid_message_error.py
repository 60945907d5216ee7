"""Conflicting message content error.

Raised at encode time when a message carries both a flat ``content`` string
and a structured ``parts`` sequence that disagree. Nothing is sent.
"""
from __future__ import annotations

from dataclasses import dataclass

from .client_error import ClientError
from .error_code import ErrorCode


@dataclass
class InvalidMessageError(ClientError):
    """A message populated both content views with different values."""

    code: ErrorCode = ErrorCode.INVALID_MESSAGE


__all__ = ["InvalidMessageError"]
