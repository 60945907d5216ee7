"""Cancellation error type.

Raised when a completion call observes that the caller's token was cancelled.
The HTTP transport converts it into a ``TransportError`` with the
``cancelled`` code so callers handle a single exception family.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively."""


__all__ = ["CancelledError"]
