"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` is the caller's cancellation mechanism for a completion
call; it travels to the transport unmodified. ``CancelledError`` is raised by
whatever observes a cancelled token.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
