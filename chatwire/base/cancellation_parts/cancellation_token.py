"""Cooperative cancellation token.

The client never inspects the token; it hands it to the transport unchanged.
Transports poll it around the blocking network call.
"""

from __future__ import annotations

from threading import Lock
from typing import List

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """Thread-safe cancellation flag; children follow their parent.

    A caller typically keeps one token per logical operation and derives a
    child for each completion call so a single ``cancel`` stops them all.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent._adopt(self)

    @property
    def cancelled(self) -> bool:
        return self._state.cancelled

    @property
    def reason(self) -> str | None:
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Mark the token cancelled (first reason wins) and propagate to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def _adopt(self, token: "CancellationToken") -> None:
        with self._lock:
            self._children.append(token)
            already = self._state.cancelled
            reason = self._state.reason
        if already:
            token.cancel(reason)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` when cancellation was requested."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "completion call cancelled")

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["CancellationToken"]
