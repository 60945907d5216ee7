"""
Structured client error exception type.

Base class for every failure raised by the client. Carries a normalized
`ErrorCode` for consistent handling and structured logging, plus the model the
request targeted when known.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ClientError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        model: Optional model name associated with the failure.
        retryable: Hint for an outer retry layer (not authoritative; the
            client itself never retries).
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining model, code, and message."""
        return f"{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ClientError"]
