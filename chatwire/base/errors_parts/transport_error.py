"""
Transport failure wrapper.

Wraps network failures, non-success HTTP statuses and cancellation observed by
the transport layer. The original exception is kept on ``raw`` and chained via
``raise ... from``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .client_error import ClientError


@dataclass
class TransportError(ClientError):
    """A failure reported by the transport collaborator.

    Attributes:
        status_code: HTTP status when the server answered, else ``None``.
        endpoint: Endpoint path or URL the call targeted.
    """

    status_code: Optional[int] = None
    endpoint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        status = self.status_code if self.status_code is not None else "-"
        return f"{self.endpoint or '-'} [{status}] {self.code.value}: {self.message}"


__all__ = ["TransportError"]
