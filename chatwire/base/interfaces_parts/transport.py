"""Transport Protocol (single-class module).

The narrow seam between the client and whatever actually moves bytes over the
network. Authentication, retries, and connection reuse are the
implementation's business.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from .transport_response import TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Synchronous request/response transport.

    The client calls :meth:`send` exactly once per completion. Implementations
    return the response for 2xx statuses and raise for everything else;
    ``ClientError`` subclasses reach the caller unchanged, any other exception
    is wrapped by the client in a ``TransportError``.
    """

    def send(
        self,
        method: str,
        url: str,
        body: bytes,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> TransportResponse:
        """Send ``body`` and return the server's answer.

        ``cancel`` is the caller's token, passed through untouched.
        """
        ...
