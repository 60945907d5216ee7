"""HTTP utilities package.

Exposes pooled httpx clients and the default ``Transport`` implementation.
"""

from .client import get_httpx_client, close_all_clients
from .transport import HttpxTransport, RETRYABLE_CODES

__all__ = ["get_httpx_client", "close_all_clients", "HttpxTransport", "RETRYABLE_CODES"]
