"""``httpx``-backed implementation of the ``Transport`` protocol.

Summary:
- Sends one request per call through a pooled ``httpx.Client``.
- Adds bearer auth, JSON content type and the optional organization header.
- Polls the caller's ``CancellationToken`` before and after the blocking call.

Errors:
- ``httpx`` timeouts and network failures, non-2xx statuses, and cancellation
  become ``TransportError`` with a normalized ``ErrorCode``; the API's own
  ``{"error": {"message": ...}}`` text is used when the body carries it.
- No retry happens here; ``retryable`` is only a hint for outer layers.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..constants import HEADER_ORGANIZATION, JSON_CONTENT_TYPE
from ..errors import ErrorCode, TransportError, classify_exception, status_to_code
from ..interfaces import TransportResponse
from .client import get_httpx_client

RETRYABLE_CODES = frozenset({ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT, ErrorCode.UNAVAILABLE})


def _api_error_message(resp: httpx.Response) -> str:
    """Extract the API error message from a failed response, else a short body excerpt."""
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            return err["message"]
        if isinstance(err, str):
            return err
    text = resp.text.strip()
    return text[:200] if text else (resp.reason_phrase or f"HTTP {resp.status_code}")


class HttpxTransport:
    """Transport sending requests with ``httpx``.

    Parameters:
        api_key: Bearer token; the ``Authorization`` header is omitted when
            empty.
        organization: Optional organization id header.
        client: Explicit ``httpx.Client`` (tests pass one built on
            ``httpx.MockTransport``); defaults to the shared pool.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        organization: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = api_key
        self._organization = organization
        self._client = client

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": JSON_CONTENT_TYPE, "Accept": JSON_CONTENT_TYPE}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        if self._organization:
            headers[HEADER_ORGANIZATION] = self._organization
        return headers

    def send(
        self,
        method: str,
        url: str,
        body: bytes,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> TransportResponse:
        """Send the request and return the 2xx response.

        Raises:
            TransportError: Cancellation, timeout, network failure or a
                non-success status.
        """
        client = self._client or get_httpx_client(None, purpose="chat")
        try:
            if cancel is not None:
                cancel.raise_if_cancelled()
            resp = client.request(method, url, content=body, headers=self._headers())
            if cancel is not None:
                cancel.raise_if_cancelled()
        except CancelledError as e:
            raise TransportError(str(e), code=ErrorCode.CANCELLED, endpoint=url, raw=e) from e
        except httpx.TimeoutException as e:
            raise TransportError(
                f"request timed out: {e}", code=ErrorCode.TIMEOUT, retryable=True, endpoint=url, raw=e
            ) from e
        except httpx.HTTPError as e:
            code = classify_exception(e)
            if code is ErrorCode.UNKNOWN:
                code = ErrorCode.TRANSIENT
            raise TransportError(
                f"request failed: {e}", code=code, retryable=code in RETRYABLE_CODES, endpoint=url, raw=e
            ) from e

        if not resp.is_success:
            code = status_to_code(resp.status_code)
            raise TransportError(
                _api_error_message(resp),
                code=code,
                retryable=code in RETRYABLE_CODES,
                status_code=resp.status_code,
                endpoint=url,
            )
        # Repeated header names are folded into one comma-separated value.
        headers = {k.lower(): ", ".join(resp.headers.get_list(k)) for k in resp.headers.keys()}
        return TransportResponse(status_code=resp.status_code, body=resp.content, headers=headers)


__all__ = ["HttpxTransport", "RETRYABLE_CODES"]
