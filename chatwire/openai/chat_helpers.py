"""Chat helpers for the client.

Encapsulates body encoding, response decoding and call logging so that
``client.py`` stays focused on the order of checks around the single
transport call.
"""

from __future__ import annotations

import json
import logging

from ..base.errors import ClientError, DecodeError
from ..base.interfaces import TransportResponse
from ..base.logging import LogContext, log_event
from ..base.models import ChatCompletionRequest, ChatCompletionResponse


class ChatHelpersMixin:
    """Mixin providing request encoding, response decoding and logging."""

    _base_url: str
    _logger: logging.Logger

    def _full_url(self, suffix: str) -> str:
        return self._base_url.rstrip("/") + suffix

    def _encode_body(self, request: ChatCompletionRequest) -> bytes:
        """Serialize the request; ``InvalidMessageError`` surfaces before any I/O."""
        return json.dumps(request.to_dict(), ensure_ascii=False).encode("utf-8")

    def _decode_response(self, resp: TransportResponse) -> ChatCompletionResponse:
        """Parse the body and decode it into a ``ChatCompletionResponse``."""
        try:
            data = json.loads(resp.body)
        except ValueError as e:
            raise DecodeError(f"response body is not valid JSON: {e}", raw=e) from e
        return ChatCompletionResponse.from_dict(data, headers=resp.headers)

    def _log_chat_start(self, ctx: LogContext, request: ChatCompletionRequest) -> None:
        log_event(
            self._logger,
            "chat.start",
            ctx,
            level=logging.DEBUG,
            messages=len(request.messages),
            tools=len(request.tools) if request.tools else None,
        )

    def _log_chat_end(self, ctx: LogContext, response: ChatCompletionResponse, latency_ms: float) -> None:
        log_event(
            self._logger,
            "chat.end",
            ctx,
            response_id=response.id or None,
            latency_ms=round(latency_ms, 2),
            choices=len(response.choices),
            finish_reasons=response.finish_reasons(),
            tokens=response.usage.to_dict(),
        )

    def _log_chat_error(self, ctx: LogContext, err: ClientError) -> None:
        status = getattr(err, "status_code", None)
        log_event(
            self._logger,
            "chat.error",
            ctx,
            level=logging.ERROR,
            error_code=err.code.value,
            status_code=status,
            retryable=err.retryable,
            error=err.message,
        )


__all__ = ["ChatHelpersMixin"]
