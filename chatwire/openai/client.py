"""Chat completions client.

Summary:
- ``ChatClient.create_chat_completion`` validates the request, encodes it with
  the message codec, calls the transport exactly once, and decodes the answer.
- Streaming, retries and backoff are out of scope; the transport owns retry
  policy if it wants one.

Errors:
- ``StreamNotSupportedError``, ``UnsupportedModelError`` and
  ``InvalidMessageError`` are raised before anything is sent.
- ``ClientError`` subclasses raised by the transport reach the caller
  unchanged. Any other transport exception is wrapped in ``TransportError``
  with the endpoint, model and a classified ``ErrorCode``.
- ``DecodeError`` is raised when the response body cannot be decoded.
"""

from __future__ import annotations

import time
from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.constants import CHAT_COMPLETIONS_SUFFIX
from ..base.errors import (
    ClientError,
    StreamNotSupportedError,
    TransportError,
    UnsupportedModelError,
    classify_exception,
)
from ..base.http import HttpxTransport
from ..base.interfaces import ModelCompatibility, Transport
from ..base.logging import LogContext, get_logger
from ..base.models import ChatCompletionRequest, ChatCompletionResponse
from ..config import get_client_config
from .chat_helpers import ChatHelpersMixin
from .compatibility import DefaultModelCompatibility


class ChatClient(ChatHelpersMixin):
    """Client for the chat completions endpoint.

    Parameters:
        transport: Collaborator that sends the request. Defaults to an
            ``HttpxTransport`` built from the resolved API key and
            organization.
        base_url: API root; the endpoint path is appended to it. Resolved
            from config when omitted.
        api_key: Bearer token for the default transport. Ignored when
            ``transport`` is given.
        organization: Organization header for the default transport.
        compatibility: Endpoint/model checker. Defaults to
            ``DefaultModelCompatibility``.

    Side effects:
        Reads configuration via ``get_client_config`` and sets up the
        ``chatwire.openai`` logger.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        organization: Optional[str] = None,
        compatibility: Optional[ModelCompatibility] = None,
    ) -> None:
        cfg = get_client_config({"base_url": base_url, "api_key": api_key, "organization": organization})
        self._base_url = cfg["base_url"]
        self._transport: Transport = transport or HttpxTransport(
            api_key=cfg.get("api_key"),
            organization=cfg.get("organization"),
        )
        self._compatibility: ModelCompatibility = compatibility or DefaultModelCompatibility()
        self._logger = get_logger("chatwire.openai")

    @property
    def base_url(self) -> str:
        return self._base_url

    def create_chat_completion(
        self,
        request: ChatCompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ChatCompletionResponse:
        """Create a completion for the conversation in ``request``.

        Parameters:
            request: The completion request; ``stream`` must be ``False``.
            cancel: Caller's cancellation token, handed to the transport
                unmodified.

        Returns:
            The decoded response; each message's ``content`` holds the text of
            a lone text part and ``parts`` what the server sent.

        Raises:
            StreamNotSupportedError: ``request.stream`` is set.
            UnsupportedModelError: The model cannot be used with this endpoint.
            InvalidMessageError: A message sets conflicting ``content`` and
                ``parts``.
            TransportError: The transport failed.
            DecodeError: The response could not be decoded.
        """
        model = request.model
        if request.stream:
            raise StreamNotSupportedError(model=model)
        if not self._compatibility.supports_model(CHAT_COMPLETIONS_SUFFIX, model):
            raise UnsupportedModelError(model=model)

        body = self._encode_body(request)
        url = self._full_url(CHAT_COMPLETIONS_SUFFIX)
        ctx = LogContext(model=model, endpoint=CHAT_COMPLETIONS_SUFFIX)

        self._log_chat_start(ctx, request)
        t0 = time.perf_counter()
        try:
            resp = self._transport.send("POST", url, body, cancel=cancel)
        except ClientError as e:
            self._log_chat_error(ctx, e)
            raise
        except Exception as e:
            err = TransportError(
                f"transport failure: {e}",
                code=classify_exception(e),
                model=model,
                raw=e,
                endpoint=url,
            )
            self._log_chat_error(ctx, err)
            raise err from e
        latency_ms = (time.perf_counter() - t0) * 1000.0

        response = self._decode_response(resp)
        self._log_chat_end(ctx, response, latency_ms)
        return response


__all__ = ["ChatClient"]
