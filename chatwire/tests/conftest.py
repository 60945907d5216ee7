"""Pytest configuration for the chatwire test suite.

Provides a recording fake transport, a ready client wired to it, and an
autouse fixture that keeps configuration and environment isolated between
tests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Optional

import pytest

from chatwire.base.cancellation import CancellationToken
from chatwire.base.interfaces import TransportResponse
from chatwire.base.logging import BASE_LOGGER_NAME, get_logger
from chatwire.config import reset_config_cache

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_API_BASE",
    "OPENAI_ORG_ID",
    "OPENAI_ORGANIZATION",
    "CHATWIRE_CONFIG_FILE",
    "CHATWIRE_LOG_LEVEL",
)


class RecordingTransport:
    """Fake ``Transport`` that records every call and replays a canned answer.

    Set ``error`` to make ``send`` raise instead of answering.
    """

    def __init__(self, body: Any = None, *, headers: Optional[Dict[str, str]] = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.body = body if body is not None else completion_body()
        self.headers = headers or {}
        self.status_code = 200
        self.error: Optional[BaseException] = None

    def send(
        self,
        method: str,
        url: str,
        body: bytes,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> TransportResponse:
        self.calls.append({"method": method, "url": url, "body": body, "cancel": cancel})
        if self.error is not None:
            raise self.error
        raw = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode("utf-8")
        return TransportResponse(status_code=self.status_code, body=raw, headers=dict(self.headers))

    def sent_json(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.calls[index]["body"])


def completion_body(content: Any = "Hello!", finish_reason: Optional[str] = "stop") -> Dict[str, Any]:
    """Return a minimal, well-formed chat completion body."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": finish_reason,
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
    }


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear client-related env vars and the config file cache around each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def client(transport: RecordingTransport):
    from chatwire.openai import ChatClient

    return ChatClient(transport, base_url="https://api.test.invalid/v1")


@pytest.fixture()
def make_body():
    """Factory fixture for completion bodies; see ``completion_body``."""
    return completion_body


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.events.append(json.loads(record.getMessage()))


@pytest.fixture()
def captured_events() -> Iterator[List[Dict[str, Any]]]:
    """Collect ``log_event`` payloads emitted under the ``chatwire`` logger."""
    base = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    yield handler.events
    base.removeHandler(handler)
    base.setLevel(previous)
