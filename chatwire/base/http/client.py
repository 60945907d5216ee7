"""Shared HTTP client pool.

Purpose:
    Keep a thread-safe pool of reusable ``httpx.Client`` instances so repeated
    completion calls share connections. Timeouts derive exclusively from
    :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose, timeouts)``; a changed
      timeout environment yields a fresh client.
    - All clients are closed at interpreter exit via ``atexit``; tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str, TimeoutConfig], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    The current :func:`get_timeout_config` is part of the pool key: the first
    request for a key creates a client with those timeouts and later requests
    reuse it.

    Parameters:
        base_url: Optional base URL set on the client so relative requests
            work. ``None`` groups clients under a shared key.
        purpose: Short pool discriminator, e.g. ``"chat"``.
    """
    timeouts = get_timeout_config()
    key = (base_url, purpose, timeouts)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        timeout = timeouts.to_httpx()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and forget every pooled client."""
    with _LOCK:
        for c in _CLIENTS.values():
            # Teardown failures are not actionable.
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
