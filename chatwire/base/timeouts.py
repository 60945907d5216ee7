"""Timeout configuration for the HTTP transport.

This module centralizes the timeout values applied to pooled ``httpx``
clients. The completion call itself imposes no deadline; callers bound it with
these values or with a ``CancellationToken``.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again whenever one of them changes. Supported environment
    variables (all optional):
        CHATWIRE_HTTP_TIMEOUT_SECONDS
        CHATWIRE_CONNECT_TIMEOUT_SECONDS

Invalid or non-positive values fall back to the defaults.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for a single request.
        connect_timeout_seconds: Time allowed to establish the connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [
            os.getenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", ""),
            os.getenv("CHATWIRE_CONNECT_TIMEOUT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("CHATWIRE_HTTP_TIMEOUT_SECONDS", defaults.http_timeout_seconds),
        connect_timeout_seconds=_parse_env_float(
            "CHATWIRE_CONNECT_TIMEOUT_SECONDS", defaults.connect_timeout_seconds
        ),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
