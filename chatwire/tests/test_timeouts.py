"""Timeout configuration parsing and caching."""
from __future__ import annotations

import httpx
import pytest

from chatwire.base.timeouts import TimeoutConfig, get_timeout_config


@pytest.fixture(autouse=True)
def _clear_timeout_env(monkeypatch):
    monkeypatch.delenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("CHATWIRE_CONNECT_TIMEOUT_SECONDS", raising=False)


def test_defaults():
    assert get_timeout_config() == TimeoutConfig()


def test_env_overrides_are_applied(monkeypatch):
    monkeypatch.setenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", "30")
    monkeypatch.setenv("CHATWIRE_CONNECT_TIMEOUT_SECONDS", "2.5")
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig(http_timeout_seconds=30.0, connect_timeout_seconds=2.5)


@pytest.mark.parametrize("raw", ["abc", "-1", "0"])
def test_invalid_values_fall_back(monkeypatch, raw):
    monkeypatch.setenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", raw)
    assert get_timeout_config().http_timeout_seconds == TimeoutConfig().http_timeout_seconds


def test_cached_until_env_changes(monkeypatch):
    first = get_timeout_config()
    assert get_timeout_config() is first
    monkeypatch.setenv("CHATWIRE_CONNECT_TIMEOUT_SECONDS", "4")
    assert get_timeout_config() is not first


def test_to_httpx():
    t = TimeoutConfig(http_timeout_seconds=20.0, connect_timeout_seconds=5.0).to_httpx()
    assert isinstance(t, httpx.Timeout)
    assert t.read == 20.0
    assert t.connect == 5.0
