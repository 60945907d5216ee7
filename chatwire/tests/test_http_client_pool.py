"""Unit tests for shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose yields different instances.
- Different base_url yields different instances.
- Pooled clients pick up the configured timeouts, including later changes.
"""
from __future__ import annotations

from chatwire.base.http import get_httpx_client, close_all_clients


def setup_function(_):
    # Ensure a clean slate for each test
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://api.example.com", purpose="chat")
    c2 = get_httpx_client("https://api.example.com", purpose="chat")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"


def test_different_purpose_returns_different_instances():
    c1 = get_httpx_client("https://api.example.com", purpose="chat")
    c2 = get_httpx_client("https://api.example.com", purpose="admin")
    assert c1 is not c2, "Different purposes should not share the same client instance"


def test_different_base_url_returns_different_instances():
    c1 = get_httpx_client("https://api.example.com", purpose="chat")
    c2 = get_httpx_client("https://api.other.com", purpose="chat")
    assert c1 is not c2, "Different base URLs should not share the same client instance"


def test_close_all_clients_forgets_instances():
    c1 = get_httpx_client(None, purpose="chat")
    close_all_clients()
    assert c1.is_closed
    assert get_httpx_client(None, purpose="chat") is not c1


def test_pooled_client_uses_env_timeouts(monkeypatch):
    monkeypatch.setenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("CHATWIRE_CONNECT_TIMEOUT_SECONDS", "3")
    client = get_httpx_client(None, purpose="timeouts")
    assert client.timeout.read == 12.5
    assert client.timeout.connect == 3.0


def test_timeout_change_yields_fresh_client(monkeypatch):
    monkeypatch.setenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", "20")
    before = get_httpx_client(None, purpose="chat")
    assert get_httpx_client(None, purpose="chat") is before

    monkeypatch.setenv("CHATWIRE_HTTP_TIMEOUT_SECONDS", "45")
    after = get_httpx_client(None, purpose="chat")
    assert after is not before
    assert after.timeout.read == 45.0
