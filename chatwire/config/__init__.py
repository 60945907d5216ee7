"""Client configuration layer.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``CHATWIRE_CONFIG_FILE``
    3. Environment variables (``OPENAI_API_KEY``, ``OPENAI_BASE_URL``,
       ``OPENAI_ORG_ID``); placeholder API keys are ignored
    4. In-code overrides passed to the helper

External config file
--------------------
A flat mapping; JSON is tried first, then YAML::

    base_url: https://example.invalid/v1
    organization: org-123

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_BASE_URL
from .env import CONFIG_FILE_ENV, ENV_MAP, resolve_api_key, resolve_env

DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Load (and cache per path) the mapping stored in ``CHATWIRE_CONFIG_FILE``.

    A missing file or a document that is not a mapping yields ``{}``. A file
    that is neither valid JSON nor valid YAML raises ``yaml.YAMLError``.
    """
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV)
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            data = yaml.safe_load(text)
    _FILE_CACHE = data if isinstance(data, dict) else {}
    _FILE_CACHE_PATH = path
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    """Collect set environment values; only the API key is screened for placeholders."""
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        val = resolve_api_key() if field == "api_key" else resolve_env(field)[0]
        if val is not None:
            out[field] = val
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file contents (tests and long-lived processes)."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


__all__ = [
    "DEFAULTS",
    "get_client_config",
    "reset_config_cache",
]
