"""chatwire.config.env
===================

Environment variable names and helpers for credentials and endpoint settings.

Design Notes
------------
- ``ENV_MAP`` maps config fields to their canonical variable; ``ENV_ALIASES``
  lists accepted alternatives with the canonical name first.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "api_key": "OPENAI_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "base_url": "OPENAI_BASE_URL",
    "organization": "OPENAI_ORG_ID",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "base_url": ("OPENAI_BASE_URL", "OPENAI_API_BASE"),
    "organization": ("OPENAI_ORG_ID", "OPENAI_ORGANIZATION"),
}

CONFIG_FILE_ENV = "CHATWIRE_CONFIG_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder rather than a real setting.

    Heuristics (case-insensitive): contains ``placeholder``, ``changeme`` or
    ``example``, or starts with ``test_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a config field, canonical first."""
    canonical = ENV_MAP.get(field)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(field, ()):
        if alias != canonical:
            yield alias


def resolve_env(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable_used)`` for the first non-empty candidate, else ``(None, None)``."""
    for name in get_env_var_candidates(field):
        if val := os.environ.get(name):
            return val, name
    return None, None


def resolve_api_key() -> Optional[str]:
    """Return the API key from the environment, ignoring placeholder values."""
    val, _ = resolve_env("api_key")
    return None if is_placeholder(val) else val


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_env",
    "resolve_api_key",
]
