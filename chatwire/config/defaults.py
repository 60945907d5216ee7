"""chatwire.config.defaults
========================

Small, stable default values. They can be overridden through environment
variables, an external config file, or explicit arguments, but provide
sensible fallbacks for local development and tests.

This module imports nothing from the rest of the package.
"""

from __future__ import annotations

# Public API root; the chat endpoint path is appended to it.
DEFAULT_BASE_URL = "https://api.openai.com/v1"

__all__ = [
    "DEFAULT_BASE_URL",
]
