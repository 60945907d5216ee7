"""ModelCompatibility Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ModelCompatibility(Protocol):
    """Answers whether an endpoint can serve a model.

    Consulted once per completion call, before anything is sent.
    """

    def supports_model(self, endpoint: str, model: str) -> bool:
        """Return True when ``model`` may be used with ``endpoint``."""
        ...
