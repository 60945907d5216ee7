"""Endpoint/model compatibility for the chat completions endpoint.

The chat endpoint cannot serve the legacy completion-only models; those must go
through the plain completions endpoint. Any other model name is accepted, so
new chat models work without a client update.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Mapping, Optional

from ..base.constants import CHAT_COMPLETIONS_SUFFIX

COMPLETION_ONLY_MODELS: FrozenSet[str] = frozenset(
    {
        "gpt-3.5-turbo-instruct",
        "gpt-3.5-turbo-instruct-0914",
        "davinci-002",
        "babbage-002",
        "text-davinci-003",
        "text-davinci-002",
        "text-davinci-001",
        "text-curie-001",
        "text-babbage-001",
        "text-ada-001",
        "davinci",
        "curie",
        "babbage",
        "ada",
    }
)


class DefaultModelCompatibility:
    """Deny-list based ``ModelCompatibility`` implementation.

    Parameters:
        disabled: Endpoint path -> model names the endpoint rejects. Defaults
            to rejecting completion-only models on ``/chat/completions``.
            Endpoints missing from the mapping accept every model.
    """

    def __init__(self, disabled: Optional[Mapping[str, FrozenSet[str]]] = None) -> None:
        self._disabled: Dict[str, FrozenSet[str]] = dict(
            disabled if disabled is not None else {CHAT_COMPLETIONS_SUFFIX: COMPLETION_ONLY_MODELS}
        )

    def supports_model(self, endpoint: str, model: str) -> bool:
        return model not in self._disabled.get(endpoint, frozenset())


__all__ = ["COMPLETION_ONLY_MODELS", "DefaultModelCompatibility"]
