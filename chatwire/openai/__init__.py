"""
Chat completions client package.

Exports:
- ChatClient: one-shot, non-streaming chat completion calls
- DefaultModelCompatibility: endpoint/model deny-list
"""

from .client import ChatClient
from .compatibility import COMPLETION_ONLY_MODELS, DefaultModelCompatibility

__all__ = ["ChatClient", "DefaultModelCompatibility", "COMPLETION_ONLY_MODELS"]
