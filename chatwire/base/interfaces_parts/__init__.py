"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``chatwire.base.interfaces`` to re-export a stable API.
"""

from .transport_response import TransportResponse
from .transport import Transport
from .model_compatibility import ModelCompatibility

__all__ = [
    "TransportResponse",
    "Transport",
    "ModelCompatibility",
]
