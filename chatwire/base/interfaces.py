"""
Collaborator contracts required by the client.

Re-exports the single-class modules under ``chatwire.base.interfaces_parts``:
the :class:`Transport` that sends one request per completion, its
:class:`TransportResponse`, and the :class:`ModelCompatibility` checker.
"""

from .interfaces_parts import ModelCompatibility, Transport, TransportResponse

__all__ = [
    "Transport",
    "TransportResponse",
    "ModelCompatibility",
]
