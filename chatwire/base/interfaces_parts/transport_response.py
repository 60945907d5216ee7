"""Transport response record (single-class module)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP answer handed back by a transport.

    Attributes:
        status_code: HTTP status.
        body: Undecoded response body.
        headers: Response headers (lower-case names recommended).
    """

    status_code: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)
