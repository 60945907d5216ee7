"""Mutable flag holder shared by a cancellation token and its lock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    cancelled: bool = False
    reason: Optional[str] = None


__all__ = ["State"]
