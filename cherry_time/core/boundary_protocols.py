"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The current time reaches the core only through a Clock
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Contract for the time source — implemented by shell."""
    def now(self) -> datetime: ...
