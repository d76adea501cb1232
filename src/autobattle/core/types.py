"""Shared type aliases for the core and domain layers."""
from typing import Literal

Row = Literal["front", "back"]
TieBreak = Literal["first", "second"]
Outcome = Literal["defeat", "stalemate"]

__all__ = ["Outcome", "Row", "TieBreak"]
