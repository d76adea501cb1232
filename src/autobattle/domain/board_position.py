"""Board positioning values."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from autobattle.core.types import Row
from autobattle.domain.errors import InvalidPositionError

ROW_SIZES: Dict[str, int] = {"front": 3, "back": 2}


@dataclass(frozen=True, slots=True)
class BoardPosition:
    """A validated row/slot coordinate. Front accepts slots 0-2, back 0-1."""

    row: Row
    slot: int

    def __post_init__(self) -> None:
        size = ROW_SIZES.get(self.row)
        if size is None:
            raise InvalidPositionError(f"Unknown row '{self.row}'; expected 'front' or 'back'.")
        if isinstance(self.slot, bool) or not isinstance(self.slot, int) or not 0 <= self.slot < size:
            raise InvalidPositionError(f"{self.row.capitalize()} row slot must be 0-{size - 1}, got {self.slot!r}.")

    def __str__(self) -> str:
        return f"{self.row}-{self.slot}"


def create_position(row: Row, slot: int) -> BoardPosition:
    """Create a board position, raising InvalidPositionError when out of range."""
    return BoardPosition(row=row, slot=slot)


FRONT_POSITIONS: Tuple[BoardPosition, ...] = tuple(BoardPosition("front", idx) for idx in range(ROW_SIZES["front"]))
BACK_POSITIONS: Tuple[BoardPosition, ...] = tuple(BoardPosition("back", idx) for idx in range(ROW_SIZES["back"]))
# Scan order: front before back, left to right.
ALL_POSITIONS: Tuple[BoardPosition, ...] = FRONT_POSITIONS + BACK_POSITIONS
