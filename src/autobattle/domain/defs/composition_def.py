"""Board composition definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from autobattle.domain.board_position import BoardPosition


@dataclass(frozen=True, slots=True)
class PlacementDef:
    """One unit definition placed at a board position."""

    unit_id: str
    position: BoardPosition


@dataclass(frozen=True, slots=True)
class CompositionDef:
    """Named board layout used to build a roster."""

    id: str
    name: str
    placements: Tuple[PlacementDef, ...]
