"""Factory helpers for runtime entities."""

from .board_factory import create_board_from_composition
from .player_factory import create_player_from_composition
from .unit_factory import create_unit, layout_for_position

__all__ = [
    "create_board_from_composition",
    "create_player_from_composition",
    "create_unit",
    "layout_for_position",
]
