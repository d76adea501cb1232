"""Domain model exports."""

from .battle_models import BattleResult, BattleTurn, DuelResult
from .board import Board, BoardSlot, create_empty_board, get_valid_targets
from .board_position import ALL_POSITIONS, BoardPosition, create_position
from .errors import DomainError, DuplicateUnitError, InvalidPositionError, InvalidUnitError
from .player import Player, create_player
from .unit import Unit, UnitStats

__all__ = [
    "ALL_POSITIONS",
    "BattleResult",
    "BattleTurn",
    "Board",
    "BoardPosition",
    "BoardSlot",
    "DomainError",
    "DuelResult",
    "DuplicateUnitError",
    "InvalidPositionError",
    "InvalidUnitError",
    "Player",
    "Unit",
    "UnitStats",
    "create_empty_board",
    "create_player",
    "create_position",
    "get_valid_targets",
]
