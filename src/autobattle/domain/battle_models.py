"""Battle log and result models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from autobattle.core.types import Outcome
from autobattle.domain.board_position import BoardPosition
from autobattle.domain.player import Player
from autobattle.domain.unit import Unit


@dataclass(frozen=True, slots=True)
class BattleTurn:
    """A single attack. The defender snapshot is taken after damage."""

    turn_number: int
    attacking_player_id: str
    attacker: Unit
    attacker_position: BoardPosition
    defender: Unit
    defender_position: BoardPosition
    damage: int
    defender_hp_after: int

    @property
    def defender_defeated(self) -> bool:
        return self.defender_hp_after == 0


@dataclass(frozen=True, slots=True)
class BattleResult:
    """Complete ordered turn log plus the final rosters."""

    turns: Tuple[BattleTurn, ...]
    winner: Player
    loser: Player
    outcome: Outcome = "defeat"


@dataclass(frozen=True, slots=True)
class DuelResult:
    """Result of a battle between two standalone units."""

    turns: Tuple[BattleTurn, ...]
    winner: Unit
    loser: Unit
    outcome: Outcome = "defeat"
