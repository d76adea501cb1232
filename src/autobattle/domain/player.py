"""Player roster: an identity plus one board."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

from autobattle.domain.board import Board
from autobattle.domain.unit import Unit


@dataclass(frozen=True, slots=True)
class Player:
    """A player in battle. Win/loss is derived from the board."""

    id: str
    name: str
    board: Board

    @property
    def has_lost(self) -> bool:
        return not self.board.has_alive_units()

    def all_units(self) -> List[Unit]:
        return self.board.get_all_units()

    def alive_units(self) -> List[Unit]:
        return self.board.get_alive_units()

    def has_alive_units(self) -> bool:
        return self.board.has_alive_units()

    def with_board(self, board: Board) -> Player:
        """Return a copy of this player holding a replacement board."""
        return replace(self, board=board)


def create_player(player_id: str, name: str, board: Board) -> Player:
    return Player(id=player_id, name=name, board=board)
