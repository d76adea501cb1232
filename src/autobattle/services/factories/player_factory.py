"""Factory for creating player rosters from compositions."""
from __future__ import annotations

from autobattle.data.repositories import CompositionsRepository, UnitsRepository
from autobattle.domain.player import Player, create_player

from .board_factory import create_board_from_composition


def create_player_from_composition(
    player_id: str,
    name: str,
    composition_id: str,
    compositions_repo: CompositionsRepository,
    units_repo: UnitsRepository,
) -> Player:
    """Instantiate a roster whose unit ids are tagged with the player id."""
    board = create_board_from_composition(
        composition_id,
        side_tag=player_id,
        compositions_repo=compositions_repo,
        units_repo=units_repo,
    )
    return create_player(player_id, name, board)
