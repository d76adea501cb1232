"""Factory for building boards from composition definitions."""
from __future__ import annotations

from collections import Counter

from autobattle.data.repositories import CompositionsRepository, UnitsRepository
from autobattle.domain.board import Board, create_empty_board
from autobattle.services.errors import FactoryError

from .unit_factory import create_unit


def create_board_from_composition(
    composition_id: str,
    side_tag: str,
    compositions_repo: CompositionsRepository,
    units_repo: UnitsRepository,
) -> Board:
    """
    Build a board for one side.

    Instance ids follow "{unit_id}-{side_tag}-{n}", where n counts units of
    the same definition in placement order, so both sides may field the same
    composition without id clashes in the turn log.
    """
    try:
        composition = compositions_repo.get(composition_id)
    except KeyError as exc:
        raise FactoryError(f"Composition '{composition_id}' not found.") from exc

    counts: Counter[str] = Counter()
    board = create_empty_board()
    for placement in composition.placements:
        instance_id = f"{placement.unit_id}-{side_tag}-{counts[placement.unit_id]}"
        counts[placement.unit_id] += 1
        unit = create_unit(placement.unit_id, instance_id, placement.position, units_repo)
        board = board.place_unit(unit, placement.position)
    return board
