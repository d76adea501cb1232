"""Factory for creating units from static stats."""
from __future__ import annotations

from typing import Tuple

from autobattle.data.repositories import UnitsRepository
from autobattle.domain.board_position import BoardPosition
from autobattle.domain.unit import Unit
from autobattle.services.errors import FactoryError


def layout_for_position(position: BoardPosition) -> Tuple[int, int]:
    """Return presentation coordinates for a board position."""
    return position.slot, 0 if position.row == "front" else 1


def create_unit(
    unit_id: str,
    instance_id: str,
    position: BoardPosition,
    units_repo: UnitsRepository,
) -> Unit:
    """Instantiate a full-health unit using the provided repository."""
    try:
        stats = units_repo.get(unit_id)
    except KeyError as exc:
        raise FactoryError(f"Unit '{unit_id}' not found.") from exc

    x, y = layout_for_position(position)
    return Unit(id=instance_id, hp=stats.max_hp, max_hp=stats.max_hp, attack=stats.attack, x=x, y=y)
