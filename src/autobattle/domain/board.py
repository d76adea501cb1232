"""Board model: three front slots, two back slots, copy-on-write updates."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Tuple

from autobattle.domain.board_position import BACK_POSITIONS, FRONT_POSITIONS, BoardPosition
from autobattle.domain.errors import DuplicateUnitError, InvalidPositionError
from autobattle.domain.unit import Unit


@dataclass(frozen=True, slots=True)
class BoardSlot:
    """A slot on the board that can contain a unit or be empty."""

    position: BoardPosition
    unit: Unit | None = None


@dataclass(frozen=True, slots=True)
class Board:
    """
    Fixed-shape collection of slots addressed by BoardPosition.

    Front row: 3 slots (0, 1, 2)
    Back row: 2 slots (0, 1)

    Every update returns a new Board; existing boards are never modified, so
    snapshots held elsewhere stay valid.
    """

    front_row: Tuple[BoardSlot, BoardSlot, BoardSlot]
    back_row: Tuple[BoardSlot, BoardSlot]

    def __post_init__(self) -> None:
        if tuple(slot.position for slot in self.front_row) != FRONT_POSITIONS:
            raise InvalidPositionError("Front row must hold slots front-0, front-1, front-2 in order.")
        if tuple(slot.position for slot in self.back_row) != BACK_POSITIONS:
            raise InvalidPositionError("Back row must hold slots back-0, back-1 in order.")
        seen: set[str] = set()
        for slot in self.slots():
            if slot.unit is None:
                continue
            if slot.unit.id in seen:
                raise DuplicateUnitError(f"Unit '{slot.unit.id}' occupies more than one slot.")
            seen.add(slot.unit.id)

    # -----------------------
    # Queries
    # -----------------------
    def slots(self) -> Iterator[BoardSlot]:
        """Yield every slot, front row before back row, left to right."""
        yield from self.front_row
        yield from self.back_row

    def get_all_units(self) -> List[Unit]:
        """Return all units on the board, including defeated ones."""
        return [slot.unit for slot in self.slots() if slot.unit is not None]

    def get_alive_units(self) -> List[Unit]:
        return [unit for unit in self.get_all_units() if unit.is_alive]

    def has_alive_units(self) -> bool:
        return any(unit.is_alive for unit in self.get_all_units())

    def get_alive_front_row(self) -> List[Unit]:
        return [slot.unit for slot in self.front_row if slot.unit is not None and slot.unit.is_alive]

    def get_alive_back_row(self) -> List[Unit]:
        return [slot.unit for slot in self.back_row if slot.unit is not None and slot.unit.is_alive]

    def get_slot(self, position: BoardPosition) -> BoardSlot:
        row = self.front_row if position.row == "front" else self.back_row
        return row[position.slot]

    def get_unit_at_position(self, position: BoardPosition) -> Unit | None:
        return self.get_slot(position).unit

    def find_unit_position(self, unit_id: str) -> BoardPosition | None:
        """Return the position of the unit with the given id, if present."""
        for slot in self.slots():
            if slot.unit is not None and slot.unit.id == unit_id:
                return slot.position
        return None

    def first_alive_slot(self) -> BoardSlot | None:
        """Return the first slot holding a living unit in scan order."""
        for slot in self.slots():
            if slot.unit is not None and slot.unit.is_alive:
                return slot
        return None

    # -----------------------
    # Copy-on-write updates
    # -----------------------
    def place_unit(self, unit: Unit, position: BoardPosition) -> Board:
        """Place a unit at a position, replacing any occupant. Returns a new board."""
        existing = self.find_unit_position(unit.id)
        if existing is not None and existing != position:
            raise DuplicateUnitError(f"Unit '{unit.id}' is already placed at {existing}.")
        return self._with_slot(BoardSlot(position=position, unit=unit))

    def remove_unit(self, position: BoardPosition) -> Board:
        """Clear a position. Returns a new board."""
        return self._with_slot(BoardSlot(position=position, unit=None))

    def update_unit(self, position: BoardPosition, unit: Unit) -> Board:
        """Replace the unit at a position with an updated value."""
        return self.place_unit(unit, position)

    def _with_slot(self, new_slot: BoardSlot) -> Board:
        position = new_slot.position
        if position.row == "front":
            front = list(self.front_row)
            front[position.slot] = new_slot
            return replace(self, front_row=tuple(front))
        back = list(self.back_row)
        back[position.slot] = new_slot
        return replace(self, back_row=tuple(back))


def create_empty_board() -> Board:
    """Create a board with every slot empty."""
    return Board(
        front_row=tuple(BoardSlot(position=pos) for pos in FRONT_POSITIONS),  # type: ignore[arg-type]
        back_row=tuple(BoardSlot(position=pos) for pos in BACK_POSITIONS),  # type: ignore[arg-type]
    )


def get_valid_targets(board: Board) -> List[BoardPosition]:
    """
    Return the positions that may currently be attacked.

    Living front-row units shield the back row entirely. Only when the front
    row has no living occupant do living back-row units become targetable.
    Positions come back in slot order so selection is reproducible; an empty
    list means the board has no living unit at all.
    """
    alive_front = [slot.position for slot in board.front_row if slot.unit is not None and slot.unit.is_alive]
    if alive_front:
        return alive_front
    return [slot.position for slot in board.back_row if slot.unit is not None and slot.unit.is_alive]
