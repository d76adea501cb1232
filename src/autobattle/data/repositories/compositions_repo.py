"""Board compositions repository with reference validation."""
from __future__ import annotations

from typing import Dict, List

from autobattle.data.errors import DataReferenceError, DataValidationError
from autobattle.data.repositories.base import RepositoryBase
from autobattle.data.repositories.units_repo import UnitsRepository
from autobattle.domain.board_position import BoardPosition
from autobattle.domain.defs import CompositionDef, PlacementDef
from autobattle.domain.errors import InvalidPositionError


class CompositionsRepository(RepositoryBase[CompositionDef]):
    """Loads board compositions and ensures referenced units exist."""

    def __init__(self, units_repo: UnitsRepository | None = None, base_path=None) -> None:
        super().__init__("compositions.json", base_path)
        self._units_repo = units_repo or UnitsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CompositionDef]:
        unit_ids = set(self._units_repo.ids())

        compositions: Dict[str, CompositionDef] = {}
        for raw_id, payload in raw.items():
            context = f"composition '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"name", "placements"}, context)
            name = self._require_str(data["name"], f"{context} name")
            raw_placements = self._require_list(data["placements"], f"{context} placements")

            placements: List[PlacementDef] = []
            taken: set[BoardPosition] = set()
            for idx, raw_placement in enumerate(raw_placements):
                entry_context = f"{context} placement {idx}"
                entry = self._require_mapping(raw_placement, entry_context)
                self._assert_exact_fields(entry, {"unit_id", "row", "slot"}, entry_context)
                unit_id = self._require_str(entry["unit_id"], f"{entry_context} unit_id")
                row = self._require_str(entry["row"], f"{entry_context} row")
                slot = self._require_int(entry["slot"], f"{entry_context} slot")
                try:
                    position = BoardPosition(row=row, slot=slot)  # type: ignore[arg-type]
                except InvalidPositionError as exc:
                    raise DataValidationError(f"{entry_context}: {exc}") from exc
                if position in taken:
                    raise DataValidationError(f"{entry_context} reuses position {position}.")
                if unit_id not in unit_ids:
                    raise DataReferenceError(f"{context} references missing unit '{unit_id}'.")
                taken.add(position)
                placements.append(PlacementDef(unit_id=unit_id, position=position))

            compositions[raw_id] = CompositionDef(id=raw_id, name=name, placements=tuple(placements))
        return compositions
