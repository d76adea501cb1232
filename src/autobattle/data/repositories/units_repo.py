"""Static unit stats repository."""
from __future__ import annotations

from typing import Dict

from autobattle.data.errors import DataValidationError
from autobattle.data.repositories.base import RepositoryBase
from autobattle.domain.unit import UnitStats


class UnitsRepository(RepositoryBase[UnitStats]):
    """Loads unit stats keyed by unit id."""

    def __init__(self, base_path=None) -> None:
        super().__init__("units.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, UnitStats]:
        units: Dict[str, UnitStats] = {}
        for raw_id, payload in raw.items():
            unit_data = self._require_mapping(payload, f"unit '{raw_id}'")
            self._assert_exact_fields(unit_data, {"max_hp", "attack"}, f"unit '{raw_id}'")
            max_hp = self._require_int(unit_data["max_hp"], f"unit '{raw_id}' max_hp")
            attack = self._require_int(unit_data["attack"], f"unit '{raw_id}' attack")
            if max_hp <= 0:
                raise DataValidationError(f"unit '{raw_id}' max_hp must be positive.")
            if attack < 0:
                raise DataValidationError(f"unit '{raw_id}' attack must not be negative.")
            units[raw_id] = UnitStats(id=raw_id, max_hp=max_hp, attack=attack)
        return units
