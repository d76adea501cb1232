"""Combat unit values."""
from __future__ import annotations

from dataclasses import dataclass, replace

from autobattle.domain.errors import InvalidUnitError


@dataclass(frozen=True, slots=True)
class UnitStats:
    """Static stats used to create new units."""

    id: str
    max_hp: int
    attack: int


@dataclass(frozen=True, slots=True)
class Unit:
    """An immutable combat unit; damage produces a new value."""

    id: str
    hp: int
    max_hp: int
    attack: int
    x: int = 0  # layout only
    y: int = 0

    def __post_init__(self) -> None:
        for name in ("hp", "max_hp", "attack"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidUnitError(f"Unit '{self.id}' {name} must be an integer, got {value!r}.")
        if self.max_hp <= 0:
            raise InvalidUnitError(f"Unit '{self.id}' max_hp must be positive, got {self.max_hp}.")
        if not 0 <= self.hp <= self.max_hp:
            raise InvalidUnitError(f"Unit '{self.id}' hp must be within 0..{self.max_hp}, got {self.hp}.")
        if self.attack < 0:
            raise InvalidUnitError(f"Unit '{self.id}' attack must not be negative, got {self.attack}.")

    @classmethod
    def from_stats(cls, stats: UnitStats, x: int = 0, y: int = 0) -> Unit:
        """Create a unit at full health from static stats."""
        return cls(id=stats.id, hp=stats.max_hp, max_hp=stats.max_hp, attack=stats.attack, x=x, y=y)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, damage: int) -> Unit:
        """Return a copy with damage applied; hp never drops below zero."""
        if damage < 0:
            raise ValueError("Damage must not be negative.")
        return replace(self, hp=max(0, self.hp - damage))
