"""Repository exports."""

from .compositions_repo import CompositionsRepository
from .units_repo import UnitsRepository

__all__ = [
    "CompositionsRepository",
    "UnitsRepository",
]
