"""Domain definition exports."""

from .composition_def import CompositionDef, PlacementDef

__all__ = [
    "CompositionDef",
    "PlacementDef",
]
