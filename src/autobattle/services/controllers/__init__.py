"""UI-agnostic controllers for battle flow orchestration."""
from __future__ import annotations

from .battle_orchestrator import BattleOrchestrator, BattlePresenter

__all__ = [
    "BattleOrchestrator",
    "BattlePresenter",
]
