"""Service layer exports."""

from .battle_service import BattleService
from .controllers import BattleOrchestrator, BattlePresenter
from .errors import FactoryError

__all__ = [
    "BattleOrchestrator",
    "BattlePresenter",
    "BattleService",
    "FactoryError",
]
