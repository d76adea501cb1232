"""Battle flow: evaluate with the service, then hand the result to a presenter."""
from __future__ import annotations

from typing import Protocol

from autobattle.domain.battle_models import BattleResult
from autobattle.domain.player import Player
from autobattle.services.battle_service import BattleService


class BattlePresenter(Protocol):
    """Anything that can play back a resolved battle."""

    def present(self, result: BattleResult) -> None:
        ...


class BattleOrchestrator:
    """
    Coordinates battle flow between core logic and presentation.

    The battle is fully resolved before presentation starts; playback pacing
    never feeds back into the result.
    """

    def __init__(self, battle_service: BattleService, presenter: BattlePresenter) -> None:
        self._service = battle_service
        self._presenter = presenter

    def start_battle(self, player_a: Player, player_b: Player) -> BattleResult:
        """Evaluate a battle, present it, and return the result."""
        result = self._service.evaluate(player_a, player_b)
        self._presenter.present(result)
        return result
