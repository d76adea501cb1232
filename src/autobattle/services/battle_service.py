"""Battle service resolving complete deterministic battles."""
from __future__ import annotations

import logging
from typing import List, Tuple

from autobattle.core.types import Outcome, TieBreak
from autobattle.domain.battle_models import BattleResult, BattleTurn, DuelResult
from autobattle.domain.board import create_empty_board, get_valid_targets
from autobattle.domain.board_position import BoardPosition
from autobattle.domain.player import Player, create_player
from autobattle.domain.unit import Unit

logger = logging.getLogger(__name__)

DUEL_POSITION = BoardPosition("front", 0)
DUEL_SIDE_IDS = ("side-a", "side-b")
TIE_BREAKS: Tuple[TieBreak, ...] = ("first", "second")


class BattleService:
    """
    Deterministic battle resolver.

    A battle is evaluated in one synchronous call and returned as an ordered
    turn log plus the final rosters. Side A always attacks first; sides then
    strictly alternate. Each turn the attacking side acts with its first
    living unit (front row before back row, left to right) and hits the first
    legal target on the defending board for exactly its attack value.

    Input rosters are immutable values; the service only rebinds its own
    references, so callers may reuse them after resolution.
    """

    def __init__(self, *, tie_break: TieBreak = "first") -> None:
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}.")
        self._tie_break = tie_break

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    # -----------------------
    # Resolution
    # -----------------------
    def evaluate(self, player_a: Player, player_b: Player) -> BattleResult:
        """Evaluate a complete battle between two rosters."""
        sides: List[Player] = [player_a, player_b]
        turns: List[BattleTurn] = []
        attacker_idx = 0
        turn_number = 1
        outcome: Outcome = "defeat"

        while not sides[0].has_lost and not sides[1].has_lost:
            attacking = sides[attacker_idx]
            defending = sides[1 - attacker_idx]

            attacker_slot = attacking.board.first_alive_slot()
            if attacker_slot is None or attacker_slot.unit is None:
                break

            target_positions = get_valid_targets(defending.board)
            if not target_positions:
                break

            if self._is_stalemate(sides):
                outcome = "stalemate"
                break

            attacker = attacker_slot.unit
            defender_position = target_positions[0]
            defender = defending.board.get_unit_at_position(defender_position)
            assert defender is not None

            damage = attacker.attack
            damaged_defender = defender.take_damage(damage)
            turns.append(
                BattleTurn(
                    turn_number=turn_number,
                    attacking_player_id=attacking.id,
                    attacker=attacker,
                    attacker_position=attacker_slot.position,
                    defender=damaged_defender,
                    defender_position=defender_position,
                    damage=damage,
                    defender_hp_after=damaged_defender.hp,
                )
            )
            logger.debug(
                f"Turn {turn_number}: {attacker.id} ({attacker_slot.position}) hits "
                f"{defender.id} ({defender_position}) for {damage}, hp {defender.hp} -> {damaged_defender.hp}"
            )

            updated_board = defending.board.update_unit(defender_position, damaged_defender)
            sides[1 - attacker_idx] = defending.with_board(updated_board)

            attacker_idx = 1 - attacker_idx
            turn_number += 1

        winner, loser = self._decide_outcome(sides[0], sides[1])
        logger.info(f"Battle concluded by {outcome} after {len(turns)} turns: winner={winner.id} loser={loser.id}")
        return BattleResult(turns=tuple(turns), winner=winner, loser=loser, outcome=outcome)

    def evaluate_duel(self, unit_a: Unit, unit_b: Unit) -> DuelResult:
        """Evaluate a battle between two standalone units.

        Each unit is placed alone on an otherwise empty board, so the duel is
        the board-based battle with one occupied slot per side.
        """
        player_a = self._single_unit_player(DUEL_SIDE_IDS[0], unit_a)
        player_b = self._single_unit_player(DUEL_SIDE_IDS[1], unit_b)
        result = self.evaluate(player_a, player_b)

        winner = result.winner.board.get_unit_at_position(DUEL_POSITION)
        loser = result.loser.board.get_unit_at_position(DUEL_POSITION)
        assert winner is not None and loser is not None
        return DuelResult(turns=result.turns, winner=winner, loser=loser, outcome=result.outcome)

    # -----------------------
    # Helpers
    # -----------------------
    def _decide_outcome(self, player_a: Player, player_b: Player) -> Tuple[Player, Player]:
        first, second = (player_a, player_b) if self._tie_break == "first" else (player_b, player_a)
        if not first.has_lost:
            return first, second
        if not second.has_lost:
            return second, first
        # Neither side has a living unit; the checked-first side keeps priority.
        return first, second

    @staticmethod
    def _is_stalemate(sides: List[Player]) -> bool:
        """True when neither side's acting unit can deal damage."""
        for side in sides:
            slot = side.board.first_alive_slot()
            if slot is None or slot.unit is None or slot.unit.attack > 0:
                return False
        return True

    @staticmethod
    def _single_unit_player(player_id: str, unit: Unit) -> Player:
        board = create_empty_board().place_unit(unit, DUEL_POSITION)
        return create_player(player_id, unit.id, board)
