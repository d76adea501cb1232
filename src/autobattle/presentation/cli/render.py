"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Callable, List, Mapping

from autobattle.domain.battle_models import BattleResult, BattleTurn
from autobattle.domain.player import Player

Writer = Callable[[str], None]


def debug_enabled() -> bool:
    """Return True only when AUTOBATTLE_DEBUG is explicitly set to '1'."""
    return os.getenv("AUTOBATTLE_DEBUG") == "1"


def render_heading(title: str, write: Writer = print) -> None:
    """Print a consistent section heading."""
    write(f"\n=== {title} ===")


def format_turn(turn: BattleTurn, player_names: Mapping[str, str]) -> str:
    """Describe one turn using only the data recorded in it."""
    side_name = player_names.get(turn.attacking_player_id, turn.attacking_player_id)
    return (
        f"Turn {turn.turn_number} | {side_name}: "
        f"{turn.attacker.id} [{turn.attacker_position}] hits "
        f"{turn.defender.id} [{turn.defender_position}] for {turn.damage} "
        f"(HP {turn.defender_hp_after}/{turn.defender.max_hp})"
    )


def format_defeat(turn: BattleTurn) -> str:
    return f"{turn.defender.id} is defeated!"


def format_board(player: Player) -> List[str]:
    """Return one line per slot, front row first."""
    lines: List[str] = []
    for slot in player.board.slots():
        if slot.unit is None:
            lines.append(f"{slot.position}: (empty)")
            continue
        unit = slot.unit
        status = "" if unit.is_alive else " (defeated)"
        lines.append(f"{slot.position}: {unit.id} HP {unit.hp}/{unit.max_hp} ATK {unit.attack}{status}")
    return lines


def format_victory(result: BattleResult) -> str:
    if result.outcome == "stalemate":
        return f"Stalemate! {result.winner.name} holds the field."
    return f"{result.winner.name} wins!"


def render_bullet_lines(lines: List[str], write: Writer = print) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        write(f"- {line}")
