"""Text playback of resolved battles."""
from __future__ import annotations

import time
from typing import Callable, Dict

from autobattle.domain.battle_models import BattleResult

from .render import (
    Writer,
    format_board,
    format_defeat,
    format_turn,
    format_victory,
    render_bullet_lines,
    render_heading,
)


class TextBattlePresenter:
    """Replays a BattleResult one turn at a time with a fixed pause between turns."""

    def __init__(
        self,
        delay_seconds: float = 1.0,
        *,
        write: Writer = print,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative.")
        self._delay_seconds = delay_seconds
        self._write = write
        self._sleep = sleep or time.sleep

    def present(self, result: BattleResult) -> None:
        names: Dict[str, str] = {result.winner.id: result.winner.name, result.loser.id: result.loser.name}
        render_heading("Battle", self._write)
        if not result.turns:
            self._write("No turns were fought.")
        for turn in result.turns:
            self._write(format_turn(turn, names))
            if turn.defender_defeated:
                self._write(format_defeat(turn))
            if self._delay_seconds:
                self._sleep(self._delay_seconds)

        render_heading("Result", self._write)
        self._write(format_victory(result))
        for player in (result.winner, result.loser):
            self._write(f"{player.name}:")
            render_bullet_lines(format_board(player), self._write)
