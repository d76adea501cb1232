"""Console entry point: build two rosters, resolve the battle, replay it."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from autobattle.data.errors import DataError
from autobattle.data.repositories import CompositionsRepository, UnitsRepository
from autobattle.domain.player import Player
from autobattle.services import BattleOrchestrator, BattleService, FactoryError
from autobattle.services.battle_service import TIE_BREAKS
from autobattle.services.factories import create_player_from_composition

from .config import load_config, save_config
from .presenter import TextBattlePresenter
from .render import debug_enabled, render_heading

logger = logging.getLogger(__name__)

_DEFAULT_PLAYER_A = "mixed"
_DEFAULT_PLAYER_B = "balanced"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="autobattle", description="Resolve and replay an automatic battle.")
    parser.add_argument("--player-a", default=_DEFAULT_PLAYER_A, help="Composition id for side A (attacks first)")
    parser.add_argument("--player-b", default=_DEFAULT_PLAYER_B, help="Composition id for side B")
    parser.add_argument("--name-a", default="Player 1", help="Display name for side A")
    parser.add_argument("--name-b", default="Player 2", help="Display name for side B")
    parser.add_argument("--delay", type=float, default=None, help="Seconds to pause between turns")
    parser.add_argument("--tie-break", choices=TIE_BREAKS, default=None, help="Side that wins a mutual defeat")
    parser.add_argument("--definitions", type=Path, default=None, help="Directory holding units.json and compositions.json")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--list", action="store_true", help="List available compositions and exit")
    parser.add_argument("--save-config", action="store_true", help="Save --delay and --tie-break as defaults and exit")
    return parser


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_players(
    args: argparse.Namespace,
    compositions_repo: CompositionsRepository,
    units_repo: UnitsRepository,
) -> List[Player]:
    return [
        create_player_from_composition("p1", args.name_a, args.player_a, compositions_repo, units_repo),
        create_player_from_composition("p2", args.name_b, args.player_b, compositions_repo, units_repo),
    ]


def _list_compositions(compositions_repo: CompositionsRepository) -> None:
    compositions = compositions_repo.all()
    render_heading("Compositions")
    for composition in compositions:
        units = ", ".join(f"{placement.unit_id}@{placement.position}" for placement in composition.placements)
        print(f"{composition.id}: {composition.name} [{units}]")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one battle from the command line and return an exit code."""
    configure_logging()
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    delay = args.delay if args.delay is not None else float(config["turn_delay_seconds"])
    tie_break = args.tie_break or str(config["tie_break"])

    if args.save_config:
        save_config({"turn_delay_seconds": delay, "tie_break": tie_break}, args.config)
        print("Config saved.")
        return 0

    units_repo = UnitsRepository(base_path=args.definitions)
    compositions_repo = CompositionsRepository(units_repo=units_repo, base_path=args.definitions)

    try:
        if args.list:
            _list_compositions(compositions_repo)
            return 0
        player_a, player_b = _build_players(args, compositions_repo, units_repo)
    except (DataError, FactoryError) as exc:
        logger.error(f"Unable to build rosters: {exc}")
        print(f"Error: {exc}")
        return 1

    orchestrator = BattleOrchestrator(
        BattleService(tie_break=tie_break),  # type: ignore[arg-type]
        TextBattlePresenter(delay_seconds=max(0.0, delay)),
    )
    orchestrator.start_battle(player_a, player_b)
    return 0
