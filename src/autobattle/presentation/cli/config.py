"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)

_DEFAULT_TURN_DELAY = 1.0
_DEFAULT_TIE_BREAK = "first"

ConfigValue = Union[float, str]


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Autobattle"
        return Path.home() / "Autobattle"
    return Path.home() / ".config" / "autobattle"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, ConfigValue]:
    return {"turn_delay_seconds": _DEFAULT_TURN_DELAY, "tie_break": _DEFAULT_TIE_BREAK}


def _normalize_turn_delay(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        return _DEFAULT_TURN_DELAY
    return float(value)


def _normalize_tie_break(value: object) -> str:
    return "second" if value == "second" else _DEFAULT_TIE_BREAK


def _normalize(raw: Dict[str, object]) -> Dict[str, ConfigValue]:
    return {
        "turn_delay_seconds": _normalize_turn_delay(raw.get("turn_delay_seconds")),
        "tie_break": _normalize_tie_break(raw.get("tie_break")),
    }


def load_config(path: Path | None = None) -> Dict[str, ConfigValue]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning(f"Ignoring unreadable config {config_path}: {exc}")
        return default_config()
    if not isinstance(raw, dict):
        logger.warning(f"Ignoring config {config_path}: expected a JSON object")
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, ConfigValue], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
