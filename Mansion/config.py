# Mansion/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Literal

import yaml

logger = logging.getLogger(__name__)

GameMode = Literal["novice", "adventurer", "master"]
GAME_MODES = ("novice", "adventurer", "master")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "mansion_config.yaml"


@dataclass(frozen=True)
class GameConfig:
    mode: GameMode = "master"
    leaf_ends_exploration: bool = False
    suspect_table_size: int = 10
    log_level: str = "WARNING"

    @property
    def collects_clues(self) -> bool:
        return self.mode in ("adventurer", "master")

    @property
    def uses_suspects(self) -> bool:
        return self.mode == "master"


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_game_config(raw: Dict[str, Any]) -> GameConfig:
    if not isinstance(raw, dict):
        raise ValueError("Game config must be a mapping")

    defaults = GameConfig()

    mode = raw.get("mode", defaults.mode)
    if mode not in GAME_MODES:
        raise ValueError(f"Unknown mode: {mode!r} (expected one of {', '.join(GAME_MODES)})")

    leaf_ends = raw.get("leaf_ends_exploration", defaults.leaf_ends_exploration)
    if not isinstance(leaf_ends, bool):
        raise ValueError("leaf_ends_exploration must be true or false")

    size = raw.get("suspect_table_size", defaults.suspect_table_size)
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"suspect_table_size must be a positive integer, got {size!r}")

    level = str(raw.get("log_level", defaults.log_level)).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log_level: {level!r}")

    return GameConfig(mode=mode, leaf_ends_exploration=leaf_ends, suspect_table_size=size, log_level=level)


def load_game_config(path: str | Path | None = None) -> GameConfig:
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    raw = _load_yaml(cfg_path)
    if not raw:
        logger.debug("No game config at %s; using defaults", cfg_path)
    return parse_game_config(raw)
