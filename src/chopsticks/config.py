"""Solver defaults and their environment overrides.

Defaults reproduce the reference run: the initial position searched 15 plies
deep with the Computer to move.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .game_basics import INITIAL_POSITION, Position, Side, parse_position

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class SolverConfig:
    depth: int = 15
    mover: Side = Side.COMPUTER
    position: Position = field(default_factory=lambda: INITIAL_POSITION)
    export_depth: int = 6
    log_level: str = "INFO"


def _depth(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> SolverConfig:
    """Build a config from defaults, then CHOPSTICKS_* environment variables."""
    env = os.environ if environ is None else environ
    cfg = SolverConfig()
    if env.get("CHOPSTICKS_DEPTH"):
        cfg.depth = _depth("CHOPSTICKS_DEPTH", env["CHOPSTICKS_DEPTH"])
    if env.get("CHOPSTICKS_EXPORT_DEPTH"):
        cfg.export_depth = _depth("CHOPSTICKS_EXPORT_DEPTH", env["CHOPSTICKS_EXPORT_DEPTH"])
    if env.get("CHOPSTICKS_MOVER"):
        try:
            cfg.mover = Side.parse(env["CHOPSTICKS_MOVER"])
        except ValueError as e:
            raise ValueError(f"CHOPSTICKS_MOVER: {e}") from None
    if env.get("CHOPSTICKS_POSITION"):
        try:
            cfg.position = parse_position(env["CHOPSTICKS_POSITION"])
        except ValueError as e:
            raise ValueError(f"CHOPSTICKS_POSITION: {e}") from None
    if env.get("CHOPSTICKS_LOG_LEVEL"):
        level = env["CHOPSTICKS_LOG_LEVEL"].strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"CHOPSTICKS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
        cfg.log_level = level
    return cfg
