from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = "WARNING"
    seed: int | None = None
    reveal_secret: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().casefold()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    - GUESSING_GAME_LOG_LEVEL: logging level name (default WARNING)
    - GUESSING_GAME_SEED: integer seed for the secret's rng (default: random)
    - GUESSING_GAME_REVEAL_SECRET: print the secret at start (default true)
    """

    if env is None:
        env = os.environ

    log_level = env.get("GUESSING_GAME_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"GUESSING_GAME_LOG_LEVEL is not a logging level (got {log_level!r})")

    seed: int | None = None
    raw_seed = env.get("GUESSING_GAME_SEED", "").strip()
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError as e:
            raise ValueError(f"GUESSING_GAME_SEED must be an integer (got {raw_seed!r})") from e

    reveal_secret = True
    raw_reveal = env.get("GUESSING_GAME_REVEAL_SECRET")
    if raw_reveal is not None and raw_reveal.strip():
        reveal_secret = _parse_bool("GUESSING_GAME_REVEAL_SECRET", raw_reveal)

    return Settings(log_level=log_level, seed=seed, reveal_secret=reveal_secret)
