from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_LOG_LEVEL: Final[str] = "RPS_LOG_LEVEL"
ENV_IGNORE_CASE: Final[str] = "RPS_IGNORE_CASE"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class GameConfig:
    case_sensitive: bool = True
    log_level: str = "WARNING"


def config_from_env(environ: Mapping[str, str] | None = None) -> GameConfig:
    """Defaults for the CLI flags; unset or unknown values fall back to GameConfig defaults."""
    env = os.environ if environ is None else environ
    level = env.get(ENV_LOG_LEVEL, "").strip().upper()
    ignore_case = env.get(ENV_IGNORE_CASE, "").strip().lower() in _TRUTHY
    return GameConfig(
        case_sensitive=not ignore_case,
        log_level=level if level in LOG_LEVELS else GameConfig.log_level,
    )
