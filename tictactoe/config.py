from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: int = logging.WARNING
    color: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY)} (got {raw!r})")


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"TICTACTOE_LOG_LEVEL is not a logging level: {raw!r}")
    return level


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    - TICTACTOE_LOG_LEVEL: DEBUG, INFO, WARNING (default), ...
    - TICTACTOE_COLOR: 1/0, true/false; colour is on by default.
    - NO_COLOR: any non-empty value turns colour off (https://no-color.org).
    """

    env = os.environ if environ is None else environ

    log_level = _parse_log_level(env.get("TICTACTOE_LOG_LEVEL", "WARNING"))

    color = True
    if env.get("TICTACTOE_COLOR"):
        color = _parse_bool("TICTACTOE_COLOR", env["TICTACTOE_COLOR"])
    if env.get("NO_COLOR"):
        color = False

    return Settings(log_level=log_level, color=color)
