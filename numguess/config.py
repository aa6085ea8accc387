"""
Configuration - Startup settings for every front-end.

Environment:
    NUMGUESS_UPPER_BOUND      Highest possible secret (default 100)
    NUMGUESS_ALLOWED_ORIGINS  Comma-separated CORS origins (default "*")
    NUMGUESS_STALE_AFTER      Seconds before an idle web game is dropped
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os

from .game.session import InvalidConfiguration
from .session.display import Labels

DEFAULT_UPPER_BOUND = 100


def _int_setting(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise InvalidConfiguration(f"{name} must be >= 1, got {value}")
    return value


@dataclass(frozen=True)
class GameConfig:
    upper_bound: int = DEFAULT_UPPER_BOUND
    labels: Labels = field(default_factory=Labels)
    allowed_origins: tuple[str, ...] = ("*",)
    stale_after_seconds: int = 3600

    @classmethod
    def from_env(cls, environ=None) -> GameConfig:
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        upper_bound = DEFAULT_UPPER_BOUND
        raw = env.get("NUMGUESS_UPPER_BOUND")
        if raw:
            upper_bound = _int_setting("NUMGUESS_UPPER_BOUND", raw)

        stale_after = 3600
        raw = env.get("NUMGUESS_STALE_AFTER")
        if raw:
            stale_after = _int_setting("NUMGUESS_STALE_AFTER", raw)

        origins = tuple(
            origin.strip()
            for origin in env.get("NUMGUESS_ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        )

        return cls(
            upper_bound=upper_bound,
            allowed_origins=origins or ("*",),
            stale_after_seconds=stale_after,
        )
