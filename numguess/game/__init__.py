"""
Game Module - The guessing game model.

A GameSession knows nothing about any user interface. It owns the secret,
counts evaluated guesses and produces hint text.
"""

from .session import (
    GameSession,
    GuessResult,
    Hint,
    InvalidConfiguration,
    OutOfRange,
)

__all__ = [
    "GameSession",
    "GuessResult",
    "Hint",
    "InvalidConfiguration",
    "OutOfRange",
]
