"""
Game Session - One round of the guessing game.

LIFECYCLE:
1. Created with a fresh random secret in [1, upper_bound]
2. Mutated only by guess()
3. Replaced wholesale when a new game starts (never reset in place)

INVARIANTS:
- 1 <= secret <= upper_bound
- attempts >= 0, incremented once per evaluated guess
- finished never reverts to False once set
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import random


class InvalidConfiguration(ValueError):
    """Raised when a session cannot be built from the given bound or secret."""


class OutOfRange(ValueError):
    """Raised when a guess falls outside [1, upper_bound]."""

    def __init__(self, value: int, upper_bound: int):
        self.value = value
        self.upper_bound = upper_bound
        super().__init__(f"Guess {value} is outside 1..{upper_bound}")


class Hint(Enum):
    """Direction of the secret relative to a guess."""
    TOO_LOW = "too_low"  # secret is higher
    TOO_HIGH = "too_high"  # secret is lower
    CORRECT = "correct"


HINT_MESSAGES = {
    Hint.TOO_LOW: "Too low",
    Hint.TOO_HIGH: "Too high",
    Hint.CORRECT: "Right!",
}


@dataclass(frozen=True)
class GuessResult:
    """
    Outcome of one evaluated guess.

    distance is secret - value: positive when the secret is higher,
    negative when lower, None when the guess was correct.
    """
    correct: bool
    distance: int | None
    hint: Hint

    @property
    def message(self) -> str:
        return HINT_MESSAGES[self.hint]


def _check_bound(upper_bound) -> int:
    if isinstance(upper_bound, bool) or not isinstance(upper_bound, int):
        raise InvalidConfiguration(
            f"upper_bound must be an integer, got {upper_bound!r}"
        )
    if upper_bound < 1:
        raise InvalidConfiguration(
            f"upper_bound must be >= 1, got {upper_bound}"
        )
    return upper_bound


class GameSession:
    """
    A single round of Guess the Number.

    Usage:
        session = GameSession.create(100)
        result = session.guess(50)
        print(session.get_message())

    Tests force the secret through the constructor:
        session = GameSession(10, secret=7)
    """

    def __init__(self, upper_bound: int, secret: int):
        self._upper_bound = _check_bound(upper_bound)
        if isinstance(secret, bool) or not isinstance(secret, int):
            raise InvalidConfiguration(f"secret must be an integer, got {secret!r}")
        if not 1 <= secret <= self._upper_bound:
            raise InvalidConfiguration(
                f"secret {secret} is outside 1..{self._upper_bound}"
            )
        self._secret = secret
        self._attempts = 0
        self._finished = False
        self._last_result: GuessResult | None = None

    @classmethod
    def create(cls, upper_bound: int, rng: random.Random | None = None) -> GameSession:
        """
        Start a session with a secret drawn uniformly from [1, upper_bound].

        Raises:
            InvalidConfiguration: if upper_bound is not a positive integer
        """
        _check_bound(upper_bound)
        source = rng if rng is not None else random
        return cls(upper_bound, source.randint(1, upper_bound))

    @property
    def secret(self) -> int:
        return self._secret

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def last_result(self) -> GuessResult | None:
        return self._last_result

    def guess(self, value: int) -> GuessResult:
        """
        Evaluate a guess against the secret.

        Counts as an attempt whatever the outcome. Callers are expected
        to stop guessing once the session is finished.

        Raises:
            OutOfRange: if value is outside [1, upper_bound]
        """
        if not 1 <= value <= self._upper_bound:
            raise OutOfRange(value, self._upper_bound)

        self._attempts += 1

        if value == self._secret:
            self._finished = True
            result = GuessResult(correct=True, distance=None, hint=Hint.CORRECT)
        else:
            distance = self._secret - value
            hint = Hint.TOO_LOW if distance > 0 else Hint.TOO_HIGH
            result = GuessResult(correct=False, distance=distance, hint=hint)

        self._last_result = result
        return result

    def intro_message(self) -> str:
        return f"I'm thinking of a number between 1 and {self._upper_bound}."

    def get_message(self) -> str:
        """Hint for the last guess, or the opening prompt before any guess."""
        if self._last_result is None:
            return self.intro_message()
        return self._last_result.message

    def get_attempts(self) -> int:
        return self._attempts

    def is_finished(self) -> bool:
        return self._finished

    def __repr__(self) -> str:
        return (
            f"GameSession(upper_bound={self._upper_bound}, "
            f"attempts={self._attempts}, finished={self._finished})"
        )
