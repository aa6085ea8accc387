"""
Session Controller - Mediates between an input surface and a GameSession.

FLOW:
    front-end -> submit_guess(raw) -> validate -> GameSession.guess(value)
              <- DisplayState      <- format   <- GuessResult

STATES:
    NOT_STARTED --initialize--> IN_PROGRESS --correct guess--> WON
    any state --request_new_game--> IN_PROGRESS (fresh session)
    WON --submit_guess--> WON (rejected, reported)

Every operation runs to completion synchronously. Front-ends that queue
events must not interleave two calls on the same controller.
"""

from __future__ import annotations
from typing import Callable
import logging
import re

from ..game.session import GameSession
from .display import ControllerState, DisplayState, Labels
from .errors import (
    AlreadyFinished,
    EmptyInput,
    InputError,
    MalformedInput,
    NotStarted,
    OutOfRangeInput,
)

logger = logging.getLogger(__name__)

SessionFactory = Callable[[int], GameSession]

_INTEGER = re.compile(r"[+-]?[0-9]+")


class SessionController:
    """
    Owns exactly one GameSession at a time and turns raw input into
    display snapshots.

    Usage:
        controller = SessionController()
        display = controller.initialize(100)
        display = controller.submit_guess("50")
        print(display.top_message)

    Dependencies are passed in explicitly so tests can substitute them:
        controller = SessionController(
            session_factory=lambda bound: GameSession(bound, secret=7),
        )
    """

    def __init__(
        self,
        session_factory: SessionFactory = GameSession.create,
        labels: Labels | None = None,
        session: GameSession | None = None,
    ):
        self._session_factory = session_factory
        self.labels = labels or Labels()
        self._pending_session = session
        self._session: GameSession | None = None
        self._state = ControllerState.NOT_STARTED
        self.last_top_message = ""
        self.last_status_message = ""

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def current_session(self) -> GameSession | None:
        return self._session

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initialize(self, upper_bound: int) -> DisplayState:
        """
        Start the first game.

        A session handed to the constructor is adopted when its bound
        matches; otherwise a fresh one is built from the factory.

        Raises:
            InvalidConfiguration: if upper_bound is not a positive integer
        """
        pending, self._pending_session = self._pending_session, None
        if pending is not None and pending.upper_bound == upper_bound and pending.attempts == 0:
            return self._start(pending)
        return self._start(self._session_factory(upper_bound))

    def request_new_game(self, upper_bound: int) -> DisplayState:
        """Discard the current session and start over from any state."""
        return self._start(self._session_factory(upper_bound))

    def _start(self, session: GameSession) -> DisplayState:
        self._session = session
        self._state = ControllerState.IN_PROGRESS
        self.last_top_message = session.get_message()
        self.last_status_message = ""
        logger.info("New game started (upper_bound=%d)", session.upper_bound)
        return self.display()

    # =========================================================================
    # Guessing
    # =========================================================================

    def submit_guess(self, raw_input: str | None = None) -> DisplayState:
        """
        Validate raw text and evaluate it as a guess.

        Rejected input only changes the status message; the session is
        left untouched.
        """
        try:
            value = self._parse(raw_input)
            session = self._session
            if self._state is ControllerState.WON or session.is_finished():
                raise AlreadyFinished()
        except InputError as e:
            logger.debug("Rejected guess %r: %s", raw_input, e.code)
            self.last_status_message = e.message
            return self.display()

        result = session.guess(value)
        logger.debug("Guess %d evaluated (attempt %d)", value, session.attempts)

        self.last_status_message = ""
        if result.correct:
            self._state = ControllerState.WON
            self.last_top_message = "Right!"
            logger.info("Game won after %d attempt(s)", session.attempts)
        else:
            self.last_top_message = session.get_message()
        return self.display()

    def _parse(self, raw_input: str | None) -> int:
        if self._session is None:
            raise NotStarted()

        text = (raw_input or "").strip()
        if not text:
            raise EmptyInput()
        if not _INTEGER.fullmatch(text):
            raise MalformedInput(text)

        upper_bound = self._session.upper_bound
        digits = text.lstrip("+-").lstrip("0")
        if len(digits) > len(str(upper_bound)):
            raise OutOfRangeInput(text, upper_bound)

        value = int(text)
        if not 1 <= value <= upper_bound:
            raise OutOfRangeInput(value, upper_bound)
        return value

    # =========================================================================
    # Queries
    # =========================================================================

    def reveal_secret(self) -> int:
        """
        Give up: return the secret without changing any state.

        Raises:
            NotStarted: if no game has been started yet
        """
        if self._session is None:
            raise NotStarted()
        return self._session.secret

    def display(self) -> DisplayState:
        """Snapshot of the current display without side effects."""
        session = self._session
        return DisplayState(
            top_message=self.last_top_message,
            prompt_message=self.labels.prompt,
            status_message=self.last_status_message,
            attempts_count=session.attempts if session else 0,
            finished=session.is_finished() if session else False,
            state=self._state,
            upper_bound=session.upper_bound if session else None,
            labels=self.labels,
        )
