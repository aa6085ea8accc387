"""
Pytest fixtures for numguess tests.
"""

import pytest

from ..game.session import GameSession
from ..session.controller import SessionController


def fixed_secret(secret: int):
    """Session factory that always hides the same secret."""
    def factory(upper_bound: int) -> GameSession:
        return GameSession(upper_bound, secret=secret)
    return factory


@pytest.fixture
def session() -> GameSession:
    """A 1..10 session whose secret is 7."""
    return GameSession(10, secret=7)


@pytest.fixture
def controller() -> SessionController:
    """Controller whose sessions always hide 7."""
    return SessionController(session_factory=fixed_secret(7))


@pytest.fixture
def started(controller: SessionController) -> SessionController:
    """Controller with a 1..10 game in progress."""
    controller.initialize(10)
    return controller
