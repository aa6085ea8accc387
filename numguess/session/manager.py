"""
Game Manager - Holds many independent games for multi-client front-ends.

Each managed game wraps its own SessionController. Games are EPHEMERAL:
- In-memory only, nothing is persisted
- Removed when ended or when idle for too long
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import time
import uuid

from .controller import SessionController, SessionFactory
from .display import Labels
from ..game.session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class ManagedGame:
    """A controller plus the bookkeeping needed to expire it."""
    game_id: str
    controller: SessionController
    upper_bound: int
    created_at: float
    last_active: float = field(default=0.0)

    def touch(self):
        self.last_active = time.time()


class GameManager:
    """
    Creates, tracks and expires games.

    The factory and labels are shared by every controller it builds.
    """

    def __init__(
        self,
        session_factory: SessionFactory = GameSession.create,
        labels: Labels | None = None,
    ):
        self._session_factory = session_factory
        self._labels = labels or Labels()
        self._games: dict[str, ManagedGame] = {}

    def create_game(self, upper_bound: int) -> ManagedGame:
        """
        Create and initialize a new game.

        Raises:
            InvalidConfiguration: if upper_bound is not a positive integer
        """
        controller = SessionController(
            session_factory=self._session_factory,
            labels=self._labels,
        )
        controller.initialize(upper_bound)

        now = time.time()
        game = ManagedGame(
            game_id=str(uuid.uuid4()),
            controller=controller,
            upper_bound=upper_bound,
            created_at=now,
            last_active=now,
        )
        self._games[game.game_id] = game
        logger.info("Created game %s", game.game_id)
        return game

    def get_game(self, game_id: str) -> ManagedGame | None:
        return self._games.get(game_id)

    def end_game(self, game_id: str) -> bool:
        """Forget a game. Returns False if it was not known."""
        game = self._games.pop(game_id, None)
        if game:
            logger.info("Ended game %s", game_id)
        return game is not None

    def list_games(self) -> list[str]:
        return list(self._games)

    def cleanup_stale(self, max_age_seconds: float = 3600) -> list[str]:
        """
        Drop games idle for longer than max_age_seconds.

        Returns the IDs that were removed.
        """
        now = time.time()
        stale = [
            game_id for game_id, game in self._games.items()
            if now - game.last_active > max_age_seconds
        ]
        for game_id in stale:
            self.end_game(game_id)
        return stale
