"""
API Service - Business logic layer between HTTP and the controllers.

The service:
1. Creates and tracks games in a GameManager
2. Forwards raw guesses to the owning SessionController
3. Converts DisplayState snapshots into response schemas

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..config import GameConfig
from ..session import GameManager, ManagedGame, DisplayState
from .schemas import (
    # Requests
    CreateGameRequest,
    GuessRequest,
    NewGameRequest,
    # Responses
    GameResponse,
    SecretResponse,
    ErrorResponse,
    # Shared
    DisplayInfo,
    LabelsInfo,
    # Enums
    GameStatus,
    ErrorCode,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        game = service.create_game(CreateGameRequest(upper_bound=10))
        response = service.submit_guess(game.game_id, GuessRequest(guess="5"))
    """
    config: GameConfig = field(default_factory=GameConfig)
    manager: GameManager | None = None

    def __post_init__(self):
        if self.manager is None:
            self.manager = GameManager(labels=self.config.labels)

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """
        Start a new game.

        Raises:
            InvalidConfiguration: if the requested bound is not positive
        """
        upper_bound = request.upper_bound
        if upper_bound is None:
            upper_bound = self.config.upper_bound
        self.cleanup()
        game = self.manager.create_game(upper_bound)
        return self._to_response(game, game.controller.display())

    def get_game(self, game_id: str) -> GameResponse | ErrorResponse:
        game = self.manager.get_game(game_id)
        if not game:
            return self._not_found(game_id)
        return self._to_response(game, game.controller.display())

    def submit_guess(
        self, game_id: str, request: GuessRequest
    ) -> GameResponse | ErrorResponse:
        """Forward raw text to the controller; input problems land in the display."""
        game = self.manager.get_game(game_id)
        if not game:
            return self._not_found(game_id)
        game.touch()
        display = game.controller.submit_guess(request.guess)
        return self._to_response(game, display)

    def new_game(
        self, game_id: str, request: NewGameRequest | None = None
    ) -> GameResponse | ErrorResponse:
        """
        Replace the round inside an existing game.

        Raises:
            InvalidConfiguration: if the requested bound is not positive
        """
        game = self.manager.get_game(game_id)
        if not game:
            return self._not_found(game_id)

        upper_bound = request.upper_bound if request else None
        if upper_bound is None:
            upper_bound = game.upper_bound
        display = game.controller.request_new_game(upper_bound)
        game.upper_bound = upper_bound
        game.touch()
        return self._to_response(game, display)

    def reveal_secret(self, game_id: str) -> SecretResponse | ErrorResponse:
        game = self.manager.get_game(game_id)
        if not game:
            return self._not_found(game_id)
        controller = game.controller
        return SecretResponse(
            game_id=game_id,
            secret=controller.reveal_secret(),
            attempts_count=controller.display().attempts_count,
        )

    def end_game(self, game_id: str) -> bool:
        return self.manager.end_game(game_id)

    def list_games(self) -> list[str]:
        return self.manager.list_games()

    def cleanup(self) -> list[str]:
        """Drop idle games according to the configured age limit."""
        removed = self.manager.cleanup_stale(self.config.stale_after_seconds)
        if removed:
            logger.info("Removed %d stale game(s)", len(removed))
        return removed

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _to_response(self, game: ManagedGame, display: DisplayState) -> GameResponse:
        return GameResponse(
            game_id=game.game_id,
            status=GameStatus(display.state.value),
            upper_bound=game.upper_bound,
            display=DisplayInfo.model_validate(display),
            labels=LabelsInfo.model_validate(display.labels),
            created_at=game.created_at,
        )

    def _not_found(self, game_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Game {game_id} not found",
            error_code=ErrorCode.GAME_NOT_FOUND,
        )
