"""
FastAPI Application - Web front-end for the guessing game.

Endpoints:
    GET    /api/v1/health                 Health check
    POST   /api/v1/games                  Start a game
    GET    /api/v1/games                  List active games
    GET    /api/v1/games/{id}             Current display state
    POST   /api/v1/games/{id}/guesses     Submit a raw guess
    POST   /api/v1/games/{id}/new         Start a new round
    GET    /api/v1/games/{id}/secret      Give up and reveal the secret
    DELETE /api/v1/games/{id}             End a game

Handlers run on the event loop and call the service without awaiting,
so two operations on the same game never interleave.

Run with: uvicorn numguess.api.app:create_app --factory
"""

from typing import Optional, Union
import logging

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import GameConfig
from ..game.session import InvalidConfiguration
from ..session.errors import NotStarted
from .service import APIService
from .schemas import (
    # Request models
    CreateGameRequest,
    GuessRequest,
    NewGameRequest,
    # Response models
    GameResponse,
    SecretResponse,
    GameListResponse,
    EndGameResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

logger = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None, config: Optional[GameConfig] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        config: Optional GameConfig (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    if service is None:
        service = APIService(config=config or GameConfig.from_env())
    config = service.config

    app = FastAPI(
        title="Guess the Number API",
        description="""
Guess a secret number between 1 and an upper bound.

Rejected guesses (blank, not a number, out of range, game already won) are
returned as normal responses with `display.status_message` explaining why.

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_FOUND` | Game does not exist or has expired |
| `INVALID_CONFIGURATION` | upper_bound is not a positive integer |
| `GAME_NOT_STARTED` | No round has been started yet |
| `VALIDATION_ERROR` | Request body could not be parsed |
| `INTERNAL_ERROR` | Unexpected failure |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.service = service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def not_found(response: ErrorResponse) -> JSONResponse:
        return make_error_response(response.error_code, response.error, status_code=404)

    @app.exception_handler(InvalidConfiguration)
    async def invalid_configuration_handler(request, exc: InvalidConfiguration):
        logger.warning("Rejected configuration: %s", exc)
        return make_error_response(ErrorCode.INVALID_CONFIGURATION, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc: RequestValidationError):
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request could not be parsed",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(NotStarted)
    async def not_started_handler(request, exc: NotStarted):
        return make_error_response(ErrorCode.GAME_NOT_STARTED, exc.message, status_code=409)

    @app.exception_handler(Exception)
    async def internal_error_handler(request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return make_error_response(
            ErrorCode.INTERNAL_ERROR, "Internal server error", status_code=500
        )

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid upper_bound"}},
        tags=["Games"],
        summary="Start a new game",
    )
    async def create_game(body: Optional[CreateGameRequest] = None) -> GameResponse:
        """Start a game. Omit `upper_bound` to use the server default."""
        return service.create_game(body or CreateGameRequest())

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List active games",
    )
    async def list_games() -> GameListResponse:
        service.cleanup()
        games = service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get the current display state",
    )
    async def get_game(game_id: str) -> Union[GameResponse, JSONResponse]:
        response = service.get_game(game_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.post(
        "/api/v1/games/{game_id}/guesses",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Submit a guess",
    )
    async def submit_guess(game_id: str, body: GuessRequest) -> Union[GameResponse, JSONResponse]:
        """
        Submit the guess exactly as typed.

        Validation problems come back in `display.status_message`
        and leave the game untouched.
        """
        response = service.submit_guess(game_id, body)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.post(
        "/api/v1/games/{game_id}/new",
        response_model=GameResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid upper_bound"},
            404: {"model": ErrorResponse},
        },
        tags=["Games"],
        summary="Start a new round",
    )
    async def new_game(
        game_id: str, body: Optional[NewGameRequest] = None
    ) -> Union[GameResponse, JSONResponse]:
        response = service.new_game(game_id, body)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.get(
        "/api/v1/games/{game_id}/secret",
        response_model=SecretResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Give up and reveal the secret",
    )
    async def reveal_secret(game_id: str) -> Union[SecretResponse, JSONResponse]:
        response = service.reveal_secret(game_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.delete(
        "/api/v1/games/{game_id}",
        response_model=EndGameResponse,
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str) -> EndGameResponse:
        success = service.end_game(game_id)
        return EndGameResponse(success=success, game_id=game_id)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="numguess",
            version=__version__,
        )

    return app
