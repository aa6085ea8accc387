"""
API Module - Web interface.

Exposes the game via a REST API. A web client:
1. Starts a game and receives the initial display state
2. Posts raw guesses and renders the returned display state
3. Starts new rounds or gives up

All state is in memory. No user accounts.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    GuessRequest,
    NewGameRequest,
    # Responses
    GameResponse,
    SecretResponse,
    GameListResponse,
    EndGameResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    DisplayInfo,
    LabelsInfo,
    # Enums
    GameStatus,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "GuessRequest",
    "NewGameRequest",
    # Responses
    "GameResponse",
    "SecretResponse",
    "GameListResponse",
    "EndGameResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "DisplayInfo",
    "LabelsInfo",
    # Enums
    "GameStatus",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
