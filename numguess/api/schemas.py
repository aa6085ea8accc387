"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Error Codes:
- GAME_NOT_FOUND: Game does not exist or has expired
- INVALID_CONFIGURATION: upper_bound is not a positive integer
- GAME_NOT_STARTED: No game has been started on this controller
- VALIDATION_ERROR: Request body could not be parsed
- INTERNAL_ERROR: Unexpected failure

Rejected guesses are NOT errors at this level: they come back as a normal
GameResponse with display.status_message explaining the problem.
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Controller lifecycle states."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    GAME_NOT_STARTED = "GAME_NOT_STARTED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class DisplayInfo(BaseModel):
    """Everything a client renders after an operation."""
    top_message: str
    prompt_message: str
    status_message: str = ""
    attempts_count: int = 0
    finished: bool = False

    model_config = {"from_attributes": True}


class LabelsInfo(BaseModel):
    """Static label text for the input form."""
    title: str
    prompt: str
    submit: str
    new_game: str

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(BaseModel):
    """Request to start a game."""
    upper_bound: Optional[int] = Field(
        None, description="Highest possible secret; server default when omitted"
    )


class GuessRequest(BaseModel):
    """A raw guess exactly as the user typed it."""
    guess: str = Field("", description="Raw text; validated by the server")


class NewGameRequest(BaseModel):
    """Request to abandon the current round and start another."""
    upper_bound: Optional[int] = Field(
        None, description="Bound for the new round; keeps the current one when omitted"
    )


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameResponse(BaseModel):
    """State of one game after an operation."""
    game_id: str
    status: GameStatus
    upper_bound: int
    display: DisplayInfo
    labels: LabelsInfo
    created_at: float = 0.0
    api_version: str = "v1"


class SecretResponse(BaseModel):
    """The secret, revealed when the player gives up."""
    game_id: str
    secret: int
    attempts_count: int = 0


class GameListResponse(BaseModel):
    """Response listing active games."""
    games: list[str]
    count: int


class EndGameResponse(BaseModel):
    """Response after ending a game."""
    success: bool
    game_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
