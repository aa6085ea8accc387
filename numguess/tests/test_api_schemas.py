"""
Tests for API Pydantic schemas.
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    DisplayInfo,
    ErrorCode,
    ErrorResponse,
    GameResponse,
    GameStatus,
    GuessRequest,
    LabelsInfo,
)
from ..session.display import ControllerState, DisplayState, Labels


class TestPydanticSchemas:
    """Tests for schema validation and serialization."""

    def test_display_from_dataclass(self):
        display = DisplayState(
            top_message="Too low",
            prompt_message="Your guess?",
            status_message="",
            attempts_count=2,
            finished=False,
            state=ControllerState.IN_PROGRESS,
            upper_bound=10,
        )
        info = DisplayInfo.model_validate(display)
        assert info.model_dump() == {
            "top_message": "Too low",
            "prompt_message": "Your guess?",
            "status_message": "",
            "attempts_count": 2,
            "finished": False,
        }

    def test_game_response_serializes_status(self):
        response = GameResponse(
            game_id="game-1",
            status=GameStatus.WON,
            upper_bound=10,
            display=DisplayInfo(top_message="Right!", prompt_message="Your guess?", finished=True),
            labels=LabelsInfo.model_validate(Labels()),
        )
        data = response.model_dump(mode="json")
        assert data["status"] == "won"
        assert data["labels"]["new_game"] == "New Game"
        assert data["api_version"] == "v1"

    def test_status_values_match_controller(self):
        for state in ControllerState:
            assert GameStatus(state.value).value == state.value

    def test_guess_defaults_to_empty(self):
        assert GuessRequest().guess == ""

    def test_guess_must_be_text(self):
        with pytest.raises(ValidationError):
            GuessRequest(guess=["1"])


class TestErrorCodes:

    def test_error_response(self):
        error = ErrorResponse(error="Game x not found", error_code=ErrorCode.GAME_NOT_FOUND)
        data = error.model_dump(mode="json")
        assert data["error_code"] == "GAME_NOT_FOUND"
        assert data["details"] is None
