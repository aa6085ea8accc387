"""
Tests for API service layer.

Tests:
- Game lifecycle via the service
- Rejected input reported in the display, not as errors
- Unknown games
"""

import pytest

from ..api.schemas import (
    CreateGameRequest,
    GuessRequest,
    NewGameRequest,
    ErrorResponse,
    ErrorCode,
    GameStatus,
)
from ..api.service import APIService
from ..config import GameConfig
from ..game.session import InvalidConfiguration
from ..session.manager import GameManager
from .conftest import fixed_secret


@pytest.fixture
def service():
    """Service whose games always hide 7."""
    return APIService(manager=GameManager(session_factory=fixed_secret(7)))


@pytest.fixture
def game_id(service):
    return service.create_game(CreateGameRequest(upper_bound=10)).game_id


class TestAPIService:
    """Tests for APIService."""

    def test_create_game(self, service):
        response = service.create_game(CreateGameRequest(upper_bound=10))

        assert response.game_id
        assert response.status == GameStatus.IN_PROGRESS
        assert response.upper_bound == 10
        assert response.display.top_message == "I'm thinking of a number between 1 and 10."
        assert response.display.prompt_message == "Your guess?"
        assert response.labels.submit == "Submit"

    def test_create_game_uses_default_bound(self):
        service = APIService(config=GameConfig(upper_bound=30))
        response = service.create_game(CreateGameRequest())
        assert response.upper_bound == 30

    def test_create_game_invalid_bound(self, service):
        with pytest.raises(InvalidConfiguration):
            service.create_game(CreateGameRequest(upper_bound=0))

    def test_guess_flow(self, service, game_id):
        response = service.submit_guess(game_id, GuessRequest(guess="3"))
        assert response.display.top_message == "Too low"
        assert response.display.attempts_count == 1

        response = service.submit_guess(game_id, GuessRequest(guess="7"))
        assert response.display.top_message == "Right!"
        assert response.display.finished
        assert response.status == GameStatus.WON

    @pytest.mark.parametrize("raw,message", [
        ("", "Please input a guess."),
        ("abc", "Please input a whole number."),
        ("42", "Please input a number between 1 and 10."),
    ])
    def test_rejected_guess(self, service, game_id, raw, message):
        response = service.submit_guess(game_id, GuessRequest(guess=raw))
        assert response.display.status_message == message
        assert response.display.attempts_count == 0

    def test_guess_after_win(self, service, game_id):
        service.submit_guess(game_id, GuessRequest(guess="7"))
        response = service.submit_guess(game_id, GuessRequest(guess="7"))
        assert response.display.status_message == "Game already won — start a new game."
        assert response.status == GameStatus.WON
        assert response.display.attempts_count == 1

    def test_new_game(self, service, game_id):
        service.submit_guess(game_id, GuessRequest(guess="7"))
        response = service.new_game(game_id)
        assert response.status == GameStatus.IN_PROGRESS
        assert response.display.attempts_count == 0
        assert not response.display.finished

    def test_new_game_with_bound(self, service, game_id):
        response = service.new_game(game_id, NewGameRequest(upper_bound=20))
        assert response.upper_bound == 20
        assert service.get_game(game_id).upper_bound == 20

    def test_new_game_invalid_bound_keeps_game(self, service, game_id):
        with pytest.raises(InvalidConfiguration):
            service.new_game(game_id, NewGameRequest(upper_bound=-1))
        assert service.get_game(game_id).upper_bound == 10

    def test_reveal_secret(self, service, game_id):
        service.submit_guess(game_id, GuessRequest(guess="2"))
        response = service.reveal_secret(game_id)
        assert response.secret == 7
        assert response.attempts_count == 1
        assert service.get_game(game_id).status == GameStatus.IN_PROGRESS

    def test_unknown_game(self, service):
        for response in (
            service.get_game("nope"),
            service.submit_guess("nope", GuessRequest(guess="1")),
            service.new_game("nope"),
            service.reveal_secret("nope"),
        ):
            assert isinstance(response, ErrorResponse)
            assert response.error_code == ErrorCode.GAME_NOT_FOUND

    def test_end_game(self, service, game_id):
        assert service.end_game(game_id)
        assert isinstance(service.get_game(game_id), ErrorResponse)
        assert game_id not in service.list_games()

    def test_create_game_evicts_idle_games(self, service, game_id):
        service.manager.get_game(game_id).last_active = 0.0
        fresh = service.create_game(CreateGameRequest(upper_bound=10))
        assert service.list_games() == [fresh.game_id]

    def test_cleanup_removes_idle_games(self, service, game_id):
        service.manager.get_game(game_id).last_active = 0.0
        assert service.cleanup() == [game_id]
        assert service.list_games() == []
