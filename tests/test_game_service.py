import pytest

from wordgrid.models.game import GameStatus, InputCondition
from wordgrid.services.game_service import GameService, get_game_service, initialize_game_service


def test_games_are_independent():
    service = GameService("WORDS")
    first = service.create_new_game()
    second = service.create_new_game()

    service.press_key(first, "W")
    assert service.get_game_state(first).current_tile == 1
    assert service.get_game_state(second).current_tile == 0


def test_press_key_runs_a_full_game():
    service = GameService("WORDS")
    game_id = service.create_new_game()
    for key in "WORDS":
        service.press_key(game_id, key)
    result = service.press_key(game_id, "Enter")

    assert result.status is GameStatus.WON
    assert service.press_key(game_id, "A").condition is InputCondition.GAME_ALREADY_OVER


def test_unknown_game_returns_none():
    service = GameService("WORDS")
    assert service.get_game_state("missing") is None
    assert service.press_key("missing", "A") is None
    assert service.delete_game("missing") is False


def test_delete_game():
    service = GameService("WORDS")
    game_id = service.create_new_game()
    assert service.delete_game(game_id) is True
    assert service.get_session(game_id) is None


def test_invalid_configured_target_is_refused():
    with pytest.raises(ValueError):
        GameService("TOOLONG")


def test_global_service_accessor():
    service = initialize_game_service("SPEED")
    assert get_game_service() is service
    assert service.target_word == "SPEED"
