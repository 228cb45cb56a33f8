"""
Testing the turn-based input state machine.
"""

import pytest

from wordgrid.models.board import BoardSurface, InMemoryBoard
from wordgrid.models.game import GameStatus, InputCondition, Verdict
from wordgrid.services.game_session import GameSession, OutcomeNotifier


class RecordingNotifier(OutcomeNotifier):
    def __init__(self):
        self.conditions = []
        self.outcomes = []

    def notify_condition(self, condition):
        self.conditions.append(condition)

    def notify_outcome(self, status, target_word, rounds_used):
        self.outcomes.append((status, target_word, rounds_used))


def type_word(session, word):
    for letter in word:
        assert session.handle_key(letter).accepted


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def session(notifier):
    return GameSession("WORDS", notifier=notifier)


def test_new_session_starts_empty(session):
    assert session.status is GameStatus.IN_PROGRESS
    assert (session.current_row, session.current_tile) == (0, 0)
    assert session.remaining_attempts == 6
    assert session.current_word() == ""


def test_letters_fill_active_row(session):
    type_word(session, "wor")
    assert session.current_tile == 3
    assert session.current_word() == "WOR"
    assert session.board.get_tile_letter(0, 2) == "R"
    assert session.board.get_tile_letter(0, 3) is None


def test_letter_on_full_row_is_rejected(session, notifier):
    type_word(session, "WORDS")
    result = session.on_letter("X")

    assert not result.accepted
    assert result.condition is InputCondition.ROW_FULL
    assert session.current_tile == 5
    assert session.current_word() == "WORDS"
    assert notifier.conditions == [InputCondition.ROW_FULL]


def test_delete_clears_last_letter(session):
    type_word(session, "WOR")
    result = session.handle_key("Backspace")

    assert result.accepted
    assert session.current_tile == 2
    assert session.board.get_tile_letter(0, 2) is None
    assert session.board.get_tile_verdict(0, 2) is Verdict.UNSET


def test_delete_on_empty_row_is_rejected(session):
    result = session.on_delete()

    assert not result.accepted
    assert result.condition is InputCondition.NOTHING_TO_DELETE
    assert session.current_tile == 0


def test_incomplete_submit_changes_nothing(session):
    type_word(session, "WOR")
    result = session.handle_key("Enter")

    assert not result.accepted
    assert result.condition is InputCondition.INCOMPLETE_GUESS
    assert result.condition.user_facing
    assert session.current_tile == 3
    assert session.current_row == 0
    assert all(session.board.get_tile_verdict(0, col) is Verdict.UNSET for col in range(5))


def test_wrong_guess_advances_row(session):
    type_word(session, "ERASE")
    result = session.handle_key("submit")

    assert result.accepted
    assert result.verdicts == [Verdict.ABSENT, Verdict.PRESENT, Verdict.ABSENT, Verdict.PRESENT, Verdict.ABSENT]
    assert (session.current_row, session.current_tile) == (1, 0)
    assert session.remaining_attempts == 5
    assert [session.board.get_tile_verdict(0, col) for col in range(5)] == result.verdicts


def test_submitted_row_cannot_be_edited(session):
    type_word(session, "ERASE")
    session.on_submit()

    # Deleting on the fresh row must not reach back into the submitted one
    assert session.on_delete().condition is InputCondition.NOTHING_TO_DELETE
    assert session.board.get_tile_letter(0, 4) == "E"


def test_correct_guess_wins_and_locks_session(session, notifier):
    type_word(session, "WORDS")
    result = session.on_submit()

    assert result.verdicts == [Verdict.CORRECT] * 5
    assert session.status is GameStatus.WON
    assert notifier.outcomes == [(GameStatus.WON, "WORDS", 1)]

    for action in (lambda: session.on_letter("A"), session.on_delete, session.on_submit,
                   lambda: session.handle_key("a"), lambda: session.handle_key("?")):
        rejected = action()
        assert not rejected.accepted
        assert rejected.condition is InputCondition.GAME_ALREADY_OVER

    assert (session.current_row, session.current_tile) == (0, 5)
    assert notifier.outcomes == [(GameStatus.WON, "WORDS", 1)]


def test_six_misses_lose_the_game(session, notifier):
    for _ in range(6):
        type_word(session, "PLANT")
        assert session.on_submit().accepted

    assert session.status is GameStatus.LOST
    assert session.current_row == 5
    assert session.remaining_attempts == 0
    assert notifier.outcomes == [(GameStatus.LOST, "WORDS", 6)]

    seventh = session.on_submit()
    assert seventh.condition is InputCondition.GAME_ALREADY_OVER
    assert len(session.guesses) == 6


def test_win_on_last_row(session):
    for _ in range(5):
        type_word(session, "PLANT")
        session.on_submit()
    type_word(session, "WORDS")
    session.on_submit()

    assert session.status is GameStatus.WON


def test_invalid_key_is_ignored(session, notifier):
    type_word(session, "W")
    result = session.handle_key("Shift")

    assert not result.accepted
    assert result.condition is InputCondition.INVALID_KEY
    assert session.current_tile == 1
    assert notifier.conditions == [InputCondition.INVALID_KEY]


def test_state_hides_answer_until_game_over(session):
    state = session.to_state("g1")
    assert state.answer is None
    assert state.status == "in_progress"
    assert len(state.board) == 6 and all(len(row) == 5 for row in state.board)

    type_word(session, "WORDS")
    session.on_submit()
    state = session.to_state("g1")
    assert state.answer == "WORDS"
    assert state.won and state.game_over
    assert state.board[0][0] == {'letter': 'W', 'verdict': 'correct'}


def test_invalid_target_word_is_refused():
    with pytest.raises(ValueError):
        GameSession("WORD")
    with pytest.raises(ValueError):
        GameSession("W0RDS")


def test_target_word_is_normalized():
    session = GameSession("words")
    type_word(session, "WORDS")
    session.on_submit()
    assert session.status is GameStatus.WON


class DictBoard(BoardSurface):
    """Minimal board surface that only records what it is told."""

    def __init__(self):
        self.letters = {}
        self.verdicts = {}

    def get_tile_letter(self, row, col):
        return self.letters.get((row, col))

    def set_tile_letter(self, row, col, letter):
        self.letters[(row, col)] = letter

    def clear_tile(self, row, col):
        self.letters.pop((row, col), None)

    def set_tile_verdict(self, row, col, verdict):
        self.verdicts[(row, col)] = verdict


def test_session_drives_any_board_surface():
    board = DictBoard()
    session = GameSession("SPEED", board=board)
    type_word(session, "ERASE")
    session.on_submit()

    assert board.verdicts[(0, 0)] is Verdict.PRESENT
    assert board.verdicts[(0, 1)] is Verdict.ABSENT
    assert session.to_state("g2").board == []


def test_in_memory_board_rejects_second_verdict():
    board = InMemoryBoard()
    board.set_tile_letter(0, 0, "A")
    board.set_tile_verdict(0, 0, Verdict.ABSENT)

    with pytest.raises(ValueError):
        board.set_tile_verdict(0, 0, Verdict.CORRECT)
    with pytest.raises(ValueError):
        board.clear_tile(0, 0)
    with pytest.raises(IndexError):
        board.get_tile_letter(6, 0)


def test_letter_is_uppercased_before_it_reaches_the_board(session):
    for letter in "words":
        assert session.on_letter(letter).accepted
    result = session.on_submit()

    assert result.verdicts == [Verdict.CORRECT] * 5
    assert session.status is GameStatus.WON
    assert session.guesses == ["WORDS"]


@pytest.mark.parametrize("bad", ["AB", "", "1", "é", None])
def test_on_letter_refuses_anything_but_one_letter(session, bad):
    result = session.on_letter(bad)

    assert not result.accepted
    assert result.condition is InputCondition.INVALID_KEY
    assert session.current_tile == 0
    assert session.board.get_tile_letter(0, 0) is None


def test_multi_character_letter_cannot_break_submit(session):
    session.on_letter("AB")
    for letter in "CDEF":
        session.on_letter(letter)
    session.on_letter("G")
    result = session.on_submit()

    assert result.accepted
    assert session.guesses == ["CDEFG"]


class RecordingGameLogger:
    def __init__(self):
        self.events = []

    def log_game_event(self, game_id, event, user_ip='system', **kwargs):
        self.events.append((game_id, event, kwargs))


def test_logging_notifier_writes_game_events(monkeypatch):
    from wordgrid.services import game_session
    from wordgrid.services.game_session import LoggingNotifier

    recorder = RecordingGameLogger()
    monkeypatch.setattr(game_session, 'game_logger', recorder)

    session = GameSession("WORDS", notifier=LoggingNotifier("g3"))
    session.on_delete()
    type_word(session, "WORDS")
    session.on_submit()

    assert recorder.events == [
        ("g3", "input_rejected", {'condition': 'nothing_to_delete',
                                  'message': InputCondition.NOTHING_TO_DELETE.message}),
        ("g3", "game_won", {'rounds_used': 1, 'target_word': 'WORDS'}),
    ]
