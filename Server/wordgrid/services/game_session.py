"""
Game Session

Owns the turn cursor, the game status and the board for one game, and
turns discrete key events into board updates.
"""

import logging
from typing import List, Optional

from ..config.game_settings import ALPHABET, MAX_ROWS, ROW_LENGTH, validate_target_word
from ..models.board import BoardSurface, InMemoryBoard
from ..models.game import ActionResult, GameState, GameStatus, InputCondition, KeyCategory, Verdict
from ..utils.game_logger import game_logger
from .evaluator import evaluate
from .key_dispatch import classify_key

logger = logging.getLogger('wordgrid.session')


class OutcomeNotifier:
    """Receives rejected-input conditions and the final outcome of a session."""

    def notify_condition(self, condition: InputCondition) -> None:
        pass

    def notify_outcome(self, status: GameStatus, target_word: str, rounds_used: int) -> None:
        pass


class LoggingNotifier(OutcomeNotifier):
    """Writes session notifications to the game log."""

    def __init__(self, game_id: Optional[str] = None):
        self.game_id = game_id

    def notify_condition(self, condition: InputCondition) -> None:
        game_logger.log_game_event(
            self.game_id, 'input_rejected',
            condition=condition.code, message=condition.message
        )

    def notify_outcome(self, status: GameStatus, target_word: str, rounds_used: int) -> None:
        event = 'game_won' if status is GameStatus.WON else 'game_lost'
        game_logger.log_game_event(
            self.game_id, event,
            rounds_used=rounds_used, target_word=target_word
        )


class GameSession:
    """
    A single game: one target word, one board, one turn cursor.

    Every operation checks its preconditions before touching the board, so a
    rejected event leaves the session exactly as it was. The status moves
    out of IN_PROGRESS at most once, inside on_submit.
    """

    def __init__(self,
                 target_word: str,
                 board: Optional[BoardSurface] = None,
                 notifier: Optional[OutcomeNotifier] = None,
                 max_rows: int = MAX_ROWS,
                 row_length: int = ROW_LENGTH):
        self.target_word = validate_target_word(target_word, row_length)
        self.max_rows = max_rows
        self.row_length = row_length
        self.board = board if board is not None else InMemoryBoard(max_rows, row_length)
        self.notifier = notifier if notifier is not None else OutcomeNotifier()

        self.current_row = 0
        self.current_tile = 0
        self.status = GameStatus.IN_PROGRESS
        self.guesses: List[str] = []

    @property
    def remaining_attempts(self) -> int:
        if self.status.is_terminal:
            return 0
        return self.max_rows - self.current_row

    def current_word(self) -> str:
        """Letters typed so far in the active row."""
        letters = (self.board.get_tile_letter(self.current_row, col) for col in range(self.current_tile))
        return ''.join(letter or '' for letter in letters)

    def _reject(self, condition: InputCondition) -> ActionResult:
        if condition.user_facing:
            logger.warning("Input rejected: %s", condition.message)
        else:
            logger.info("Input rejected: %s", condition.message)
        self.notifier.notify_condition(condition)
        return ActionResult(accepted=False, status=self.status, condition=condition)

    def on_letter(self, letter: str) -> ActionResult:
        """Write a letter into the next free tile of the active row."""
        if self.status.is_terminal:
            return self._reject(InputCondition.GAME_ALREADY_OVER)
        letter = letter.upper() if isinstance(letter, str) else ''
        if len(letter) != 1 or letter not in ALPHABET:
            return self._reject(InputCondition.INVALID_KEY)
        if self.current_tile >= self.row_length:
            return self._reject(InputCondition.ROW_FULL)

        self.board.set_tile_letter(self.current_row, self.current_tile, letter)
        self.current_tile += 1

        logger.debug("Added %r to position %d in row %d", letter, self.current_tile - 1, self.current_row)
        logger.debug("Current word progress: %r", self.current_word())
        return ActionResult(accepted=True, status=self.status)

    def on_delete(self) -> ActionResult:
        """Clear the most recently filled tile of the active row."""
        if self.status.is_terminal:
            return self._reject(InputCondition.GAME_ALREADY_OVER)
        if self.current_tile <= 0:
            return self._reject(InputCondition.NOTHING_TO_DELETE)

        self.current_tile -= 1
        deleted = self.board.get_tile_letter(self.current_row, self.current_tile)
        self.board.clear_tile(self.current_row, self.current_tile)

        logger.debug("Deleted %r from position %d in row %d", deleted, self.current_tile, self.current_row)
        return ActionResult(accepted=True, status=self.status)

    def on_submit(self) -> ActionResult:
        """Evaluate the active row and advance or end the game."""
        if self.status.is_terminal:
            return self._reject(InputCondition.GAME_ALREADY_OVER)
        if self.current_tile != self.row_length:
            return self._reject(InputCondition.INCOMPLETE_GUESS)

        guess = self.current_word()
        logger.info("Submitting guess %r in row %d", guess, self.current_row)

        verdicts = evaluate(guess, self.target_word)
        for col, verdict in enumerate(verdicts):
            self.board.set_tile_verdict(self.current_row, col, verdict)
        self.guesses.append(guess)

        if guess == self.target_word:
            self._finish(GameStatus.WON)
        elif self.current_row >= self.max_rows - 1:
            self._finish(GameStatus.LOST)
        else:
            self.current_row += 1
            self.current_tile = 0
            logger.debug("Moving to row %d. %d guesses remaining.", self.current_row, self.remaining_attempts)

        return ActionResult(accepted=True, status=self.status, verdicts=verdicts)

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        logger.info("Game %s after %d guesses", status.value, len(self.guesses))
        self.notifier.notify_outcome(status, self.target_word, len(self.guesses))

    def handle_key(self, raw_key) -> ActionResult:
        """Route one raw key event to the matching operation."""
        logger.debug("Key pressed: %r", raw_key)

        if self.status.is_terminal:
            return self._reject(InputCondition.GAME_ALREADY_OVER)

        category, letter = classify_key(raw_key)
        if category is KeyCategory.LETTER:
            return self.on_letter(letter)
        elif category is KeyCategory.DELETE:
            return self.on_delete()
        elif category is KeyCategory.SUBMIT:
            return self.on_submit()
        elif category is KeyCategory.INVALID:
            return self._reject(InputCondition.INVALID_KEY)
        raise ValueError(f"Unhandled key category: {category}")

    def to_state(self, game_id: str) -> GameState:
        """Snapshot of the session; the answer is only revealed once the game is over."""
        snapshot = self.board.snapshot() if hasattr(self.board, 'snapshot') else []
        return GameState(
            game_id=game_id,
            current_row=self.current_row,
            current_tile=self.current_tile,
            max_rows=self.max_rows,
            row_length=self.row_length,
            status=self.status.value,
            game_over=self.status.is_terminal,
            won=self.status is GameStatus.WON,
            board=snapshot,
            guesses=self.guesses.copy(),
            current_word=self.current_word(),
            remaining_attempts=self.remaining_attempts,
            answer=self.target_word if self.status.is_terminal else None
        )
