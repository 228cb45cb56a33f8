"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Verdict(Enum):
    """Per-tile outcome of evaluating a submitted guess."""
    UNSET = "unset"
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GameStatus(Enum):
    """Session status. WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class InputCondition(Enum):
    """Soft failures reported when an input event is rejected."""
    ROW_FULL = ("row_full", "Row is full! Cannot add more letters.", False)
    NOTHING_TO_DELETE = ("nothing_to_delete", "No letters to delete in current row", False)
    INCOMPLETE_GUESS = ("incomplete_guess", "Please enter exactly 5 letters!", True)
    GAME_ALREADY_OVER = ("game_already_over", "Game is over!", False)
    INVALID_KEY = ("invalid_key", "Ignored key (not a valid letter, Enter, or Backspace)", False)

    def __init__(self, code: str, message: str, user_facing: bool):
        self.code = code
        self.message = message
        self.user_facing = user_facing


class KeyCategory(Enum):
    """Closed set of key kinds the input dispatcher understands."""
    LETTER = "letter"
    DELETE = "delete"
    SUBMIT = "submit"
    INVALID = "invalid"


@dataclass
class Tile:
    """A single board cell."""
    letter: Optional[str] = None
    verdict: Verdict = Verdict.UNSET

    @property
    def filled(self) -> bool:
        return self.letter is not None


@dataclass
class ActionResult:
    """Outcome of processing one input event."""
    accepted: bool
    status: GameStatus
    condition: Optional[InputCondition] = None
    verdicts: Optional[List[Verdict]] = None

    @property
    def message(self) -> Optional[str]:
        return self.condition.message if self.condition else None

    def to_dict(self) -> Dict:
        return {
            'accepted': self.accepted,
            'status': self.status.value,
            'condition': self.condition.code if self.condition else None,
            'message': self.message,
            'user_facing': self.condition.user_facing if self.condition else False,
            'verdicts': [v.value for v in self.verdicts] if self.verdicts else None
        }


@dataclass
class GameState:
    """Serializable snapshot of one game session."""
    game_id: str
    current_row: int
    current_tile: int
    max_rows: int
    row_length: int
    status: str
    game_over: bool
    won: bool
    board: List[List[Dict[str, Optional[str]]]]  # rows of {letter, verdict}
    guesses: List[str] = field(default_factory=list)
    current_word: str = ""
    remaining_attempts: int = 0
    answer: Optional[str] = None  # Only included when game is over
