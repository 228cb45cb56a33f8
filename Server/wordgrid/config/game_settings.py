"""
Game Configuration Constants Module

Board dimensions and target word validation. The board shape is fixed;
only the target word is supplied from the outside, once per session.
"""

import string
from typing import Final

# Core Game Configuration Constants
MAX_ROWS: Final[int] = 6
"""
Number of guess attempts (rows on the board).
Type: Final[int] - Immutable to prevent accidental modification
"""

ROW_LENGTH: Final[int] = 5
"""
Number of tiles per row, which is also the length of every guess and target.
"""

ALPHABET: Final[str] = string.ascii_uppercase


def validate_target_word(word: str, row_length: int = ROW_LENGTH) -> str:
    """
    Validates a target word and returns its normalized form.

    Args:
        word: Candidate target word, any case
        row_length: Required number of letters

    Returns:
        str: The word in uppercase

    Raises:
        ValueError: If the word is not a string of exactly row_length ASCII letters
    """
    if not isinstance(word, str):
        raise ValueError(f"Target word must be a string, got {type(word).__name__}")

    normalized = word.strip().upper()

    if len(normalized) != row_length:
        raise ValueError(f"Target word '{word}' is not {row_length} characters long")

    if any(char not in ALPHABET for char in normalized):
        raise ValueError(f"Target word '{word}' contains non-alphabetic characters")

    return normalized


if __name__ == "__main__":
    from wordgrid.config.app_config import Config

    try:
        print(f" Target word '{validate_target_word(Config.TARGET_WORD)}' is valid")
        print(f" Board: {MAX_ROWS} rows x {ROW_LENGTH} tiles")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
