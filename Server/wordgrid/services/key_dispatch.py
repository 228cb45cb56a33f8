"""
Key Classification

Maps raw key input onto the closed KeyCategory set used by the game session.
"""

from typing import Optional, Tuple

from ..config.game_settings import ALPHABET
from ..models.game import KeyCategory

# Browser key names and the named signals accepted from other input sources
DELETE_KEYS = frozenset({'BACKSPACE', 'DELETE'})
SUBMIT_KEYS = frozenset({'ENTER', 'SUBMIT'})


def classify_key(raw_key) -> Tuple[KeyCategory, Optional[str]]:
    """
    Classifies a raw key.

    Returns:
        Tuple of (category, letter); letter is the uppercase character for
        LETTER keys and None otherwise
    """
    if not isinstance(raw_key, str) or not raw_key:
        return KeyCategory.INVALID, None

    key = raw_key.upper()

    if key in DELETE_KEYS:
        return KeyCategory.DELETE, None
    if key in SUBMIT_KEYS:
        return KeyCategory.SUBMIT, None
    if len(key) == 1 and key in ALPHABET:
        return KeyCategory.LETTER, key

    return KeyCategory.INVALID, None
