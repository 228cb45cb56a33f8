"""
Game Service

Keeps the active game sessions of the server and routes key events to them.
"""

import uuid
from typing import Dict, Optional

from ..config.app_config import Config
from ..config.game_settings import validate_target_word
from ..models.game import ActionResult, GameState
from .game_session import GameSession, LoggingNotifier


class GameService:
    """
    Registry of game sessions keyed by game ID.

    This class handles:
    - Session creation with unique game IDs
    - Keeping the configured target word on the server side
    - Routing key events to the right session
    - Game state snapshots that hide the answer until the game is over
    """

    def __init__(self, target_word: Optional[str] = None):
        self.target_word = validate_target_word(target_word or Config.TARGET_WORD)
        self.games: Dict[str, GameSession] = {}  # Active sessions by game_id

    def create_new_game(self) -> str:
        """
        Creates a new game session. Sessions never share state.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameSession(self.target_word, notifier=LoggingNotifier(game_id))
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.to_state(game_id)

    def press_key(self, game_id: str, key) -> Optional[ActionResult]:
        """
        Feeds one key event to a session.

        Args:
            game_id: Unique game identifier
            key: Raw key name or named signal ("submit", "delete")

        Returns:
            ActionResult, or None if the game does not exist
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.handle_key(key)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(target_word: Optional[str] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(target_word)
    return _game_service
