"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate
from .key_dispatch import classify_key
from .game_session import GameSession, LoggingNotifier, OutcomeNotifier
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate', 'classify_key',
    'GameSession', 'LoggingNotifier', 'OutcomeNotifier',
    'GameService', 'get_game_service', 'initialize_game_service'
]
