"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import ActionResult, GameState, GameStatus, InputCondition, KeyCategory, Tile, Verdict
from .board import BoardSurface, InMemoryBoard

__all__ = [
    'ActionResult', 'GameState', 'GameStatus', 'InputCondition', 'KeyCategory', 'Tile', 'Verdict',
    'BoardSurface', 'InMemoryBoard'
]
