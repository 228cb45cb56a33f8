"""
Board Surface

The board is the only surface the game session writes to. Presentation
layers can supply their own implementation; InMemoryBoard is the default
used by the server.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .game import Tile, Verdict
from ..config.game_settings import MAX_ROWS, ROW_LENGTH


class BoardSurface(ABC):
    """Tile operations the game session relies on."""

    @abstractmethod
    def get_tile_letter(self, row: int, col: int) -> Optional[str]:
        """Return the letter at (row, col), or None when the tile is empty."""

    @abstractmethod
    def set_tile_letter(self, row: int, col: int, letter: str) -> None:
        """Write a letter into the tile and mark it filled."""

    @abstractmethod
    def clear_tile(self, row: int, col: int) -> None:
        """Remove the letter from the tile."""

    @abstractmethod
    def set_tile_verdict(self, row: int, col: int, verdict: Verdict) -> None:
        """Record the evaluation verdict for a submitted tile."""


class InMemoryBoard(BoardSurface):
    """A rows x cols grid of Tile objects."""

    def __init__(self, rows: int = MAX_ROWS, cols: int = ROW_LENGTH):
        self.rows = rows
        self.cols = cols
        self.tiles: List[List[Tile]] = [[Tile() for _ in range(cols)] for _ in range(rows)]

    def _tile(self, row: int, col: int) -> Tile:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Tile ({row}, {col}) is outside the {self.rows}x{self.cols} board")
        return self.tiles[row][col]

    def get_tile_letter(self, row: int, col: int) -> Optional[str]:
        return self._tile(row, col).letter

    def set_tile_letter(self, row: int, col: int, letter: str) -> None:
        tile = self._tile(row, col)
        if tile.verdict is not Verdict.UNSET:
            raise ValueError(f"Tile ({row}, {col}) has already been submitted")
        tile.letter = letter

    def clear_tile(self, row: int, col: int) -> None:
        tile = self._tile(row, col)
        if tile.verdict is not Verdict.UNSET:
            raise ValueError(f"Tile ({row}, {col}) has already been submitted")
        tile.letter = None

    def set_tile_verdict(self, row: int, col: int, verdict: Verdict) -> None:
        tile = self._tile(row, col)
        # Verdicts are written once per tile
        if tile.verdict is not Verdict.UNSET:
            raise ValueError(f"Tile ({row}, {col}) already has verdict {tile.verdict.value}")
        if verdict is Verdict.UNSET:
            raise ValueError("Cannot reset a tile verdict to unset")
        tile.verdict = verdict

    def get_tile_verdict(self, row: int, col: int) -> Verdict:
        return self._tile(row, col).verdict

    def snapshot(self) -> List[List[Dict[str, Optional[str]]]]:
        """Rows of {letter, verdict} dicts for JSON serialization."""
        return [
            [{'letter': tile.letter, 'verdict': tile.verdict.value} for tile in row]
            for row in self.tiles
        ]
