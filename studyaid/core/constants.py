"""Shared constants and enumerations for the study aid toolkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """Row/column increment between consecutive letters."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular_steps(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Offsets of the two cells flanking a letter of a word in this direction."""
        if self is Direction.ACROSS:
            return ((-1, 0), (1, 0))
        return ((0, -1), (0, 1))


# Down is attempted before across at every scanned cell.
PLACEMENT_ORDER: Tuple[Direction, ...] = (Direction.DOWN, Direction.ACROSS)

MIN_GRID_SIZE = 20

CROSSWORD_TEXT_LIMIT = 1000
FLASHCARD_TEXT_LIMIT = 1000
CHAT_CONTEXT_LIMIT = 10000

MAX_CROSSWORD_WORDS = 10
FLASHCARD_COUNT = 10
MAX_INCORRECT_GUESSES = 6
MIN_HANGMAN_WORD_LENGTH = 4
VIDEO_RESULTS = 5


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
