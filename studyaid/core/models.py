"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Entry:
    """A normalized answer word paired with its clue."""

    word: str
    clue: str


@dataclass
class Placement:
    """A word fixed on the grid.

    ``x`` is the column and ``y`` the row of the first letter. ``number`` is
    the 1-based order in which the placement succeeded, which is also the clue
    number shown to the solver.
    """

    word: str
    clue: str
    x: int
    y: int
    direction: Direction
    number: int
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, init=False, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """``(row, col)`` coordinates covered by the word, in letter order."""
        if self._cells is None:
            dr, dc = self.direction.step
            self._cells = [(self.y + dr * i, self.x + dc * i) for i in range(self.length)]
        return self._cells

    def position(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "direction": self.direction.value}


@dataclass
class Puzzle:
    """A finished crossword: grid, placements in placement order, dropped entries."""

    grid: List[List[Optional[str]]]
    size: int
    placements: List[Placement] = field(default_factory=list)
    dropped: List[Entry] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    @property
    def clues(self) -> List[str]:
        return [placement.clue for placement in self.placements]

    @property
    def positions(self) -> List[Dict[str, Any]]:
        return [placement.position() for placement in self.placements]

    def letter(self, row: int, col: int) -> Optional[str]:
        return self.grid[row][col]

    def is_filled(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size and self.grid[row][col] is not None

    def placements_by_direction(self, direction: Direction) -> List[Placement]:
        return [placement for placement in self.placements if placement.direction == direction]

    def to_jsonable(self) -> Dict[str, Any]:
        """Serialize in the shape consumed by the rendering layer."""
        return {
            "grid": [[letter or "" for letter in row] for row in self.grid],
            "size": self.size,
            "words": self.words,
            "clues": self.clues,
            "positions": self.positions,
            "dropped": [entry.word for entry in self.dropped],
        }


@dataclass(frozen=True)
class Flashcard:
    """A key term and its definition."""

    term: str
    definition: str
