"""Grid representation and placement helpers."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import SlotPlacementError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class CrosswordGrid:
    """Square letter grid that enforces the intersection and adjacency rules."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]
        # Directions of the words covering each filled cell.
        self._coverage: Dict[Tuple[int, int], Set[Direction]] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        """Off-grid coordinates count as empty."""
        if not self.bounds.contains(row, col):
            return True
        return self.cells[row][col] is None

    def filled_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield filled cells in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                if self.cells[row][col] is not None:
                    yield row, col

    def directions_at(self, row: int, col: int) -> Set[Direction]:
        return set(self._coverage.get((row, col), ()))

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def find_start(
        self, word: str, row: int, col: int, direction: Direction
    ) -> Optional[Tuple[int, int]]:
        """Return the start cell for ``word`` crossing the filled cell at ``(row, col)``.

        The crossing uses the first occurrence of the cell's letter in the
        word. ``None`` means the word cannot cross here in ``direction``.
        """

        anchor = self.cells[row][col]
        if anchor is None:
            return None
        intersection = word.find(anchor)
        if intersection == -1:
            return None

        dr, dc = direction.step
        start_row = row - dr * intersection
        start_col = col - dc * intersection
        end_row = start_row + dr * (len(word) - 1)
        end_col = start_col + dc * (len(word) - 1)
        if not (self.bounds.contains(start_row, start_col) and self.bounds.contains(end_row, end_col)):
            return None
        if not self.is_empty(start_row - dr, start_col - dc) or not self.is_empty(end_row + dr, end_col + dc):
            return None

        for index, letter in enumerate(word):
            r, c = start_row + dr * index, start_col + dc * index
            existing = self.cells[r][c]
            if existing is not None:
                if existing != letter:
                    return None
                if direction in self._coverage.get((r, c), ()):
                    return None
            if index == intersection:
                continue
            for pr, pc in direction.perpendicular_steps:
                if not self.is_empty(r + pr, c + pc):
                    return None
        return start_row, start_col

    def place_word(self, word: str, start_row: int, start_col: int, direction: Direction) -> None:
        """Write ``word`` into the grid, rejecting out-of-bounds spans and letter conflicts."""

        dr, dc = direction.step
        coords = [(start_row + dr * i, start_col + dc * i) for i in range(len(word))]
        for index, (row, col) in enumerate(coords):
            if not self.bounds.contains(row, col):
                raise SlotPlacementError(f"Word {word} extends outside grid at {(row, col)}")
            existing = self.cells[row][col]
            if existing is not None and existing != word[index]:
                raise SlotPlacementError(f"Letter conflict for {word} at {(row, col)}")

        # All checks passed, mutate grid
        for index, (row, col) in enumerate(coords):
            self.cells[row][col] = word[index]
            self._coverage.setdefault((row, col), set()).add(direction)
        LOGGER.debug("Placed %s %s at row %s col %s", word, direction.value, start_row, start_col)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def snapshot(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.cells]
