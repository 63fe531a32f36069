"""Crossword generation orchestration.

Words are laid out greedily, longest first:
  1. The first word that fits is centred across the middle row.
  2. Every later word is crossed onto the first filled cell (row-major scan)
     where it fits, trying down before across.
Words that fit nowhere are reported in ``Puzzle.dropped``; the grid is never
resized.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import MIN_GRID_SIZE, PLACEMENT_ORDER, Direction
from ..core.exceptions import EmptyInput
from ..core.models import Entry, Placement, Puzzle
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    min_size: int = MIN_GRID_SIZE


def prepare_entries(words: Sequence[str], clues: Sequence[str]) -> Tuple[List[Entry], List[Entry]]:
    """Normalize and sort entries longest first.

    Returns ``(usable, rejected)``; rejected entries are those whose word is
    empty after normalization. ``sorted`` is stable, so equal-length words
    keep their input order.
    """

    if len(words) != len(clues):
        raise ValueError(f"Got {len(words)} words but {len(clues)} clues")
    usable: List[Entry] = []
    rejected: List[Entry] = []
    for word, clue in zip(words, clues):
        entry = Entry(word=clean_word(word), clue=clue)
        if entry.word:
            usable.append(entry)
        else:
            LOGGER.warning("Skipping entry %r: no letters after normalization", word)
            rejected.append(Entry(word=word, clue=clue))
    usable = sorted(usable, key=lambda entry: len(entry.word), reverse=True)
    return usable, rejected


def grid_size_for(entries: Sequence[Entry], min_size: int = MIN_GRID_SIZE) -> int:
    total_letters = sum(len(entry.word) for entry in entries)
    return max(min_size, math.ceil(math.sqrt(total_letters)))


class CrosswordGenerator:
    """Deterministic greedy crossword layout."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str], clues: Sequence[str]) -> Puzzle:
        if not words:
            raise EmptyInput("Cannot build a crossword from an empty word list")

        entries, dropped = prepare_entries(words, clues)
        if not entries:
            raise EmptyInput("None of the supplied words contain letters")

        size = grid_size_for(entries, self.config.min_size)
        LOGGER.info("Laying out %d words on a %dx%d grid", len(entries), size, size)
        grid = CrosswordGrid(size)
        placements: List[Placement] = []

        for entry in entries:
            if len(entry.word) > size:
                LOGGER.info("Dropping %s: longer than grid side %d", entry.word, size)
                dropped.append(entry)
                continue
            if not placements:
                placement = self._place_first(grid, entry)
            else:
                placement = self._place_crossing(grid, entry, len(placements) + 1)
            if placement is None:
                LOGGER.info("Dropping %s: no valid crossing", entry.word)
                dropped.append(entry)
                continue
            placements.append(placement)

        LOGGER.info("Placed %d of %d words", len(placements), len(placements) + len(dropped))
        return Puzzle(grid=grid.snapshot(), size=size, placements=placements, dropped=dropped)

    # ------------------------------------------------------------------
    # Placement helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _place_first(grid: CrosswordGrid, entry: Entry) -> Placement:
        col = (grid.size - len(entry.word)) // 2
        row = grid.size // 2
        grid.place_word(entry.word, row, col, Direction.ACROSS)
        return Placement(
            word=entry.word, clue=entry.clue, x=col, y=row,
            direction=Direction.ACROSS, number=1,
        )

    @staticmethod
    def _place_crossing(grid: CrosswordGrid, entry: Entry, number: int) -> Optional[Placement]:
        for row, col in list(grid.filled_cells()):
            for direction in PLACEMENT_ORDER:
                start = grid.find_start(entry.word, row, col, direction)
                if start is None:
                    continue
                start_row, start_col = start
                grid.place_word(entry.word, start_row, start_col, direction)
                return Placement(
                    word=entry.word, clue=entry.clue, x=start_col, y=start_row,
                    direction=direction, number=number,
                )
        return None


def generate_crossword(words: Sequence[str], clues: Sequence[str]) -> Puzzle:
    """Convenience wrapper around :class:`CrosswordGenerator` with default config."""
    return CrosswordGenerator().generate(words, clues)


def conventional_numbering(puzzle: Puzzle) -> List[Tuple[int, int, int]]:
    """Number cells the way printed crosswords do.

    Scans top-to-bottom, left-to-right and returns ``(number, row, col)`` for
    every cell that starts a placed word. Independent of the placement-order
    numbers stored on each :class:`Placement`.
    """

    starts = sorted({(placement.y, placement.x) for placement in puzzle.placements})
    return [(index, row, col) for index, (row, col) in enumerate(starts, start=1)]
