"""Plain-text rendering of puzzles and clue lists."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..core.models import Puzzle
    from ..engine.overlay import GuessOverlay


BLOCK = "#"
BLANK = "."


def format_grid(
    puzzle: Puzzle,
    *,
    overlay: Optional[GuessOverlay] = None,
    reveal: bool = True,
) -> str:
    """Render the grid with column/row headers.

    With ``reveal`` the solution letters are shown; otherwise filled cells
    show the solver's guess from ``overlay`` or ``.`` when there is none.
    Cells outside every word render as ``#``.
    """

    size = puzzle.size
    header_cells = [f"{c:>2}" for c in range(size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * size - 1))
    for r in range(size):
        row_cells: List[str] = []
        for c in range(size):
            letter = puzzle.letter(r, c)
            if letter is None:
                row_cells.append(BLOCK)
            elif reveal:
                row_cells.append(letter)
            else:
                guess = overlay.get_guess(r, c) if overlay else None
                row_cells.append(guess or BLANK)
        lines.append(f"{r:>2} | " + " ".join(f"{symbol:>2}" for symbol in row_cells))
    return "\n".join(lines)


def format_clues(puzzle: Puzzle) -> str:
    """Across and Down clue lists, numbered by placement order."""

    lines: List[str] = []
    for direction, title in ((Direction.ACROSS, "Across"), (Direction.DOWN, "Down")):
        lines.append(title)
        placements = puzzle.placements_by_direction(direction)
        if not placements:
            lines.append("  (none)")
        for placement in placements:
            lines.append(f"  {placement.number}. {placement.clue} ({placement.length})")
    if puzzle.dropped:
        lines.append("Not placed: " + ", ".join(entry.word for entry in puzzle.dropped))
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: Puzzle, *, reveal: bool = False, stream=None) -> None:
    """Print the grid followed by its clue lists."""

    stream = stream or sys.stdout
    print(format_grid(puzzle, reveal=reveal), file=stream)
    print(file=stream)
    print(format_clues(puzzle), file=stream)
