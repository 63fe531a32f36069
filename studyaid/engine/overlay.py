"""User guesses layered over a finished puzzle."""

from __future__ import annotations

from typing import Dict, Optional

from ..core.models import Puzzle


def cell_key(row: int, col: int) -> str:
    return f"{row}-{col}"


class GuessOverlay:
    """Sparse ``"{row}-{col}" -> letter`` map of solver input.

    Guesses are only accepted on filled cells and are never checked against
    the solution.
    """

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.guesses: Dict[str, str] = {}

    def set_guess(self, row: int, col: int, value: str) -> None:
        if not self.puzzle.is_filled(row, col):
            raise ValueError(f"Cell ({row},{col}) is not part of any word")
        value = (value or "").strip().upper()
        if not value:
            self.guesses.pop(cell_key(row, col), None)
            return
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        self.guesses[cell_key(row, col)] = value

    def get_guess(self, row: int, col: int) -> Optional[str]:
        return self.guesses.get(cell_key(row, col))

    def clear(self) -> None:
        self.guesses.clear()
