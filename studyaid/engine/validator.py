"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate(self, puzzle: Puzzle) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_bounds(puzzle)
            coverage = self._check_letters(puzzle)
            self._check_filled_cells_covered(puzzle, coverage)
            self._check_crossings(coverage)
            self._check_adjacency(puzzle, coverage)
            self._check_numbering(puzzle)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_bounds(self, puzzle: Puzzle) -> None:
        for placement in puzzle.placements:
            for row, col in placement.cells:
                if not (0 <= row < puzzle.size and 0 <= col < puzzle.size):
                    raise ValidationError(
                        f"Word {placement.word} leaves the grid at ({row},{col})"
                    )

    def _check_letters(self, puzzle: Puzzle) -> Dict[Tuple[int, int], List[Direction]]:
        coverage: Dict[Tuple[int, int], List[Direction]] = {}
        for placement in puzzle.placements:
            for index, (row, col) in enumerate(placement.cells):
                if puzzle.letter(row, col) != placement.word[index]:
                    raise ValidationError(
                        f"Cell ({row},{col}) holds '{puzzle.letter(row, col)}' "
                        f"but {placement.word} needs '{placement.word[index]}'"
                    )
                coverage.setdefault((row, col), []).append(placement.direction)
        return coverage

    def _check_filled_cells_covered(
        self, puzzle: Puzzle, coverage: Dict[Tuple[int, int], List[Direction]]
    ) -> None:
        for row in range(puzzle.size):
            for col in range(puzzle.size):
                if puzzle.letter(row, col) is not None and (row, col) not in coverage:
                    raise ValidationError(f"Stray letter at ({row},{col})")

    def _check_crossings(self, coverage: Dict[Tuple[int, int], List[Direction]]) -> None:
        for (row, col), directions in coverage.items():
            if len(directions) != len(set(directions)):
                raise ValidationError(f"Same-direction overlap at ({row},{col})")

    def _check_adjacency(
        self, puzzle: Puzzle, coverage: Dict[Tuple[int, int], List[Direction]]
    ) -> None:
        for placement in puzzle.placements:
            for row, col in placement.cells:
                if len(coverage[(row, col)]) > 1:
                    continue
                for dr, dc in placement.direction.perpendicular_steps:
                    if puzzle.is_filled(row + dr, col + dc):
                        raise ValidationError(
                            f"Word {placement.word} touches a neighbour at ({row + dr},{col + dc})"
                        )

    def _check_numbering(self, puzzle: Puzzle) -> None:
        numbers = [placement.number for placement in puzzle.placements]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValidationError(f"Placement numbers out of sequence: {numbers}")
