import unittest

from studyaid.core.constants import Direction
from studyaid.core.exceptions import EmptyInput
from studyaid.core.models import Entry, Placement
from studyaid.engine.generator import (
    CrosswordGenerator,
    GeneratorConfig,
    conventional_numbering,
    generate_crossword,
    grid_size_for,
    prepare_entries,
)
from studyaid.engine.validator import PuzzleValidator


BIOLOGY_WORDS = [
    "photosynthesis", "chlorophyll", "light", "leaf", "stomata",
    "glucose", "oxygen", "carbon", "water", "energy",
]


class PrepareEntriesTests(unittest.TestCase):
    def test_sorts_longest_first_keeping_tie_order(self) -> None:
        entries, rejected = prepare_entries(
            ["dog", "cat", "birds", "emu"], ["d", "c", "b", "e"]
        )
        self.assertEqual([e.word for e in entries], ["BIRDS", "DOG", "CAT", "EMU"])
        self.assertEqual(rejected, [])

    def test_tie_order_follows_input_order(self) -> None:
        forward, _ = prepare_entries(["cat", "dog"], ["c", "d"])
        backward, _ = prepare_entries(["dog", "cat"], ["d", "c"])
        self.assertEqual([e.word for e in forward], ["CAT", "DOG"])
        self.assertEqual([e.word for e in backward], ["DOG", "CAT"])

    def test_words_are_normalized(self) -> None:
        entries, _ = prepare_entries(["Cell wall", "café"], ["a", "b"])
        self.assertEqual([e.word for e in entries], ["CELLWALL", "CAFE"])

    def test_letterless_words_are_rejected(self) -> None:
        entries, rejected = prepare_entries(["cat", "42"], ["pet", "answer"])
        self.assertEqual([e.word for e in entries], ["CAT"])
        self.assertEqual(rejected, [Entry(word="42", clue="answer")])

    def test_mismatched_lengths_raise(self) -> None:
        with self.assertRaises(ValueError):
            prepare_entries(["cat", "dog"], ["pet"])


class GridSizeTests(unittest.TestCase):
    def test_minimum_size_is_twenty(self) -> None:
        self.assertEqual(grid_size_for([Entry("CAT", "")]), 20)

    def test_large_inputs_use_square_root(self) -> None:
        entries = [Entry("A" * 20, "")] * 21  # 420 letters -> ceil(sqrt(420)) == 21
        self.assertEqual(grid_size_for(entries), 21)


class CrosswordGeneratorTests(unittest.TestCase):
    def test_longest_word_is_first_and_centered(self) -> None:
        puzzle = generate_crossword(
            ["PHOTOSYNTHESIS", "LIGHT", "LEAF"],
            ["Plants make food", "Sun energy", "Green organ"],
        )
        self.assertEqual(puzzle.size, 20)
        first = puzzle.placements[0]
        self.assertEqual(first.word, "PHOTOSYNTHESIS")
        self.assertEqual(first.number, 1)
        self.assertEqual(first.direction, Direction.ACROSS)
        self.assertEqual((first.x, first.y), (3, 10))

    def test_crossings_follow_scan_order(self) -> None:
        puzzle = generate_crossword(
            ["PHOTOSYNTHESIS", "LIGHT", "LEAF"],
            ["Plants make food", "Sun energy", "Green organ"],
        )
        self.assertEqual(puzzle.words, ["PHOTOSYNTHESIS", "LIGHT", "LEAF"])
        self.assertEqual(puzzle.clues, ["Plants make food", "Sun energy", "Green organ"])
        self.assertEqual(
            puzzle.positions,
            [
                {"x": 3, "y": 10, "direction": "across"},
                {"x": 4, "y": 7, "direction": "down"},
                {"x": 4, "y": 7, "direction": "across"},
            ],
        )
        self.assertEqual(puzzle.dropped, [])

    def test_cat_crosses_cater_downwards(self) -> None:
        puzzle = generate_crossword(["CAT", "CATER"], ["Pet", "Provide food"])
        self.assertEqual(puzzle.words, ["CATER", "CAT"])
        cater, cat = puzzle.placements
        self.assertEqual((cater.x, cater.y, cater.direction), (7, 10, Direction.ACROSS))
        self.assertEqual((cat.x, cat.y, cat.direction), (7, 10, Direction.DOWN))
        self.assertEqual(cat.number, 2)

    def test_word_without_shared_letter_is_dropped(self) -> None:
        puzzle = generate_crossword(["ABC", "XYZ"], ["first", "second"])
        self.assertEqual(puzzle.words, ["ABC"])
        self.assertEqual(puzzle.dropped, [Entry(word="XYZ", clue="second")])

    def test_word_longer_than_grid_is_dropped(self) -> None:
        long_word = "ABCDEFGHIJKLMNOPQRSTUVWXY"
        puzzle = generate_crossword([long_word, "CAT", "TAX"], ["alphabet", "pet", "levy"])
        self.assertEqual(puzzle.size, 20)
        self.assertEqual([e.word for e in puzzle.dropped], [long_word])
        self.assertEqual(puzzle.words, ["CAT", "TAX"])
        cat, tax = puzzle.placements
        self.assertEqual((cat.x, cat.y, cat.number), (8, 10, 1))
        self.assertEqual((tax.x, tax.y, tax.direction), (9, 9, Direction.DOWN))

    def test_empty_input_raises(self) -> None:
        with self.assertRaises(EmptyInput):
            generate_crossword([], [])

    def test_only_letterless_words_raises(self) -> None:
        with self.assertRaises(EmptyInput):
            generate_crossword(["123", "--"], ["a", "b"])

    def test_generation_is_deterministic(self) -> None:
        clues = [f"clue {i}" for i in range(len(BIOLOGY_WORDS))]
        first = generate_crossword(BIOLOGY_WORDS, clues)
        second = generate_crossword(BIOLOGY_WORDS, clues)
        self.assertEqual(first.to_jsonable(), second.to_jsonable())

    def test_generated_puzzle_passes_validation(self) -> None:
        clues = [f"clue {i}" for i in range(len(BIOLOGY_WORDS))]
        puzzle = generate_crossword(BIOLOGY_WORDS, clues)
        result = PuzzleValidator().validate(puzzle)
        self.assertTrue(result.ok, result.messages)
        self.assertEqual(
            len(puzzle.placements) + len(puzzle.dropped), len(BIOLOGY_WORDS)
        )

    def test_all_cells_within_bounds(self) -> None:
        clues = [""] * len(BIOLOGY_WORDS)
        puzzle = generate_crossword(BIOLOGY_WORDS, clues)
        for placement in puzzle.placements:
            for row, col in placement.cells:
                self.assertTrue(0 <= row < puzzle.size and 0 <= col < puzzle.size)

    def test_custom_minimum_size(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(min_size=5))
        puzzle = generator.generate(["CAT", "TAX"], ["pet", "levy"])
        self.assertEqual(puzzle.size, 5)
        self.assertEqual(puzzle.placements[0].x, 1)
        self.assertEqual(puzzle.placements[0].y, 2)

    def test_payload_shape(self) -> None:
        puzzle = generate_crossword(["CAT", "CATER"], ["Pet", "Provide food"])
        payload = puzzle.to_jsonable()
        self.assertEqual(
            set(payload), {"grid", "size", "words", "clues", "positions", "dropped"}
        )
        self.assertEqual(len(payload["grid"]), 20)
        self.assertEqual(payload["grid"][10][7:12], ["C", "A", "T", "E", "R"])
        self.assertEqual(payload["grid"][0][0], "")


class PlacementModelTests(unittest.TestCase):
    def test_cells_follow_direction(self) -> None:
        placement = Placement("CAT", "Pet", x=2, y=5, direction=Direction.DOWN, number=1)
        self.assertEqual(placement.cells, [(5, 2), (6, 2), (7, 2)])

    def test_cell_cache_is_not_a_constructor_argument(self) -> None:
        with self.assertRaises(TypeError):
            Placement("CAT", "Pet", x=0, y=0, direction=Direction.ACROSS, number=1, _cells=[])


class ConventionalNumberingTests(unittest.TestCase):
    def test_numbers_follow_reading_order(self) -> None:
        puzzle = generate_crossword(
            ["PHOTOSYNTHESIS", "LIGHT", "LEAF"], ["a", "b", "c"]
        )
        self.assertEqual(conventional_numbering(puzzle), [(1, 7, 4), (2, 10, 3)])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
