import unittest

from studyaid.core.exceptions import MalformedResponse, ParseError
from studyaid.core.models import Flashcard
from studyaid.data.response_parser import (
    extract_json,
    parse_flashcard_payload,
    parse_keyword_payload,
    parse_word_clue_payload,
)
from studyaid.data.user_words import parse_user_entries


class ExtractJsonTests(unittest.TestCase):
    def test_strips_markdown_fences(self) -> None:
        text = '```json\n{"words": ["LEAF"], "clues": ["Green organ"]}\n```'
        self.assertEqual(extract_json(text), {"words": ["LEAF"], "clues": ["Green organ"]})

    def test_trims_surrounding_prose(self) -> None:
        text = 'Sure! Here is your puzzle:\n{"words": ["SUN"], "clues": ["Star"]}\nEnjoy.'
        self.assertEqual(extract_json(text)["words"], ["SUN"])

    def test_accepts_top_level_array(self) -> None:
        self.assertEqual(extract_json('Keywords: ["a", "b"]'), ["a", "b"])

    def test_rejects_text_without_json(self) -> None:
        with self.assertRaises(ParseError):
            extract_json("I could not find any keywords.")

    def test_rejects_invalid_json(self) -> None:
        with self.assertRaises(ParseError):
            extract_json('{"words": ["SUN",], clues}')

    def test_rejects_empty_text(self) -> None:
        with self.assertRaises(ParseError):
            extract_json("")


class WordCluePayloadTests(unittest.TestCase):
    def test_parses_words_and_clues(self) -> None:
        result = parse_word_clue_payload(
            '```\n{"words": ["LEAF", "SUN"], "clues": ["Green organ", "Star"]}\n```'
        )
        self.assertEqual(result.words, ["LEAF", "SUN"])
        self.assertEqual(result.clues, ["Green organ", "Star"])

    def test_missing_clues_is_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            parse_word_clue_payload('{"words": ["LEAF"]}')

    def test_length_mismatch_is_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            parse_word_clue_payload('{"words": ["LEAF", "SUN"], "clues": ["Green organ"]}')

    def test_empty_words_is_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            parse_word_clue_payload('{"words": [], "clues": []}')

    def test_non_string_items_are_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            parse_word_clue_payload('{"words": [1, 2], "clues": ["a", "b"]}')

    def test_array_payload_is_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            parse_word_clue_payload('["LEAF", "SUN"]')

    def test_malformed_is_a_parse_error(self) -> None:
        self.assertTrue(issubclass(MalformedResponse, ParseError))


class FlashcardPayloadTests(unittest.TestCase):
    def test_pairs_words_with_definitions(self) -> None:
        cards = parse_flashcard_payload(
            'Here you go {"words": ["ATP"], "definitions": ["Energy carrier"]}'
        )
        self.assertEqual(cards, [Flashcard(term="ATP", definition="Energy carrier")])

    def test_missing_definitions_is_malformed(self) -> None:
        with self.assertRaises(MalformedResponse):
            parse_flashcard_payload('{"words": ["ATP"], "clues": ["Energy"]}')


class KeywordPayloadTests(unittest.TestCase):
    def test_object_form(self) -> None:
        self.assertEqual(parse_keyword_payload('{"keywords": ["cell"]}'), ["cell"])

    def test_bare_array_form(self) -> None:
        self.assertEqual(parse_keyword_payload('["cell", "atom"]'), ["cell", "atom"])


class UserEntriesTests(unittest.TestCase):
    def test_clue_format_splits_word_and_clue(self) -> None:
        result = parse_user_entries(["LEAF:Green organ", "SUN", "  ", "ATP: Energy: currency"])
        self.assertEqual(result.words, ["LEAF", "SUN", "ATP"])
        self.assertEqual(result.clues, ["Green organ", "", "Energy: currency"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
