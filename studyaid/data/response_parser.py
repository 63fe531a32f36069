"""Defensive parsing of JSON embedded in free-form model output."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, List, Sequence

from ..core.exceptions import MalformedResponse, ParseError
from ..core.models import Flashcard
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


@dataclass
class WordClueList:
    words: List[str]
    clues: List[str]


def extract_json(text: str) -> Any:
    """Return the JSON value embedded in ``text``.

    Markdown code fences are removed and the text is trimmed to the span
    between the first opening and the last closing bracket or brace.
    """

    if not text:
        raise ParseError("Model response is empty")
    cleaned = FENCE_RE.sub("", text).strip()
    openers = [index for index in (cleaned.find("{"), cleaned.find("[")) if index != -1]
    closers = [index for index in (cleaned.rfind("}"), cleaned.rfind("]")) if index != -1]
    if not openers or not closers:
        raise ParseError("No JSON object or array found in model response")
    start, end = min(openers), max(closers)
    if end < start:
        raise ParseError("No JSON object or array found in model response")
    try:
        return json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as exc:
        LOGGER.warning("Model response is not valid JSON: %s", exc)
        raise ParseError(f"Model response is not valid JSON: {exc}") from exc


def _string_list(data: Any, key: str) -> List[str]:
    if not isinstance(data, dict) or key not in data:
        raise MalformedResponse(f"Model response is missing '{key}'")
    values = data[key]
    if not isinstance(values, list) or not all(isinstance(value, str) for value in values):
        raise MalformedResponse(f"'{key}' must be a list of strings")
    return values


def _paired_lists(text: str, keys: Sequence[str]) -> List[List[str]]:
    data = extract_json(text)
    first, second = (_string_list(data, key) for key in keys)
    if not first:
        raise MalformedResponse(f"'{keys[0]}' is empty")
    if len(first) != len(second):
        raise MalformedResponse(
            f"'{keys[0]}' has {len(first)} items but '{keys[1]}' has {len(second)}"
        )
    return [first, second]


def parse_word_clue_payload(text: str) -> WordClueList:
    """Parse ``{"words": [...], "clues": [...]}`` from a crossword prompt reply."""
    words, clues = _paired_lists(text, ("words", "clues"))
    return WordClueList(words=words, clues=clues)


def parse_flashcard_payload(text: str) -> List[Flashcard]:
    """Parse ``{"words": [...], "definitions": [...]}`` from a flashcard prompt reply."""
    words, definitions = _paired_lists(text, ("words", "definitions"))
    return [Flashcard(term=word, definition=definition) for word, definition in zip(words, definitions)]


def parse_keyword_payload(text: str) -> List[str]:
    """Parse a keyword list, accepting either ``{"keywords": [...]}`` or a bare array."""
    data = extract_json(text)
    if isinstance(data, list):
        data = {"keywords": data}
    return _string_list(data, "keywords")
