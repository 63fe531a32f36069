"""Prompts that turn extracted document text into study material."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..core.constants import (
    CROSSWORD_TEXT_LIMIT,
    FLASHCARD_COUNT,
    FLASHCARD_TEXT_LIMIT,
    MAX_CROSSWORD_WORDS,
    MIN_HANGMAN_WORD_LENGTH,
)
from ..core.exceptions import MalformedResponse
from ..core.models import Flashcard
from ..data.normalization import clean_text, clean_word
from ..data.response_parser import (
    WordClueList,
    parse_flashcard_payload,
    parse_keyword_payload,
    parse_word_clue_payload,
)
from ..utils.logger import get_logger
from .gemini_client import GeminiClient


LOGGER = get_logger(__name__)


class TextGenerator(Protocol):
    def generate_text(self, prompt: str) -> str:
        """Return the model's reply to ``prompt``."""


@dataclass
class StudyContentConfig:
    model_name: str = "gemini-2.5-flash"
    api_key_env: str = "GEMINI_API_KEY"
    model_env: str = "GEMINI_MODEL"
    crossword_text_limit: int = CROSSWORD_TEXT_LIMIT
    flashcard_text_limit: int = FLASHCARD_TEXT_LIMIT
    max_crossword_words: int = MAX_CROSSWORD_WORDS
    flashcard_count: int = FLASHCARD_COUNT


class GeminiStudyContentGenerator:
    """Crossword entries, flashcards, topics and keywords from document text."""

    CROSSWORD_PROMPT = (
        "Create a crossword puzzle using important keywords from this text. "
        "Focus on nouns, key terms, and significant words. "
        "Format your response EXACTLY like this:\n"
        "{{\n"
        '  "words": ["keyword1", "keyword2", "keyword3"],\n'
        '  "clues": ["Description for keyword1", "Description for keyword2", "Description for keyword3"]\n'
        "}}\n"
        "If you can't find enough keywords, use at least 3-4 important words from the text. "
        "Maximum {max_words} words.\n"
        "Text: {text}"
    )

    FLASHCARD_PROMPT = (
        'Extract {count} key terms and their definitions from this text: "{text}". '
        "Format the response as JSON with 'words' and 'definitions' arrays."
    )

    TOPIC_PROMPT = "Analyze this text and provide the main topic in 2-3 words: {text}"

    VIDEO_TERMS_PROMPT = (
        "Extract the main educational concepts or topics from this text that would be "
        "useful for finding relevant educational videos. Format the response as 2-3 key "
        "search terms that would work well with YouTube's search algorithm: {text}"
    )

    KEYWORD_PROMPT = (
        "List the most important single-word keywords from this text. "
        'Respond with JSON only, formatted as {{"keywords": ["word1", "word2"]}}.\n'
        "Text: {text}"
    )

    def __init__(
        self,
        config: Optional[StudyContentConfig] = None,
        client: Optional[TextGenerator] = None,
    ) -> None:
        self.config = config or StudyContentConfig()
        self._client = client

    @property
    def client(self) -> TextGenerator:
        if self._client is None:
            self._client = GeminiClient(
                model_name=self.config.model_name,
                api_key_env=self.config.api_key_env,
                model_env=self.config.model_env,
            )
        return self._client

    # ------------------------------------------------------------------
    # Study aids
    # ------------------------------------------------------------------
    def crossword_entries(self, text: str) -> WordClueList:
        prompt = self.CROSSWORD_PROMPT.format(
            max_words=self.config.max_crossword_words,
            text=clean_text(text, self.config.crossword_text_limit),
        )
        reply = self.client.generate_text(prompt)
        entries = parse_word_clue_payload(reply)
        LOGGER.info("Model proposed %d crossword words", len(entries.words))
        return entries

    def flashcards(self, text: str) -> List[Flashcard]:
        prompt = self.FLASHCARD_PROMPT.format(
            count=self.config.flashcard_count,
            text=clean_text(text, self.config.flashcard_text_limit),
        )
        cards = parse_flashcard_payload(self.client.generate_text(prompt))
        LOGGER.info("Model proposed %d flashcards", len(cards))
        return cards

    def main_topic(self, text: str) -> str:
        topic = self.client.generate_text(self.TOPIC_PROMPT.format(text=clean_text(text))).strip()
        if not topic:
            raise MalformedResponse("No topic was detected")
        return topic

    def video_search_terms(self, text: str) -> str:
        return self.client.generate_text(self.VIDEO_TERMS_PROMPT.format(text=clean_text(text))).strip()

    def hangman_keywords(self, text: str) -> List[str]:
        """Return unique uppercase keywords long enough for a hangman round."""
        reply = self.client.generate_text(self.KEYWORD_PROMPT.format(text=clean_text(text)))
        keywords: List[str] = []
        for raw in parse_keyword_payload(reply):
            word = clean_word(raw)
            if len(word) >= MIN_HANGMAN_WORD_LENGTH and word not in keywords:
                keywords.append(word)
        return keywords
