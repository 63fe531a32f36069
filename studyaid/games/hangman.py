"""Hangman game state."""

from __future__ import annotations

import random
import string
from typing import List, Optional, Sequence

from ..core.constants import MAX_INCORRECT_GUESSES
from ..core.exceptions import GameOverError
from ..data.normalization import clean_word


class HangmanGame:
    """A single round of hangman over one secret word."""

    def __init__(self, word: str, max_incorrect: int = MAX_INCORRECT_GUESSES) -> None:
        self.word = clean_word(word)
        if not self.word:
            raise ValueError(f"Hangman word {word!r} contains no letters")
        self.max_incorrect = max_incorrect
        self.guessed: List[str] = []
        self.incorrect = 0

    @classmethod
    def from_keywords(
        cls,
        keywords: Sequence[str],
        seed: Optional[int] = None,
        max_incorrect: int = MAX_INCORRECT_GUESSES,
    ) -> "HangmanGame":
        if not keywords:
            raise ValueError("No suitable keywords found")
        rng = random.Random(seed)
        return cls(rng.choice(list(keywords)), max_incorrect=max_incorrect)

    def guess(self, letter: str) -> bool:
        """Record a guess and return whether the letter is in the word.

        Repeated guesses are ignored and cost nothing.
        """

        if self.is_over:
            raise GameOverError("The game is already over")
        letter = (letter or "").strip().upper()
        if len(letter) != 1 or letter not in string.ascii_uppercase:
            raise ValueError(f"Guess must be a single letter, got {letter!r}")
        if letter in self.guessed:
            return letter in self.word
        self.guessed.append(letter)
        if letter not in self.word:
            self.incorrect += 1
            return False
        return True

    @property
    def masked(self) -> str:
        return " ".join(letter if letter in self.guessed else "_" for letter in self.word)

    @property
    def remaining(self) -> int:
        return self.max_incorrect - self.incorrect

    @property
    def is_won(self) -> bool:
        return all(letter in self.guessed for letter in self.word)

    @property
    def is_lost(self) -> bool:
        return self.incorrect >= self.max_incorrect

    @property
    def is_over(self) -> bool:
        return self.is_won or self.is_lost
