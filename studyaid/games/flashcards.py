"""Flashcard deck navigation."""

from __future__ import annotations

from typing import List, Sequence

from ..core.models import Flashcard


class FlashcardDeck:
    """Cycles through cards; moving to another card hides its definition."""

    def __init__(self, cards: Sequence[Flashcard]) -> None:
        if not cards:
            raise ValueError("A flashcard deck needs at least one card")
        self.cards: List[Flashcard] = list(cards)
        self.index = 0
        self.show_definition = False

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def current(self) -> Flashcard:
        return self.cards[self.index]

    def flip(self) -> bool:
        self.show_definition = not self.show_definition
        return self.show_definition

    def next(self) -> Flashcard:
        self.show_definition = False
        self.index = (self.index + 1) % len(self.cards)
        return self.current

    def prev(self) -> Flashcard:
        self.show_definition = False
        self.index = (self.index - 1) % len(self.cards)
        return self.current
