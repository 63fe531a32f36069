"""User-supplied crossword entries in ``WORD`` or ``WORD:Clue`` form."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .response_parser import WordClueList


def parse_user_entries(raw_entries: Iterable[str]) -> WordClueList:
    """Split ``WORD:Clue`` items; blank items are skipped and a bare word gets an empty clue."""

    words: List[str] = []
    clues: List[str] = []
    for item in raw_entries:
        item = item.strip()
        if not item:
            continue
        word, _, clue = item.partition(":")
        words.append(word.strip())
        clues.append(clue.strip())
    return WordClueList(words=words, clues=clues)


def read_entries_file(path: Path) -> List[str]:
    """Read entries from a file, one per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries
