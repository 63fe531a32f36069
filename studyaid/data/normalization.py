"""Shared helpers for word and text normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Za-z]")
WHITESPACE_RE = re.compile(r"\s+")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Diacritics are folded to their base letter and anything that is not a
    letter (spaces, hyphens, digits) is dropped, so ``"Cell wall"`` becomes
    ``"CELLWALL"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped).upper()


def clean_text(text: str, limit: int | None = None) -> str:
    """Collapse runs of whitespace and optionally truncate to ``limit`` characters."""

    collapsed = WHITESPACE_RE.sub(" ", text or "").strip()
    if limit is not None:
        return collapsed[:limit]
    return collapsed


__all__ = ["clean_word", "clean_text"]
