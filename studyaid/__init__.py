"""Study aid generation from uploaded PDFs.

This package exposes the public API surface via:

- ``studyaid.engine.generator.CrosswordGenerator``: deterministic crossword layout.
- ``studyaid.io.study_content.GeminiStudyContentGenerator``: model prompts that
  turn document text into crossword entries, flashcards and keywords.
- ``studyaid.io.pdf.extract_document``: PDF text extraction.
"""

from .engine.generator import CrosswordGenerator, GeneratorConfig, generate_crossword
from .core.models import Entry, Placement, Puzzle

__all__ = [
    "CrosswordGenerator",
    "GeneratorConfig",
    "generate_crossword",
    "Entry",
    "Placement",
    "Puzzle",
]

__version__ = "0.1.0"
