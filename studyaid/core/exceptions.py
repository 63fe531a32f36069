"""Custom exception hierarchy for study aid generation."""


class StudyAidError(Exception):
    """Base exception for study aid failures."""


class EmptyInput(StudyAidError):
    """Raised when the crossword generator receives no words."""


class ParseError(StudyAidError):
    """Raised when model output does not contain parseable JSON."""


class MalformedResponse(ParseError):
    """Raised when parsed model output lacks the required fields."""


class SlotPlacementError(StudyAidError):
    """Raised when a word cannot be written into the grid without breaking rules."""


class ValidationError(StudyAidError):
    """Raised when the puzzle integrity checks fail."""


class PdfExtractionError(StudyAidError):
    """Raised when no text can be extracted from a PDF."""


class VideoSearchError(StudyAidError):
    """Raised when the video search API fails or returns nothing."""


class GameOverError(StudyAidError):
    """Raised when a move is made on a finished hangman game."""
