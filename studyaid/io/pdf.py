"""PDF text extraction backed by PyMuPDF."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import fitz  # PyMuPDF

from ..core.exceptions import PdfExtractionError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class DocumentContext:
    """Extracted text of one uploaded document."""

    text: str
    page_count: int
    source_name: str = ""


def extract_document(source: Union[str, Path, bytes], source_name: str = "") -> DocumentContext:
    """Extract the concatenated page text from a PDF path or raw bytes.

    Pages are joined with a single space. Raises :class:`PdfExtractionError`
    when the file cannot be opened or holds no text.
    """

    is_stream = isinstance(source, (bytes, bytearray))
    name = source_name or ("<upload>" if is_stream else Path(source).name)
    try:
        if is_stream:
            doc = fitz.open(stream=bytes(source), filetype="pdf")
        else:
            doc = fitz.open(str(source))
    except (fitz.FileDataError, RuntimeError, OSError) as exc:
        raise PdfExtractionError(f"Could not open PDF {name}: {exc}") from exc

    try:
        pages: List[str] = [page.get_text() for page in doc]
        page_count = doc.page_count
    finally:
        doc.close()

    text = " ".join(page.strip() for page in pages if page.strip())
    if not text:
        raise PdfExtractionError(
            f"Could not extract text from {name}. Please try a different file."
        )
    LOGGER.info("Extracted %d characters from %d pages of %s", len(text), page_count, name)
    return DocumentContext(text=text, page_count=page_count, source_name=name)
