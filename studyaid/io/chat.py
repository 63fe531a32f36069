"""Question answering over an uploaded document."""

from __future__ import annotations

from typing import Optional

from ..core.constants import CHAT_CONTEXT_LIMIT
from ..utils.logger import get_logger
from .gemini_client import GeminiClient
from .pdf import DocumentContext
from .study_content import TextGenerator


LOGGER = get_logger(__name__)


class ChatAssistant:
    """Answers user questions, grounding them in a document when one is given.

    The document is passed on every call; the assistant keeps no record of
    previous uploads.
    """

    DOCUMENT_PROMPT = (
        "Context: The following is the content of a PDF document: {context}\n\n"
        "User Question: {question}\n\n"
        "Please provide a relevant response based on the PDF content if the question is "
        "related to it. If the question is not related to the PDF, provide a general "
        "response. Keep the response concise and informative."
    )

    GENERAL_PROMPT = (
        "User Question: {question}\n"
        "Please provide a helpful and informative response. Keep it concise and natural."
    )

    def __init__(
        self,
        client: Optional[TextGenerator] = None,
        context_limit: int = CHAT_CONTEXT_LIMIT,
    ) -> None:
        self._client = client
        self.context_limit = context_limit

    @property
    def client(self) -> TextGenerator:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    def render_prompt(self, question: str, context: Optional[DocumentContext] = None) -> str:
        if context is not None and context.text:
            return self.DOCUMENT_PROMPT.format(
                context=context.text[: self.context_limit],
                question=question,
            )
        return self.GENERAL_PROMPT.format(question=question)

    def respond(self, question: str, context: Optional[DocumentContext] = None) -> str:
        question = question.strip()
        if not question:
            raise ValueError("Question must not be empty")
        LOGGER.debug("Answering question (document=%s)", bool(context and context.text))
        return self.client.generate_text(self.render_prompt(question, context)).strip()
