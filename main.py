"""CLI entrypoint for generating study aids from a PDF."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional

from studyaid.core.constants import VIDEO_RESULTS
from studyaid.core.exceptions import StudyAidError
from studyaid.data.user_words import parse_user_entries, read_entries_file
from studyaid.engine.generator import CrosswordGenerator
from studyaid.engine.validator import PuzzleValidator
from studyaid.games.flashcards import FlashcardDeck
from studyaid.games.hangman import HangmanGame
from studyaid.io.chat import ChatAssistant
from studyaid.io.pdf import DocumentContext, extract_document
from studyaid.io.study_content import GeminiStudyContentGenerator
from studyaid.io.youtube import YouTubeClient
from studyaid.utils.logger import configure_logging, get_logger
from studyaid.utils.pretty import pretty_print_puzzle


LOGGER = get_logger("studyaid.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate crosswords, flashcards, hangman rounds and videos from a PDF",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    crossword = sub.add_parser("crossword", help="Build a crossword from a PDF or explicit words")
    crossword.add_argument("pdf", type=Path, nargs="?", help="PDF to extract keywords from")
    crossword.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit entries (format: WORD or WORD:Clue); skips the model call",
    )
    crossword.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    crossword.add_argument("--reveal", action="store_true", help="Print the solution letters")
    crossword.add_argument("--output", type=Path, help="Optional path to JSON output")

    flashcards = sub.add_parser("flashcards", help="Extract key terms and definitions")
    flashcards.add_argument("pdf", type=Path)
    flashcards.add_argument("--output", type=Path, help="Optional path to JSON output")

    hangman = sub.add_parser("hangman", help="Play hangman on a keyword from the PDF")
    hangman.add_argument("pdf", type=Path)
    hangman.add_argument("--seed", type=int, default=None, help="Random seed for the word choice")

    topic = sub.add_parser("topic", help="Detect the main topic of a PDF")
    topic.add_argument("pdf", type=Path)

    videos = sub.add_parser("videos", help="Recommend videos for a PDF or a topic")
    source = videos.add_mutually_exclusive_group(required=True)
    source.add_argument("--pdf", type=Path, help="Derive search terms from this PDF")
    source.add_argument("--topic", type=str, help="Search this topic directly")
    videos.add_argument("--max-results", type=int, default=VIDEO_RESULTS)

    chat = sub.add_parser("chat", help="Ask a question, optionally about a PDF")
    chat.add_argument("question", nargs="+")
    chat.add_argument("--pdf", type=Path, help="Ground the answer in this PDF")
    return parser


def _write_json(payload: Any, output: Path) -> None:
    output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    LOGGER.info("Wrote %s", output)


def run_crossword(args: argparse.Namespace, content: GeminiStudyContentGenerator) -> int:
    raw_entries: List[str] = []
    if args.words:
        raw_entries.extend(args.words)
    if args.words_file:
        raw_entries.extend(read_entries_file(args.words_file))

    if raw_entries:
        entries = parse_user_entries(raw_entries)
    elif args.pdf:
        entries = content.crossword_entries(extract_document(args.pdf).text)
    else:
        raise StudyAidError("provide a PDF or --words / --words-file")

    puzzle = CrosswordGenerator().generate(entries.words, entries.clues)
    validation = PuzzleValidator().validate(puzzle)
    if not validation.ok:
        LOGGER.warning("Puzzle failed validation: %s", validation.messages)

    if args.output:
        _write_json(puzzle.to_jsonable(), args.output)
    pretty_print_puzzle(puzzle, reveal=args.reveal)
    return 0


def run_flashcards(args: argparse.Namespace, content: GeminiStudyContentGenerator) -> int:
    cards = content.flashcards(extract_document(args.pdf).text)
    if args.output:
        _write_json([card.__dict__ for card in cards], args.output)
        return 0
    deck = FlashcardDeck(cards)
    for position in range(len(deck)):
        card = deck.current
        print(f"{position + 1}. {card.term}: {card.definition}")
        deck.next()
    return 0


def run_hangman(
    args: argparse.Namespace,
    content: GeminiStudyContentGenerator,
    read_line: Callable[[str], str] = input,
) -> int:
    keywords = content.hangman_keywords(extract_document(args.pdf).text)
    game = HangmanGame.from_keywords(keywords, seed=args.seed)
    while not game.is_over:
        print(f"{game.masked}   ({game.remaining} wrong guesses left)")
        try:
            game.guess(read_line("Letter: "))
        except ValueError as exc:
            print(exc)
        except EOFError:
            break
    if not game.is_over:
        print(f"Quit before finishing. The word was {game.word}.")
        return 0
    if game.is_won:
        print(f"Congratulations! You've won! The word was {game.word}.")
        return 0
    print(f"Game Over! The word was {game.word}.")
    return 0


def run_topic(args: argparse.Namespace, content: GeminiStudyContentGenerator) -> int:
    print(content.main_topic(extract_document(args.pdf).text))
    return 0


def run_videos(args: argparse.Namespace, content: GeminiStudyContentGenerator) -> int:
    topic = args.topic or content.video_search_terms(extract_document(args.pdf).text)
    for video in YouTubeClient().search(topic, max_results=args.max_results):
        print(f"{video.title}\n  {video.url}")
    return 0


def run_chat(args: argparse.Namespace, content: GeminiStudyContentGenerator) -> int:
    context: Optional[DocumentContext] = extract_document(args.pdf) if args.pdf else None
    assistant = ChatAssistant(client=content.client)
    print(assistant.respond(" ".join(args.question), context))
    return 0


COMMANDS = {
    "crossword": run_crossword,
    "flashcards": run_flashcards,
    "hangman": run_hangman,
    "topic": run_topic,
    "videos": run_videos,
    "chat": run_chat,
}


def main(argv: list[str] | None = None, content: Optional[GeminiStudyContentGenerator] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    content = content or GeminiStudyContentGenerator()
    try:
        return COMMANDS[args.command](args, content)
    except (StudyAidError, RuntimeError, ValueError) as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
