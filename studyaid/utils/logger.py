"""Logging utilities shared by the study aid modules."""

from __future__ import annotations

import logging
from typing import IO, Optional

NOISY_LOGGERS = ("urllib3", "requests")


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Configure root logging with a sensible formatter.

    Placement attempts log at DEBUG, so the default INFO level only shows
    grid sizing and dropped words. Output goes to stderr unless ``stream``
    is given, keeping stdout free for CLI results. HTTP library chatter is
    capped at WARNING.
    """

    handler = logging.StreamHandler(stream)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "studyaid")
