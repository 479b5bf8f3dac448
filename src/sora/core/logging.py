"""Application logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_MAX_BODY_LEN = 500


def truncate(text: str, limit: int = _MAX_BODY_LEN) -> str:
    """Shorten upstream response bodies before they go into a log line."""
    if len(text) > limit:
        return text[:limit] + f"... (truncated, {len(text)} total)"
    return text


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure application logging to stderr and, optionally, a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=_FORMAT,
        handlers=handlers,
        force=True,
    )
