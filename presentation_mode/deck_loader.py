"""Compile a Markdown-like document into a slide deck.

Only ATX headers are structural: every header line opens a new slide and all
following lines up to the next header belong to it verbatim. An optional
``---`` delimited block at the very top supplies title/author/subtitle.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from logging_utils import get_logger

from .models import Deck, Metadata, Slide

logger = get_logger(__name__)

METADATA_DELIMITER = "---"
METADATA_KEYS = ("title", "author", "subtitle")

_HEADER_RE = re.compile(r"^#+[ \t]+\S")


class DeckError(ValueError):
    """Base error for documents that cannot become a deck."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path:
            return f"{self.message}: {self.path}"
        return self.message

    def with_path(self, path: Path | str) -> "DeckError":
        return type(self)(self.message, path)


class DeckReadError(DeckError):
    """The document could not be read."""


class MalformedMetadataError(DeckError):
    """Opening metadata delimiter without a closing one."""


class EmptyDeckError(DeckError):
    """The document contains no header lines."""


def is_header_line(line: str) -> bool:
    return bool(_HEADER_RE.match(line))


def split_lines(document_text: str) -> List[str]:
    """Split on LF or CRLF only; other Unicode line breaks stay inside the line."""
    lines = document_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == METADATA_DELIMITER


def _parse_metadata_lines(lines: Sequence[str]) -> Metadata:
    values: Dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        if key in METADATA_KEYS:
            values[key] = value.strip()
        else:
            logger.debug("Ignoring unknown metadata key: %s", key)
    return Metadata(**values)


def extract_metadata(lines: Sequence[str]) -> Tuple[Optional[Metadata], int]:
    """Return the metadata block (if any) and the index of the first line after it."""
    if not lines or not _is_delimiter(lines[0]):
        return None, 0

    for idx in range(1, len(lines)):
        if _is_delimiter(lines[idx]):
            return _parse_metadata_lines(lines[1:idx]), idx + 1

    raise MalformedMetadataError("Metadata block opened with '---' but never closed")


def split_slides(lines: Sequence[str]) -> List[Slide]:
    slides: List[Slide] = []
    current: List[str] = []
    preamble: List[str] = []

    for line in lines:
        if is_header_line(line):
            if current:
                slides.append(Slide(lines=tuple(current)))
            current = [line]
        elif current:
            current.append(line)
        else:
            preamble.append(line)
    if current:
        slides.append(Slide(lines=tuple(current)))

    dropped = [line for line in preamble if line.strip()]
    if dropped:
        logger.warning(
            "Discarded %d non-blank line(s) of text before the first header", len(dropped)
        )
    return slides


def parse_deck(document_text: str, source: Path | str | None = None) -> Deck:
    """Parse raw document text into a :class:`Deck`."""
    lines = split_lines(document_text)

    try:
        metadata, body_start = extract_metadata(lines)
        slides = split_slides(lines[body_start:])
        if not slides:
            raise EmptyDeckError("No header lines found; nothing to present")
    except DeckError as exc:
        if source is not None and exc.path is None:
            raise exc.with_path(source) from None
        raise

    logger.info(
        "Parsed deck into %d slide(s) (title: %s)",
        len(slides),
        (metadata.title if metadata and metadata.title else "N/A"),
    )
    return Deck(slides=tuple(slides), metadata=metadata)


def load_deck(path: Path | str) -> Deck:
    """Read a document from disk and compile it."""
    deck_path = Path(path).expanduser()
    if not deck_path.exists():
        raise DeckReadError("Document not found", deck_path)
    try:
        text = deck_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DeckReadError(f"Failed to read document ({exc})", deck_path) from exc
    return parse_deck(text, source=deck_path)
