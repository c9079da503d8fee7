from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class Metadata:
    title: Optional[str] = None
    author: Optional[str] = None
    subtitle: Optional[str] = None


@dataclass(frozen=True)
class Slide:
    """Lines of one slide, header line first, kept exactly as in the source."""

    lines: Tuple[str, ...]

    @property
    def header(self) -> str:
        return self.lines[0]

    @property
    def level(self) -> int:
        return len(self.header) - len(self.header.lstrip("#"))

    @property
    def body(self) -> Tuple[str, ...]:
        return self.lines[1:]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class Deck:
    slides: Tuple[Slide, ...]
    metadata: Optional[Metadata] = None

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def __getitem__(self, index: int) -> Slide:
        return self.slides[index]


class Action(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"
    IGNORE = "ignore"
