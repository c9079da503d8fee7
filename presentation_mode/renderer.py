from __future__ import annotations

import shutil
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from logging_utils import get_logger

from .models import Metadata, Slide
from .themes import RGB, Theme, ThemeColors

logger = get_logger(__name__)

CLEAR_SCREEN = "\033[2J"
RESET = "\033[0m"

# Body starts this many rows below the top when a title bar is drawn.
TITLE_BAR_ROWS = 3


class RenderError(RuntimeError):
    """Drawing to the terminal failed."""


def goto(row: int, column: int = 1) -> str:
    return f"\033[{row};{column}H"


def fg(color: RGB) -> str:
    r, g, b = color
    return f"\033[38;2;{r};{g};{b}m"


def _default_size() -> Tuple[int, int]:
    size = shutil.get_terminal_size()
    return size.columns, size.lines


class TerminalRenderer:
    """Draw one slide per frame with ANSI escape sequences."""

    def __init__(
        self,
        theme: Theme = Theme.CATPPUCCIN_MOCHA,
        *,
        stream: Optional[TextIO] = None,
        size_provider: Optional[Callable[[], Tuple[int, int]]] = None,
        show_footer: bool = True,
    ) -> None:
        self.colors: ThemeColors = theme.colors()
        self.stream = stream if stream is not None else sys.stdout
        self.size_provider = size_provider or _default_size
        self.show_footer = show_footer
        self.metadata: Optional[Metadata] = None
        self.frames = 0

    def render(
        self,
        slide: Slide,
        metadata: Optional[Metadata] = None,
        position: Optional[Tuple[int, int]] = None,
    ) -> None:
        if metadata is not None:
            self.metadata = metadata
        width, height = self.size_provider()

        parts: List[str] = [CLEAR_SCREEN, goto(1)]
        first_row = 1
        if self.metadata is not None and self.metadata.title:
            parts.extend(self._title_bar(self.metadata, width))
            first_row = TITLE_BAR_ROWS + 1
        parts.extend(self._slide_lines(slide, first_row))
        if self.show_footer:
            parts.extend(self._footer(position, width, height))
        parts.append(RESET)

        try:
            self.stream.write("".join(parts))
            self.stream.flush()
        except (OSError, UnicodeError) as exc:
            raise RenderError(f"Failed to draw slide ({exc})") from exc
        self.frames += 1
        logger.debug("Rendered frame %d (%s)", self.frames, slide.header)

    def _title_bar(self, metadata: Metadata, width: int) -> List[str]:
        title = metadata.title or ""
        parts = [goto(1, _centered_column(title, width)), fg(self.colors.title), title, RESET]
        if metadata.subtitle:
            parts.extend(
                [
                    goto(2, _centered_column(metadata.subtitle, width)),
                    fg(self.colors.secondary),
                    metadata.subtitle,
                    RESET,
                ]
            )
        return parts

    def _slide_lines(self, slide: Slide, first_row: int) -> List[str]:
        lines = list(slide.lines)
        while lines and not lines[0].strip():
            lines.pop(0)

        parts: List[str] = []
        for offset, line in enumerate(lines):
            color = self.colors.primary if offset == 0 else self.colors.text
            parts.extend([goto(first_row + offset), fg(color), line, RESET])
        return parts

    def _footer(self, position: Optional[Tuple[int, int]], width: int, height: int) -> List[str]:
        parts: List[str] = []
        author = self.metadata.author if self.metadata else None
        if author:
            parts.extend([goto(height, 1), fg(self.colors.tertiary), author, RESET])
        if position is not None:
            counter = f"{position[0] + 1}/{position[1]}"
            parts.extend([goto(height, max(1, width - len(counter) + 1)), fg(self.colors.accent), counter, RESET])
        return parts


def _centered_column(text: str, width: int) -> int:
    return max(0, (width - len(text)) // 2) + 1
