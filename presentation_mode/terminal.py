"""Raw-mode terminal handling for the interactive presenter."""
from __future__ import annotations

import os
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from logging_utils import get_logger

logger = get_logger(__name__)

ENTER_ALT_SCREEN = "\033[?1049h"
LEAVE_ALT_SCREEN = "\033[?1049l"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

READ_CHUNK = 32


class TerminalError(RuntimeError):
    """Standard input is not an interactive terminal."""


@contextmanager
def raw_terminal(fd: Optional[int] = None, stream: Optional[TextIO] = None) -> Iterator[int]:
    """Put the terminal into raw mode on the alternate screen.

    Saved attributes are restored and the primary screen is brought back on
    every exit path, including exceptions raised inside the block.
    """
    if fd is None:
        try:
            fd = sys.stdin.fileno()
        except (AttributeError, ValueError) as exc:
            raise TerminalError("Standard input has no file descriptor") from exc
    stream = sys.stdout if stream is None else stream
    if not os.isatty(fd):
        raise TerminalError("Standard input is not a terminal")

    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        stream.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        stream.flush()
        logger.debug("Terminal switched to raw mode")
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        stream.write(SHOW_CURSOR + LEAVE_ALT_SCREEN)
        stream.flush()
        logger.debug("Terminal restored")


def read_keys(fd: int) -> Iterator[str]:
    """Yield key presses read from ``fd`` until end of input."""
    while True:
        chunk = os.read(fd, READ_CHUNK)
        if not chunk:
            logger.debug("Key source reached end of input")
            return
        # Fast typing can deliver several keys in one read.
        yield from chunk.decode("utf-8", errors="replace")
