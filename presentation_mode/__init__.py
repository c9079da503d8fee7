"""
Terminal presentation package.

Compiles a Markdown-like document into a deck of header-delimited slides and
drives an interactive, single-key slide viewer in the terminal.
"""

from __future__ import annotations

__all__ = [
    "parse_deck",
    "load_deck",
    "PresentationController",
]

from .deck_loader import load_deck, parse_deck
from .controller import PresentationController
