"""Slide navigation state machine.

The cursor is the only state: an index into the deck that ``next`` and
``previous`` move by one and saturate at both ends.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Optional, Protocol, Tuple

from logging_utils import get_logger

from .models import Action, Deck, Metadata, Slide

logger = get_logger(__name__)

DEFAULT_KEYMAP: Mapping[str, Action] = {
    "l": Action.NEXT,
    "h": Action.PREVIOUS,
    "q": Action.QUIT,
}


class SlideRenderer(Protocol):
    def render(
        self,
        slide: Slide,
        metadata: Optional[Metadata] = None,
        position: Optional[Tuple[int, int]] = None,
    ) -> None:
        ...


def resolve_action(key: str, keymap: Mapping[str, Action] = DEFAULT_KEYMAP) -> Action:
    return keymap.get(key, Action.IGNORE)


class PresentationController:
    def __init__(
        self,
        deck: Deck,
        renderer: SlideRenderer,
        keymap: Mapping[str, Action] = DEFAULT_KEYMAP,
    ) -> None:
        if len(deck) == 0:
            raise ValueError("Cannot present an empty deck")
        self.deck = deck
        self.renderer = renderer
        self.keymap = keymap
        self.cursor = 0
        self._started = False

    @property
    def slide_count(self) -> int:
        return len(self.deck)

    @property
    def current_slide(self) -> Slide:
        return self.deck[self.cursor]

    def start(self) -> None:
        """Draw the first slide together with the deck metadata."""
        self.cursor = 0
        self._render(metadata=self.deck.metadata)
        self._started = True

    def next(self) -> bool:
        return self._move_to(min(self.cursor + 1, self.slide_count - 1))

    def previous(self) -> bool:
        return self._move_to(max(self.cursor - 1, 0))

    def dispatch(self, key: str) -> bool:
        """Apply the action bound to ``key``; return False once the loop should stop."""
        action = resolve_action(key, self.keymap)
        if action is Action.QUIT:
            logger.info("Quit requested at slide %d/%d", self.cursor + 1, self.slide_count)
            return False
        if action is Action.NEXT:
            self.next()
        elif action is Action.PREVIOUS:
            self.previous()
        return True

    def run(self, keys: Iterable[str]) -> None:
        if not self._started:
            self.start()
        for key in keys:
            if not self.dispatch(key):
                return
        logger.info("Key source closed; leaving presentation")

    def _move_to(self, target: int) -> bool:
        if target == self.cursor:
            return False
        self.cursor = target
        self._render()
        return True

    def _render(self, metadata: Optional[Metadata] = None) -> None:
        self.renderer.render(
            self.current_slide,
            metadata=metadata,
            position=(self.cursor, self.slide_count),
        )
