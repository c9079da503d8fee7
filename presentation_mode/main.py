from __future__ import annotations

import argparse
import sys
from pathlib import Path

from config_loader import load_config
from logging_utils import configure_logging, get_logger

from .controller import PresentationController
from .deck_loader import DeckError, load_deck
from .renderer import RenderError, TerminalRenderer
from .terminal import TerminalError, raw_terminal, read_keys
from .themes import Theme, get_theme

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_DISPLAY_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Present a Markdown slide deck in the terminal (l: next, h: previous, q: quit)"
    )
    parser.add_argument("document", nargs="?", help="Path to the Markdown presentation file")
    parser.add_argument(
        "--config",
        help="Path to YAML configuration (default: ./config.yaml when present)",
    )
    parser.add_argument(
        "--theme",
        help="Color theme override (catppuccin-latte, catppuccin-mocha, one-dark)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level override (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="Print the available themes and exit",
    )
    return parser


def _fail(message: str, code: int) -> int:
    print(message, file=sys.stderr)
    return code


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_themes:
        for theme in Theme:
            print(f"{theme.value}\t{theme.display_name}")
        return EXIT_OK
    if not args.document:
        parser.error("the following arguments are required: document")

    try:
        config = load_config(args.config)
        theme = get_theme(args.theme or config.theme_name)
    except (OSError, ValueError) as exc:
        return _fail(f"Configuration error: {exc}", EXIT_INPUT_ERROR)

    try:
        configure_logging(
            level=args.log_level or config.logging_level,
            log_file=config.log_file,
            console=False,
        )
    except OSError as exc:
        return _fail(f"Cannot open log file {config.log_file}: {exc}", EXIT_INPUT_ERROR)
    logger.debug("Effective config: %s", config.dumps())

    try:
        deck = load_deck(args.document)
    except DeckError as exc:
        logger.error("Cannot build deck: %s", exc)
        return _fail(f"Error: {exc}", EXIT_INPUT_ERROR)

    renderer = TerminalRenderer(theme, show_footer=config.show_footer)
    controller = PresentationController(deck, renderer)
    logger.info(
        "Presenting %s (%d slides, theme: %s)",
        Path(args.document).name,
        len(deck),
        theme.display_name,
    )

    try:
        with raw_terminal() as fd:
            controller.run(read_keys(fd))
    except TerminalError as exc:
        logger.error("%s", exc)
        return _fail(f"Error: {exc}", EXIT_DISPLAY_ERROR)
    except RenderError as exc:
        logger.error("Display failure: %s", exc)
        return _fail(f"Error: {exc}", EXIT_DISPLAY_ERROR)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
