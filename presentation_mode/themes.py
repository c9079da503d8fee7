"""Color palettes for the terminal renderer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

RGB = Tuple[int, int, int]


def hex_to_rgb(value: str) -> RGB:
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise ValueError(f"Expected 6-digit hex color, got: {value}")
    return tuple(int(text[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


@dataclass(frozen=True)
class Palette:
    text: RGB
    teal: RGB
    sky: RGB
    peach: RGB
    red: RGB
    green: RGB


@dataclass(frozen=True)
class ThemeColors:
    text: RGB
    primary: RGB
    secondary: RGB
    tertiary: RGB
    accent: RGB
    title: RGB


class Theme(str, Enum):
    CATPPUCCIN_LATTE = "catppuccin-latte"
    CATPPUCCIN_MOCHA = "catppuccin-mocha"
    ONE_DARK = "one-dark"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def palette(self) -> Palette:
        return _PALETTES[self]

    def colors(self) -> ThemeColors:
        palette = self.palette()
        return ThemeColors(
            text=palette.text,
            primary=palette.teal,
            secondary=palette.sky,
            tertiary=palette.green,
            accent=palette.green,
            title=palette.red,
        )


def _palette(**hex_values: str) -> Palette:
    return Palette(**{name: hex_to_rgb(value) for name, value in hex_values.items()})


_PALETTES: Dict[Theme, Palette] = {
    Theme.CATPPUCCIN_LATTE: _palette(
        text="#4c4f69",
        teal="#179299",
        sky="#04a5e5",
        peach="#fe640b",
        red="#d20f39",
        green="#40a02b",
    ),
    Theme.CATPPUCCIN_MOCHA: _palette(
        text="#cdd6f4",
        teal="#94e2d5",
        sky="#94e2d5",
        peach="#fab387",
        red="#f38ba8",
        green="#a6e3a1",
    ),
    Theme.ONE_DARK: _palette(
        text="#abb2bf",
        teal="#56b6c2",
        sky="#61afef",
        peach="#e5c07b",
        red="#e06c75",
        green="#98c379",
    ),
}

_DISPLAY_NAMES: Dict[Theme, str] = {
    Theme.CATPPUCCIN_LATTE: "Catppuccin Latte",
    Theme.CATPPUCCIN_MOCHA: "Catppuccin Mocha",
    Theme.ONE_DARK: "One Dark",
}


def get_theme(name: str) -> Theme:
    """Look up a theme by slug or display name, case-insensitively."""
    normalized = name.strip().lower().replace("_", "-").replace(" ", "-")
    for theme in Theme:
        if theme.value == normalized:
            return theme
    available = ", ".join(theme.value for theme in Theme)
    raise ValueError(f"Unknown theme '{name}' (available: {available})")
