"""Prompt and item formatting themes.

A theme turns prompt text and item names into display lines. ``SimpleTheme``
is plain text; ``ColorfulTheme`` decorates the same layout with an ANSI
palette. The renderer only calls the three ``format_*`` methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Theme(Protocol):
    """Formatting capability consumed by the renderer."""

    def format_select_prompt(self, prompt: str) -> str: ...

    def format_select_prompt_selection(self, prompt: str, selection: str) -> str: ...

    def format_select_prompt_item(self, text: str, active: bool) -> str: ...


class SimpleTheme:
    """Undecorated theme: ``prompt:`` and ``>``-marked items."""

    def format_select_prompt(self, prompt: str) -> str:
        return f"{prompt}:"

    def format_select_prompt_selection(self, prompt: str, selection: str) -> str:
        return f"{prompt}: {selection}"

    def format_select_prompt_item(self, text: str, active: bool) -> str:
        return f"{'>' if active else ' '} {text}"


@dataclass(frozen=True)
class ThemePalette:
    """Semantic ANSI palette used by ``ColorfulTheme``."""

    name: str
    reset: str
    prompt_prefix: str
    prompt: str
    prompt_suffix: str
    success_prefix: str
    selection: str
    active_item_prefix: str
    active_item: str
    inactive_item: str


DEFAULT_PALETTE = ThemePalette(
    name="default",
    reset="\033[0m",
    prompt_prefix="\033[38;5;214m",
    prompt="\033[1m",
    prompt_suffix="\033[2;38;5;250m",
    success_prefix="\033[38;5;42m",
    selection="\033[38;5;42m",
    active_item_prefix="\033[38;5;42m",
    active_item="\033[38;5;81m",
    inactive_item="",
)

OCEAN_PALETTE = ThemePalette(
    name="ocean",
    reset="\033[0m",
    prompt_prefix="\033[38;5;39m",
    prompt="\033[1;38;5;153m",
    prompt_suffix="\033[2;38;5;110m",
    success_prefix="\033[38;5;84m",
    selection="\033[38;5;117m",
    active_item_prefix="\033[38;5;45m",
    active_item="\033[1;38;5;45m",
    inactive_item="\033[38;5;252m",
)

_PALETTES: dict[str, ThemePalette] = {
    DEFAULT_PALETTE.name: DEFAULT_PALETTE,
    OCEAN_PALETTE.name: OCEAN_PALETTE,
}


class ColorfulTheme:
    """ANSI-colored theme with ``?``/``✔`` prompt markers and a ``❯`` cursor."""

    def __init__(self, palette: ThemePalette = DEFAULT_PALETTE) -> None:
        self.palette = palette

    def _paint(self, style: str, text: str) -> str:
        if not style:
            return text
        return f"{style}{text}{self.palette.reset}"

    def format_select_prompt(self, prompt: str) -> str:
        p = self.palette
        return f"{self._paint(p.prompt_prefix, '?')} {self._paint(p.prompt, prompt)} {self._paint(p.prompt_suffix, '›')}"

    def format_select_prompt_selection(self, prompt: str, selection: str) -> str:
        p = self.palette
        return (
            f"{self._paint(p.success_prefix, '✔')} {self._paint(p.prompt, prompt)} "
            f"{self._paint(p.prompt_suffix, '·')} {self._paint(p.selection, selection)}"
        )

    def format_select_prompt_item(self, text: str, active: bool) -> str:
        p = self.palette
        if active:
            return f"{self._paint(p.active_item_prefix, '❯')} {self._paint(p.active_item, text)}"
        return f"  {self._paint(p.inactive_item, text)}"


def available_theme_names() -> tuple[str, ...]:
    """Return selectable colorful palette names."""
    return tuple(sorted(_PALETTES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid palette name, falling back to default."""
    if not name:
        return DEFAULT_PALETTE.name
    candidate = str(name).strip().lower()
    if candidate in _PALETTES:
        return candidate
    return DEFAULT_PALETTE.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> Theme:
    """Return concrete theme for requested name and color mode."""
    if no_color or (name is not None and name.strip().lower() == "plain"):
        return SimpleTheme()
    return ColorfulTheme(_PALETTES[normalize_theme_name(name)])


__all__ = [
    "Theme",
    "SimpleTheme",
    "ThemePalette",
    "ColorfulTheme",
    "DEFAULT_PALETTE",
    "OCEAN_PALETTE",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
