# theme_manager.py
"""
Theme Manager - colour themes shared by the board and the history panel.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ThemeConfig:
    name: str
    background_color: RGB
    accent_color: RGB = (220, 170, 60)
    text_color: RGB = (30, 30, 30)
    board_color: RGB = (240, 200, 140)
    grid_color: RGB = (90, 90, 90)
    piece_x_color: RGB = (30, 30, 30)
    piece_o_color: RGB = (220, 170, 60)
    highlight_color: RGB = (120, 200, 120)
    button_color: RGB = (225, 225, 225)


DEFAULT_THEMES: Dict[str, ThemeConfig] = {
    "default": ThemeConfig(
        name="Default",
        background_color=(240, 240, 240),
    ),
    "dark": ThemeConfig(
        name="Dark Mode",
        background_color=(30, 30, 35),
        accent_color=(255, 200, 100),
        text_color=(240, 240, 245),
        board_color=(50, 50, 60),
        grid_color=(120, 120, 130),
        piece_x_color=(240, 240, 245),
        piece_o_color=(255, 200, 100),
        highlight_color=(70, 120, 70),
        button_color=(60, 60, 72),
    ),
    "ocean": ThemeConfig(
        name="Ocean",
        background_color=(230, 240, 250),
        accent_color=(70, 130, 220),
        text_color=(20, 50, 80),
        board_color=(200, 230, 250),
        grid_color=(100, 150, 200),
        piece_x_color=(20, 60, 100),
        piece_o_color=(70, 130, 220),
        highlight_color=(150, 220, 190),
        button_color=(210, 225, 240),
    ),
}


def theme_names() -> List[str]:
    return list(DEFAULT_THEMES)


def get_theme(name: str) -> ThemeConfig:
    theme = DEFAULT_THEMES.get(name)
    if theme is None:
        print(f"[ThemeManager] Unknown theme '{name}', using default")
        return DEFAULT_THEMES["default"]
    return theme


def next_theme_name(name: str) -> str:
    names = theme_names()
    if name not in names:
        return names[0]
    return names[(names.index(name) + 1) % len(names)]
