"""Game states and the main menu layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .geometry import Rect

TITLE = "Arcade 16"
BUTTON_WIDTH = 200
BUTTON_HEIGHT = 50


class GameState(Enum):
    """Which screen is active."""

    MENU = auto()
    TETRIS = auto()
    ARKANOID = auto()
    SPACE_INVADERS = auto()
    PONG = auto()
    ASTEROIDS = auto()
    PACMAN = auto()
    SIMON = auto()
    SUPER_MARIO = auto()


@dataclass(frozen=True)
class MenuButton:
    """A labelled menu entry that switches to a game."""

    label: str
    state: GameState
    rect: Rect


_LAYOUT = (
    ("1.Tetris", GameState.TETRIS, 70, 90),
    ("2. Arkanoid", GameState.ARKANOID, 70, 170),
    ("3. Space Invaders", GameState.SPACE_INVADERS, 70, 250),
    ("4. Pong", GameState.PONG, 70, 330),
    ("5. Asteroids", GameState.ASTEROIDS, 300, 90),
    ("6.Pac Man", GameState.PACMAN, 300, 170),
    ("7.Simon", GameState.SIMON, 300, 250),
    ("8.Super Mario", GameState.SUPER_MARIO, 300, 330),
)


def menu_buttons() -> list[MenuButton]:
    """The menu buttons in display order."""
    return [
        MenuButton(label, state, Rect(x, y, BUTTON_WIDTH, BUTTON_HEIGHT))
        for label, state, x, y in _LAYOUT
    ]


def select_state(x: float, y: float) -> GameState | None:
    """The game chosen by a click at the given point, or None."""
    selected = None
    for button in menu_buttons():
        if button.rect.contains(x, y):
            selected = button.state
    return selected