"""Maze chase game: eat every pellet and avoid the ghosts."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .geometry import Rect
from .scores import HighScore

ORIGIN = (180.0, 20.0)
SPRITE_SIZE = 80.0
SPRITE_SCALE = 0.2
CELL = SPRITE_SIZE * 0.25
PAC_SPEED = 150.0
FRIGHT_DURATION = 5.0
PELLET_POINTS = 10
POWER_BONUS = 40
START_CELL = (10, 17)
PELLET_SIZE = 5.0
POWER_PELLET_SIZE = 8.0

# Corridor cells outside the maze and inside the ghost house hold no pellets.
NO_PELLET = frozenset({
    (0, 8), (1, 8), (2, 8), (0, 12), (1, 12), (2, 12),
    (16, 8), (17, 8), (18, 8), (16, 12), (17, 12), (18, 12),
    (8, 10), (9, 10), (10, 10),
})
POWER_CELLS = frozenset({(1, 2), (17, 2), (1, 19), (17, 19)})

# RGBA values of level pixels that are drawn as wall pieces.
WALL_COLORS = frozenset({
    (255, 255, 255, 255), (0, 0, 0, 255),
    (255, 255, 255, 254), (255, 255, 255, 253), (255, 255, 255, 252), (255, 255, 255, 251),
    (255, 0, 0, 255), (255, 0, 0, 253), (255, 1, 1, 253), (255, 0, 0, 252),
    (0, 0, 255, 255), (1, 1, 255, 255),
    (1, 1, 1, 1),
})

Vector = tuple[float, float]


class Direction(Enum):
    """Heading of the player, with its unit step and sprite rotation."""

    UP = (0, -1, 270)
    DOWN = (0, 1, 90)
    LEFT = (-1, 0, 180)
    RIGHT = (1, 0, 0)

    def __init__(self, dx: int, dy: int, rotation: int) -> None:
        self.dx = dx
        self.dy = dy
        self.rotation = rotation


@dataclass
class Pellet:
    """A pellet centred on a maze cell; power pellets frighten the ghosts."""

    x: float
    y: float
    power: bool = False

    @property
    def rect(self) -> Rect:
        if self.power:
            half = POWER_PELLET_SIZE * math.sqrt(2) / 2
        else:
            half = PELLET_SIZE / 2
        return Rect(self.x - half, self.y - half, 2 * half, 2 * half)


def _is_wall(cell: object) -> bool:
    if isinstance(cell, str):
        return cell == "#"
    return tuple(cell) in WALL_COLORS


def _cell_rect(x: int, y: int) -> Rect:
    return Rect(x * CELL + ORIGIN[0], y * CELL + ORIGIN[1], CELL, CELL)


class PacMan:
    """Maze, player, pellets and score.

    ``level`` is a sequence of rows; a cell is a wall if it is the
    character ``"#"`` or one of the RGBA tuples in ``WALL_COLORS``.
    Ghost bodies are placed in ``ghosts`` by name; those eaten while
    frightened are collected in ``eaten``.
    """

    def __init__(self, level: Sequence[Sequence[object]], highscore: HighScore | None = None) -> None:
        self.level = [list(row) for row in level]
        self.highscore = HighScore() if highscore is None else highscore
        self.direction: Direction | None = None
        self.rotation = 0
        self.score = 0
        self.game_over = False
        self.frightened = False
        self.fright_time = 0.0
        self.ghosts: dict[str, Rect] = {}
        self.eaten: set[str] = set()
        self.walls: list[Rect] = []
        self.pellets: list[Pellet] = []
        self.position: Vector = (0.0, 0.0)
        self.restart()

    @property
    def rect(self) -> Rect:
        """Bounds of the player's sprite."""
        side = SPRITE_SIZE * SPRITE_SCALE
        x, y = self.position
        return Rect(x - side / 2, y - side / 2, side, side)

    def _hit_rect(self) -> Rect:
        side = SPRITE_SIZE * SPRITE_SCALE
        x, y = self.position
        return Rect(x - side / 2, y - side / 2, side - 2, side - 2)

    def restart(self) -> None:
        """Rebuild the maze and pellets and put the player at the start."""
        self.walls = []
        self.pellets = []
        for y, row in enumerate(self.level):
            for x, cell in enumerate(row):
                if _is_wall(cell):
                    self.walls.append(_cell_rect(x, y))
                elif (x, y) not in NO_PELLET:
                    self.pellets.append(
                        Pellet(
                            x * CELL + ORIGIN[0] + CELL / 2,
                            y * CELL + ORIGIN[1] + CELL / 2,
                            (x, y) in POWER_CELLS,
                        )
                    )
        self.position = (
            START_CELL[0] * CELL - CELL / 2 + ORIGIN[0],
            START_CELL[1] * CELL - CELL / 2 + ORIGIN[1],
        )
        self.eaten.clear()
        self.game_over = False
        self.score = 0

    def steer(self, direction: Direction) -> None:
        """Change the heading; the player keeps moving that way."""
        self.direction = direction

    def step(self, delta: float) -> None:
        """Advance the game by ``delta`` seconds."""
        self.highscore.update(self.score)
        if self.game_over:
            return

        if self.frightened:
            self.fright_time += delta
            if self.fright_time > FRIGHT_DURATION:
                self.frightened = False
        else:
            self.fright_time = 0.0

        previous = self.position
        if self.direction is not None:
            x, y = self.position
            distance = PAC_SPEED * delta
            self.position = (x + self.direction.dx * distance, y + self.direction.dy * distance)
            self.rotation = self.direction.rotation

        hit = self._hit_rect()
        if any(wall.intersects(hit) for wall in self.walls):
            self.position = previous

        body = self.rect
        touching = [name for name, ghost in self.ghosts.items() if body.intersects(ghost)]
        if self.frightened:
            self.eaten.update(touching)
        elif any(name not in self.eaten for name in touching):
            self.game_over = True

        remaining = []
        for pellet in self.pellets:
            if not body.intersects(pellet.rect):
                remaining.append(pellet)
                continue
            if pellet.power:
                self.frightened = True
                self.fright_time = 0.0
                self.score += POWER_BONUS
            self.score += PELLET_POINTS
        self.pellets = remaining