"""Destructible pixel shields that protect the cannon."""

from __future__ import annotations

import math
import random
from enum import Enum, auto

from .geometry import Rect

SECTION_SIZE = 20
SPREAD = 7

Vector = tuple[float, float]


class SectionType(Enum):
    """Shape of a shield section."""

    BLOCK = auto()
    DOWN_LEFT = auto()
    TOP_RIGHT = auto()
    DOWN_RIGHT = auto()
    TOP_LEFT = auto()


def _solid(kind: SectionType, x: int, y: int) -> bool:
    if kind is SectionType.BLOCK:
        return True
    if kind is SectionType.DOWN_LEFT:
        return x <= y
    if kind is SectionType.TOP_RIGHT:
        return x >= y
    if kind is SectionType.DOWN_RIGHT:
        return x - SECTION_SIZE > -y
    return -x > y - SECTION_SIZE


class ShieldSection:
    """A 20 by 20 grid of pixels that bullets chip away."""

    def __init__(
        self,
        kind: SectionType,
        x: float,
        y: float,
        rng: random.Random | None = None,
        ident: int = 0,
    ) -> None:
        self.kind = kind
        self.rect = Rect(x, y, SECTION_SIZE, SECTION_SIZE)
        self.rng = random.Random() if rng is None else rng
        self.ident = ident
        self.pixels = [
            [_solid(kind, px, py) for px in range(SECTION_SIZE)]
            for py in range(SECTION_SIZE)
        ]

    def is_solid(self, x: int, y: int) -> bool:
        """Whether the pixel at local coordinates is still standing."""
        if not (0 <= x < SECTION_SIZE and 0 <= y < SECTION_SIZE):
            return False
        return self.pixels[y][x]

    def solid_count(self) -> int:
        return sum(sum(row) for row in self.pixels)

    def _first_contact(self, pos: Vector, size: Vector) -> tuple[int, int] | None:
        ox, oy = int(self.rect.x), int(self.rect.y)
        bx, by = int(pos[0]), int(pos[1])
        for dx in range(math.ceil(size[0])):
            for dy in range(math.ceil(size[1])):
                col, row = bx + dx - ox, by + dy - oy
                if self.is_solid(col, row):
                    return col, row
        return None

    def hit(self, pos: Vector, size: Vector) -> bool:
        """Blast a hole where a bullet touches the section; return whether it did."""
        contact = self._first_contact(pos, size)
        if contact is None:
            return False
        hx, hy = contact
        self.pixels[hy][hx] = False

        for fx in range(math.ceil(size[0])):
            for fy in range(math.ceil(size[1])):
                col, row = hx + fx, hy + fy
                if row >= SECTION_SIZE or col >= SECTION_SIZE:
                    continue
                self.pixels[row][col] = False
                for i in range(SPREAD):
                    threshold = i * (1 / SPREAD)
                    if self.rng.random() > threshold and col + i < SECTION_SIZE:
                        self.pixels[row][col + i] = False
                    if self.rng.random() > threshold and 0 <= hx - i < SECTION_SIZE:
                        self.pixels[row][hx - i] = False
                    if self.rng.random() > threshold and hy + i < SECTION_SIZE:
                        self.pixels[row][hx] = False
        return True


_LAYOUT = (
    (SectionType.DOWN_RIGHT, 0, 0),
    (SectionType.BLOCK, 1, 0),
    (SectionType.BLOCK, 2, 0),
    (SectionType.DOWN_LEFT, 3, 0),
    *((SectionType.BLOCK, i % 4, i // 4) for i in range(4, 12)),
    (SectionType.BLOCK, 0, 3),
    (SectionType.TOP_LEFT, 1, 3),
    (SectionType.TOP_RIGHT, 2, 3),
    (SectionType.BLOCK, 3, 3),
)


class Shield:
    """Four by four sections forming an arch."""

    def __init__(self, x: float, y: float, rng: random.Random | None = None) -> None:
        rng = random.Random() if rng is None else rng
        self.parts = [
            ShieldSection(kind, x + col * SECTION_SIZE, y + row * SECTION_SIZE, rng, ident)
            for ident, (kind, col, row) in enumerate(_LAYOUT)
        ]
        self.rect = Rect(x, y, SECTION_SIZE * 4, SECTION_SIZE * 4)

    def solid_count(self) -> int:
        """Number of pixels still standing."""
        return sum(part.solid_count() for part in self.parts)