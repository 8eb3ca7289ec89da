"""Side-scrolling level built column by column from a pixel map."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Rect

BOXES, BLOCKS, COINS, ENEMIES, MARIO = "boxes", "blocks", "coins", "enemies", "mario"
OFFSET = (0.0, 20.0)
BLOCK_TEXTURE = (16.0, 16.0)
ENEMY_SIZES = ((16.0, 16.0), (16.0, 24.0))
MARIO_LIFT = 100
FIRST_COLUMN = -7
LOOKAHEAD = 7

Color = tuple[int, int, int, int]
Vector = tuple[float, float]


class BlockType(Enum):
    """What a level tile is."""

    GROUND = auto()
    BRICK = auto()
    SHINE = auto()
    MYSTERY = auto()
    COIN = auto()
    PIPE_TOP_LEFT = auto()
    PIPE_TOP_RIGHT = auto()
    PIPE_LEFT = auto()
    PIPE_RIGHT = auto()
    CLOUD1 = auto()
    GRASS1 = auto()
    CLOUD2 = auto()
    HILL1 = auto()
    GRASS2 = auto()
    CLOUD3 = auto()
    GRASS3 = auto()
    HILL2 = auto()


@dataclass(frozen=True)
class _Placement:
    layer: str
    kind: BlockType | None = None
    entity: int = 0
    span: Vector = (1.0, 1.0)
    texture: Vector = BLOCK_TEXTURE
    lift: float = 0.0
    enemy_type: int = 0


def _solid(kind: BlockType, entity: int = 0) -> _Placement:
    return _Placement(BOXES, kind, entity)


def _visual(kind: BlockType, span: Vector, texture: Vector, lift: float = 0.0) -> _Placement:
    return _Placement(BLOCKS, kind, span=span, texture=texture, lift=lift)


_PIXELS: dict[Color, _Placement] = {
    (0, 0, 0, 255): _solid(BlockType.GROUND),
    (0, 0, 0, 254): _Placement(BLOCKS, BlockType.GROUND),
    (0, 0, 255, 255): _solid(BlockType.BRICK),
    (75, 0, 255, 255): _solid(BlockType.MYSTERY, 1),
    (80, 0, 255, 255): _solid(BlockType.MYSTERY, 2),
    (128, 128, 128, 255): _solid(BlockType.SHINE),
    (255, 255, 0, 255): _Placement(COINS, BlockType.COIN),
    (255, 0, 0, 255): _Placement(MARIO),
    (0, 255, 255, 255): _solid(BlockType.PIPE_TOP_LEFT),
    (0, 254, 255, 255): _solid(BlockType.PIPE_TOP_RIGHT),
    (0, 255, 254, 255): _solid(BlockType.PIPE_LEFT),
    (0, 254, 254, 255): _solid(BlockType.PIPE_RIGHT),
    (0, 255, 0, 255): _Placement(ENEMIES, enemy_type=0),
    (0, 128, 0, 255): _Placement(ENEMIES, span=(1.0, 1.5), enemy_type=1),
    (255, 0, 255, 255): _visual(BlockType.CLOUD1, (2.0, 1.5), (32.0, 24.0)),
    (128, 0, 255, 255): _visual(BlockType.GRASS1, (2.0, 1.5), (32.0, 24.0)),
    (200, 0, 200, 255): _visual(BlockType.CLOUD2, (3.0, 1.5), (48.0, 24.0)),
    (100, 0, 230, 255): _visual(BlockType.HILL1, (3.0, 1.5), (48.0, 24.0)),
    (130, 0, 200, 255): _visual(BlockType.GRASS2, (3.0, 1.5), (48.0, 24.0)),
    (150, 0, 150, 255): _visual(BlockType.CLOUD3, (4.0, 1.5), (64.0, 24.0)),
    (100, 0, 200, 255): _visual(BlockType.GRASS3, (4.0, 1.5), (64.0, 24.0)),
    (50, 0, 50, 255): _visual(BlockType.HILL2, (5.0, 2.1875), (80.0, 35.0), lift=1.18),
}


def _rgba(color: Sequence[int]) -> Color:
    values = tuple(int(c) for c in color)
    if len(values) == 3:
        values += (255,)
    if len(values) != 4:
        raise ValueError(f"expected an RGB or RGBA colour, got {color!r}")
    return values  # type: ignore[return-value]


def classify_pixel(color: Sequence[int]) -> _Placement | None:
    """What a level pixel places in the world, or None for empty pixels."""
    return _PIXELS.get(_rgba(color))


@dataclass
class _Tile:
    x: float
    y: float
    width: float
    height: float
    kind: BlockType
    entity: int = 0
    texture: Vector = BLOCK_TEXTURE

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class _EnemySpawn:
    x: float
    y: float
    width: float
    height: float
    size: Vector
    type: int = 0
    alive: bool = True

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class World:
    """Tiles, enemies and the player's start loaded from a level map.

    ``level`` is a sequence of rows of RGB or RGBA colours; each row is one
    tile high.  Solid tiles go to ``boxes``, scenery to ``blocks``,
    collectable coins to ``coins`` and enemies to ``enemies``.
    """

    def __init__(self, level: Sequence[Sequence[Sequence[int]]], offset: Vector = OFFSET) -> None:
        self.level = [[_rgba(c) for c in row] for row in level]
        if not self.level or not self.level[0]:
            raise ValueError("level map is empty")
        width = len(self.level[0])
        if any(len(row) != width for row in self.level):
            raise ValueError("level rows differ in length")
        side = SCREEN_HEIGHT // len(self.level)
        if side <= 0:
            raise ValueError("level map is taller than the screen")
        self.tile: Vector = (float(side), float(side))
        self.offset = offset
        self.boxes: list[_Tile] = []
        self.blocks: list[_Tile] = []
        self.coins: list[_Tile] = []
        self.enemies: list[_EnemySpawn] = []
        self.mario_start: Vector | None = None
        self.first_x = FIRST_COLUMN
        self.last_x = int(SCREEN_WIDTH / self.tile[0]) + LOOKAHEAD
        self.load_world(0, self.last_x, False)
        self.last_x -= 1

    @property
    def width(self) -> int:
        return len(self.level[0])

    @property
    def height(self) -> int:
        return len(self.level)

    def load_world(self, start: int, end: int = 0, plus: bool = True) -> None:
        """Place the contents of columns ``start`` to ``end`` (exclusive).

        With ``plus`` only the single column ``start`` is loaded.  Columns
        past the right edge of the map are empty.
        """
        if start < 0:
            raise ValueError("start column must not be negative")
        if plus:
            end = start + 1
        sx, sy = int(self.tile[0]), int(self.tile[1])
        ox, oy = self.offset
        for x in range(start, min(end, self.width)):
            for y in range(self.height):
                placement = classify_pixel(self.level[y][x])
                if placement is None:
                    continue
                px, py = x * sx + ox, y * sy + oy
                if placement.layer == MARIO:
                    self.mario_start = (px, py - MARIO_LIFT)
                    continue
                width, height = sx * placement.span[0], sy * placement.span[1]
                if placement.layer == ENEMIES:
                    self.enemies.append(
                        _EnemySpawn(
                            px, py, width, height,
                            ENEMY_SIZES[placement.enemy_type], placement.enemy_type,
                        )
                    )
                    continue
                tile = _Tile(
                    px,
                    py - placement.lift * sy,
                    width,
                    height,
                    placement.kind,
                    placement.entity,
                    placement.texture,
                )
                {BOXES: self.boxes, BLOCKS: self.blocks, COINS: self.coins}[placement.layer].append(tile)

    def delete_world(self) -> None:
        """Drop everything that has scrolled into the column ``first_x``."""
        sx = int(self.tile[0])

        def gone(item: _Tile | _EnemySpawn) -> bool:
            return math.floor(item.x / sx) == self.first_x

        self.boxes = [t for t in self.boxes if not gone(t)]
        self.blocks = [t for t in self.blocks if not gone(t)]
        self.coins = [t for t in self.coins if not gone(t)]
        self.enemies = [e for e in self.enemies if not gone(e)]