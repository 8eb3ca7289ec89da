"""Falling-block puzzle game logic."""

from __future__ import annotations

import random

ROWS, COLUMNS = 20, 10
START_X, START_Y = 5, 3
SHAPES = (
    (1, 3, 5, 7),  # I
    (3, 5, 7, 4),  # T
    (2, 3, 4, 5),  # O
    (2, 4, 5, 7),  # Z
    (3, 4, 5, 6),  # S
    (3, 5, 6, 7),  # J
    (2, 4, 6, 7),  # L
)
FALL_DELAY = 0.2
FAST_DELAY = 0.03
GROUND_DELAY = 0.7
LINE_SCORE = (90, 150)

Point = tuple[int, int]


class Tetris:
    """Playfield, falling piece and score.

    Piece cells are in screen cell coordinates: the playfield starts at
    column START_X and row START_Y.
    """

    def __init__(self, rng: random.Random | None = None, high_score: int = 0) -> None:
        self.rng = random.Random() if rng is None else rng
        self.field = [[0] * COLUMNS for _ in range(ROWS)]
        self.piece: list[Point] = []
        self._previous: list[Point] = []
        self.kind = 0
        self.score = 0
        self.high_score = high_score
        self.game_over = False
        self.fall = True
        self.timer = 0.0
        self.new_piece()

    def _cell(self, x: int, y: int) -> int:
        column, row = x - START_X, y - START_Y
        if not 0 <= column < COLUMNS or row >= ROWS:
            return 1
        if row < 0:
            return 0
        return self.field[row][column]

    def _shift(self, dx: int, dy: int) -> None:
        self.piece = [(x + dx, y + dy) for x, y in self.piece]

    def new_piece(self) -> None:
        """Spawn a random piece at the top centre."""
        self.kind = self.rng.randint(0, len(SHAPES) - 1)
        self.piece = [
            (n % 2 + START_X + (COLUMNS // 2 - 1), n // 2 + START_Y - 1)
            for n in SHAPES[self.kind]
        ]

    def check_border(self) -> None:
        """Keep the piece inside the walls, decide whether it can fall,
        and undo the last move if it ran into settled blocks."""
        for i in range(len(self.piece)):
            if self.piece[i][0] == COLUMNS + START_X:
                self._shift(-1, 0)
            if self.piece[i][0] < START_X:
                self._shift(1, 0)
            if self.piece[i][1] == ROWS - 1 + START_Y:
                self.fall = False

        for x, y in self.piece:
            if self._cell(x, y + 1) == 0:
                self.fall = True
            else:
                self.fall = False
                break

        if any(self._cell(x, y) for x, y in self.piece):
            self.piece = list(self._previous)

    def clear_lines(self) -> int:
        """Remove full rows from the bottom up, score them and return how many."""
        count = 0
        keep_going = True
        for _ in range(4):
            if not keep_going:
                break
            for y in range(ROWS - 1, 0, -1):
                if all(self.field[y]):
                    count += 1
                    keep_going = True
                    for f in range(y, 0, -1):
                        self.field[f] = list(self.field[f - 1])
                else:
                    keep_going = False

        self.score += self.rng.randint(*LINE_SCORE) * count
        if count == 4:
            self.score += self.rng.randint(*LINE_SCORE) * count
        return count

    def step(self, elapsed: float, dx: int = 0, rotate: bool = False, fast: bool = False) -> None:
        """Advance the game by the elapsed seconds with the given input."""
        if self.game_over:
            return
        self.timer += elapsed
        delay = FAST_DELAY if fast else FALL_DELAY
        self._previous = list(self.piece)

        if rotate:
            px, py = self.piece[1]
            self.piece = [(px - (y - py), py + (x - px)) for x, y in self.piece]
        if dx:
            self._shift(dx, 0)

        self.check_border()

        if self.timer > delay and self.fall:
            self._shift(0, 1)
            self.timer = 0.0
        elif self.timer > GROUND_DELAY:
            self.timer = 0.0
            self.fall = True
            for x, y in self.piece:
                row, column = y - START_Y, x - START_X
                if 0 <= row < ROWS and 0 <= column < COLUMNS:
                    self.field[row][column] = self.kind + 1
            self.clear_lines()
            self.new_piece()

        self.high_score = max(self.high_score, self.score)
        if any(self.field[0]):
            self.game_over = True

    def restart(self) -> None:
        """Clear the field and score after a game over."""
        self.game_over = False
        self.score = 0
        self.field = [[0] * COLUMNS for _ in range(ROWS)]
        self.timer = 0.0