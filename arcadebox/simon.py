"""Colour memory game: repeat the growing sequence shown by the boxes."""

from __future__ import annotations

import random

from .geometry import Rect
from .scores import HighScore

DIM = 0.7
BRIGHT = 3.0
FADE_STEP = 0.05
BOX_SIZE = (200, 200)
ORIGIN = (100, 40)
DEMO_DELAY = 0.9
BOX_COLORS = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
)

Color = tuple[int, int, int]


class SimonBox:
    """One coloured box that lights up and slowly dims back."""

    def __init__(self, rect: Rect, color: Color) -> None:
        self.rect = rect
        self.base = tuple(channel * DIM for channel in color)
        self.color: Color = tuple(int(channel) for channel in self.base)

    def brighten(self) -> None:
        """Light the box up."""
        self.color = tuple(int(min(255.0, channel * BRIGHT)) for channel in self.base)

    def fade(self) -> None:
        """Dim each channel one step toward its resting value."""
        self.color = tuple(
            int(channel - FADE_STEP) if channel > rest else channel
            for channel, rest in zip(self.color, self.base)
        )


class Simon:
    """Sequence, player moves and score."""

    def __init__(self, rng: random.Random | None = None, highscore: HighScore | None = None) -> None:
        self.rng = random.Random() if rng is None else rng
        self.highscore = HighScore() if highscore is None else highscore
        width, height = BOX_SIZE
        self.boxes = [
            SimonBox(
                Rect(ORIGIN[0] + width * (i % 2), ORIGIN[1] + height * (i // 2), width, height),
                color,
            )
            for i, color in enumerate(BOX_COLORS)
        ]
        self.instructions: list[int] = []
        self.moves: list[int] = []
        self.score = 0
        self.demonstrating = True
        self.index = 0
        self.timer = 0.0
        self.add_instruction()

    def add_instruction(self, reset: bool = False) -> None:
        """Append a random box to the sequence, first clearing it if asked."""
        if reset:
            self.instructions.clear()
        self.instructions.append(self.rng.randint(0, len(self.boxes) - 1))

    def box_at(self, x: float, y: float) -> int | None:
        """Index of the box under the point, or None."""
        for index, box in enumerate(self.boxes):
            if box.rect.contains(x, y):
                return index
        return None

    def press(self, index: int) -> bool | None:
        """Play a box.

        Returns None while the sequence is being shown, True for a correct
        move and False for a wrong one, which restarts the game.
        """
        if self.demonstrating:
            return None
        self.boxes[index].brighten()
        self.moves.append(index)
        expected = self.instructions[len(self.moves) - 1]
        if len(self.moves) == len(self.instructions) and index == expected:
            self.score += 1
            self.add_instruction()
            self.moves.clear()
            self.demonstrating = True
            return True
        if index != expected:
            self.score = 0
            self.demonstrating = True
            self.add_instruction(reset=True)
            self.moves.clear()
            return False
        return True

    def tick(self, elapsed: float) -> int | None:
        """Advance time; return the box lit by the demonstration, if any."""
        self.highscore.update(self.score)
        for box in self.boxes:
            box.fade()

        if not self.demonstrating:
            self.timer = 0.0
            return None

        self.timer += elapsed
        if self.timer <= DEMO_DELAY:
            return None
        self.timer = 0.0
        shown = self.instructions[self.index]
        self.boxes[shown].brighten()
        if self.index + 1 == len(self.instructions):
            self.demonstrating = False
            self.index = 0
        else:
            self.index += 1
        return shown