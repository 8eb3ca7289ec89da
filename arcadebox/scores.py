"""High scores kept in small text files."""

from __future__ import annotations

import os
from pathlib import Path

PathLike = str | os.PathLike


def read_highscore(path: PathLike) -> int:
    """Read the score stored on the first line of a file.

    Raises OSError if the file cannot be read and ValueError if the line
    holds no number.
    """
    with open(path, encoding="utf-8") as handle:
        line = handle.readline()
    return int(line.strip())


def write_highscore(path: PathLike, value: int) -> None:
    """Replace the file's contents with the given score."""
    Path(path).write_text(str(value), encoding="utf-8")


class HighScore:
    """The best score so far, optionally persisted to a file."""

    def __init__(self, path: PathLike | None = None, value: int | None = None) -> None:
        self.path = path
        if value is None:
            value = read_highscore(path) if path is not None else 0
        self.value = value

    def update(self, score: int) -> bool:
        """Record the score if it beats the best; return whether it did."""
        if score <= self.value:
            return False
        self.value = score
        if self.path is not None:
            write_highscore(self.path, score)
        return True