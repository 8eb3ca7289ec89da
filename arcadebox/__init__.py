"""Game rules and frame-by-frame simulation for a collection of classic arcade games."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "states",
    "scores",
    "tetris",
    "simon",
    "pong",
    "shield",
    "space_invaders",
    "pacman",
    "mario",
    "level",
]