"""Browser Snake core game engine."""

from browser_snake.config import GameConfig
from browser_snake.engine import GameEngine
from browser_snake.grid import CellType, Grid
from browser_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "Grid",
    "Snake",
]
