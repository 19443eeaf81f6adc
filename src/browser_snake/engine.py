"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging

import numpy as np

from browser_snake.config import GameConfig
from browser_snake.food import FoodSpawner
from browser_snake.grid import Grid
from browser_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake engine on a wrapping grid.

    The engine owns the snake, the food cell and the game-over flag.
    State only changes through :meth:`reset`, :meth:`spawn_food`,
    :meth:`set_direction` and :meth:`tick`; the latter two are no-ops
    once the game is over. :meth:`tick` and :meth:`reset` return the
    updated state dictionary for the caller to render.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(size=self.config.grid_size)
        self.rng = np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(self.config.grid_size, rng=self.rng)

        self.snake = Snake([self.config.start], self.config.direction)
        self.food: tuple[int, int] = (0, 0)
        self.game_over = False
        self.tick_count = 0
        self.reset()

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    def reset(self) -> dict:
        """Start a fresh game from the configured start cell."""
        self.snake = Snake([self.config.start], self.config.direction)
        self.game_over = False
        self.tick_count = 0
        self.food = self.spawn_food()
        logger.info("Game reset; food at %s.", self.food)
        return self.get_state()

    def spawn_food(self) -> tuple[int, int]:
        """Draw a new food position anywhere on the grid."""
        return self.food_spawner.spawn()

    def set_direction(self, requested: object) -> bool:
        """Steer the snake, ignoring reversals and non-directions.

        Returns ``True`` when the direction actually changed.
        """
        if self.game_over:
            return False
        if not isinstance(requested, Direction):
            logger.debug("Ignoring invalid direction %r.", requested)
            return False
        if requested == self.snake.direction:
            return False
        return self.snake.set_direction(requested)

    def tick(self) -> dict:
        """Advance the game by one step.

        Returns the full game state as a serializable dict.
        """
        if self.game_over:
            return self.get_state()

        next_x, next_y = self.grid.wrap(*self.snake.next_head())

        # Checked against the pre-move body, tail included.
        if self.snake.occupies(next_x, next_y):
            self.game_over = True
            self.tick_count += 1
            logger.info(
                "Snake collided with itself at tick %d (length %d).",
                self.tick_count, len(self.snake),
            )
            return self.get_state()

        ate = (next_x, next_y) == self.food
        self.snake.advance((next_x, next_y), grow=ate)
        if ate:
            self.food = self.spawn_food()

        self.tick_count += 1
        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        self.grid.paint(self.snake.body, self.food)
        return {
            "tick": self.tick_count,
            "game_over": self.game_over,
            "direction": self.snake.direction.name,
            "length": len(self.snake),
            "snake": [list(seg) for seg in self.snake.body],
            "food": list(self.food),
            "grid": self.grid.to_dict(),
        }
