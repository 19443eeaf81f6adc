"""Food placement logic."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Draws food positions uniformly over the whole grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Occupied cells are not excluded, so food can land under the snake.
    """

    def __init__(
        self,
        grid_size: int = 20,
        rng: np.random.Generator | None = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> tuple[int, int]:
        """Return a fresh position with x and y drawn independently."""
        x, y = self.rng.integers(0, self.grid_size, size=2)
        pos = (int(x), int(y))
        logger.debug("Food spawned at %s.", pos)
        return pos
