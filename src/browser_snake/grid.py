"""Square toroidal grid for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed square grid whose edges wrap around.

    Coordinates are ``(x, y)`` pairs; the backing array is indexed
    ``cells[y, x]`` so that each row of the array is one screen row.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 1:
            raise ValueError("Grid size must be at least 1.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the grid edges."""
        return x % self.size, y % self.size

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def paint(
        self,
        snake_cells: Iterable[tuple[int, int]],
        food: tuple[int, int] | None,
    ) -> np.ndarray:
        """Repaint the whole grid from a snake body and a food cell.

        Snake cells are painted last so a body segment hides food that
        spawned underneath it.
        """
        self.clear()
        if food is not None:
            self.set(food[0], food[1], CellType.FOOD)
        for x, y in snake_cells:
            self.set(x, y, CellType.SNAKE)
        return self.cells

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "size": self.size,
            "cells": self.cells.tolist(),
        }
