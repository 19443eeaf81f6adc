"""Snake representation and direction handling."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``y`` grows downward, so UP decrements ``y``.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction that would reverse straight back."""
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        cells: Iterable[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[tuple[int, int]] = deque(
            (int(x), int(y)) for x, y in cells
        )
        if not self.body:
            raise ValueError("Snake must have at least 1 segment.")
        self.direction = direction

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        Returns ``True`` when the direction was accepted.
        """
        if new_direction.opposite() == self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving or wrapping."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(
        self, new_head: tuple[int, int], grow: bool = False,
    ) -> tuple[int, int] | None:
        """Push *new_head* onto the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body
