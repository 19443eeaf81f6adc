"""Game constants and the configuration dataclass built from them."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from browser_snake.snake import Direction

logger = logging.getLogger(__name__)

GRID_SIZE = 20
TICK_MS = 200
START_POSITION: tuple[int, int] = (10, 10)
START_DIRECTION = Direction.RIGHT


@dataclass(frozen=True)
class GameConfig:
    """Board and timing configuration for one play session.

    The defaults are the game's fixed constants. Overrides exist for
    seeded runs and tests. Supports JSON serialization.
    """

    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    start: tuple[int, int] = START_POSITION
    start_direction: str = START_DIRECTION.name
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive.")
        # JSON round-trips give a list; keep the field hashable.
        object.__setattr__(self, "start", tuple(self.start))
        if len(self.start) != 2:
            raise ValueError("start must be an (x, y) pair.")
        x, y = self.start
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError("start must lie inside the grid.")
        if self.start_direction not in Direction.__members__:
            raise ValueError(
                f"start_direction must be one of "
                f"{', '.join(Direction.__members__)}."
            )

    @property
    def direction(self) -> Direction:
        return Direction[self.start_direction]

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["start"] = list(self.start)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if "start" in raw:
            raw["start"] = tuple(raw["start"])
        return cls(**raw)
