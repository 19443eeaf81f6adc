"""Viewport-dependent cell sizing for the browser grid."""

from __future__ import annotations

from browser_snake.config import GRID_SIZE

DEFAULT_VIEWPORT_WIDTH = 1024
NARROW_VIEWPORT = 500
DEFAULT_CELL_PX = 20


def cell_size(viewport_width: int | None, grid_size: int = GRID_SIZE) -> int:
    """Return the pixel size of one grid cell for a viewport width.

    Narrow screens shrink cells so the whole grid fits; everything else
    uses the default size. Never returns less than one pixel.
    """
    width = DEFAULT_VIEWPORT_WIDTH if viewport_width is None else viewport_width
    if width < NARROW_VIEWPORT:
        return max(1, width // grid_size - 2)
    return DEFAULT_CELL_PX
