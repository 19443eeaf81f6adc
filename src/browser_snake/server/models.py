"""Pydantic models for API response schemas."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class SessionStatus(str, enum.Enum):
    """Lifecycle states for a play session."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


class ConfigResponse(BaseModel):
    """Fixed game constants the client needs to draw the board."""

    grid_size: int
    tick_ms: int
    start: list[int]
    start_direction: str
    key_bindings: dict[str, str]


class LayoutResponse(BaseModel):
    """Cell sizing for a given viewport width."""

    viewport_width: int = Field(ge=1)
    grid_size: int
    cell_size: int


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    status: SessionStatus
    connected: bool
    ticking: bool
    length: int
    tick: int
