"""REST route handlers: the game page, constants, layout, sessions."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from browser_snake.controls import KEY_BINDINGS
from browser_snake.layout import DEFAULT_VIEWPORT_WIDTH, cell_size
from browser_snake.server.models import (
    ConfigResponse,
    LayoutResponse,
    SessionSummary,
)

_PAGE_PATH = Path(__file__).parent / "static" / "index.html"

router = APIRouter()


def _get_manager(request: Request):
    return request.app.state.session_manager


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    """Serve the single-page game client."""
    return HTMLResponse(_PAGE_PATH.read_text(encoding="utf-8"))


@router.get("/config", tags=["game"])
async def get_config(request: Request) -> ConfigResponse:
    """Return the board constants used by the client."""
    config = _get_manager(request).config
    return ConfigResponse(
        grid_size=config.grid_size,
        tick_ms=config.tick_ms,
        start=list(config.start),
        start_direction=config.start_direction,
        key_bindings={k: d.name for k, d in KEY_BINDINGS.items()},
    )


@router.get("/layout", tags=["game"])
async def get_layout(
    request: Request,
    width: int = Query(default=DEFAULT_VIEWPORT_WIDTH, ge=1),
) -> LayoutResponse:
    """Compute the per-cell pixel size for a viewport width."""
    grid_size = _get_manager(request).config.grid_size
    return LayoutResponse(
        viewport_width=width,
        grid_size=grid_size,
        cell_size=cell_size(width, grid_size),
    )


@router.get("/sessions", tags=["sessions"])
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List live play sessions."""
    return _get_manager(request).list_sessions()


@router.get("/sessions/{session_id}", tags=["sessions"])
async def get_session(session_id: str, request: Request) -> dict:
    """Get a session's summary and its current game state."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    result = session.summary().model_dump(mode="json")
    result["state"] = session.engine.get_state()
    return result
