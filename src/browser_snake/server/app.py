"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from browser_snake.config import GameConfig
from browser_snake.server.routes import router
from browser_snake.server.session import SessionManager
from browser_snake.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    app.state.session_manager = SessionManager(app.state.config)
    yield
    await app.state.session_manager.cleanup()


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Browser Snake", version="0.1.0", lifespan=_lifespan,
    )
    app.state.config = config if config is not None else GameConfig()
    app.include_router(router)
    app.include_router(ws_router)
    return app
