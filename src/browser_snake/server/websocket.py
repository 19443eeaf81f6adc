"""WebSocket handler for real-time play from a browser tab."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from browser_snake.controls import parse_message
from browser_snake.server.session import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/play")
async def play(websocket: WebSocket) -> None:
    """Open a session: send input messages, receive state each tick."""
    manager = _get_manager(websocket)
    try:
        session = manager.open_session()
    except ValueError as exc:
        await websocket.close(code=4029, reason=str(exc))
        return

    await websocket.accept()
    session.websocket = websocket
    session.connected = True

    try:
        # Send initial state snapshot so the client can draw immediately.
        await websocket.send_text(
            json.dumps(session.engine.get_state(), separators=(",", ":")),
        )
        manager.start(session)

        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue

            parsed = parse_message(msg)
            if parsed is None:
                logger.debug(
                    "Ignoring message in session %s: %r",
                    session.session_id, raw,
                )
                continue

            action, direction = parsed
            if action == "restart":
                await manager.restart(session)
            elif direction is not None:
                await manager.steer(session, direction)
    except WebSocketDisconnect:
        logger.info("Session %s disconnected.", session.session_id)
    finally:
        await manager.close_session(session.session_id)
