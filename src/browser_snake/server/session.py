"""Per-tab play sessions, their tick loops, and the session registry."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from browser_snake.config import GameConfig
from browser_snake.engine import GameEngine
from browser_snake.server.models import SessionStatus, SessionSummary
from browser_snake.snake import Direction

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class GameSession:
    """One browser tab's game: an engine plus the timer driving it."""

    session_id: str
    engine: GameEngine
    websocket: WebSocket | None = None
    connected: bool = False
    created_at: float = field(default_factory=time.monotonic)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def ticking(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def status(self) -> SessionStatus:
        if self.engine.game_over:
            return SessionStatus.GAME_OVER
        return SessionStatus.PLAYING

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            status=self.status,
            connected=self.connected,
            ticking=self.ticking,
            length=len(self.engine.snake),
            tick=self.engine.tick_count,
        )


class SessionManager:
    """Central registry owning every live play session.

    Each session's engine is only mutated through this manager, under the
    session lock, from the single event loop.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        max_sessions: int = _MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self.config = config if config is not None else GameConfig()
        self._sessions: dict[str, GameSession] = {}
        self._max_sessions = max_sessions

    def open_session(self) -> GameSession:
        """Create a session with a freshly reset engine."""
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Too many active sessions. Try again later.")
        session_id = uuid.uuid4().hex[:12]
        session = GameSession(
            session_id=session_id, engine=GameEngine(self.config),
        )
        self._sessions[session_id] = session
        logger.info("Session %s opened.", session_id)
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    def start(self, session: GameSession) -> None:
        """Arm the periodic tick task unless one is already running."""
        if session.ticking or session.engine.game_over:
            return
        session._task = asyncio.create_task(self._tick_loop(session))

    async def steer(self, session: GameSession, direction: Direction) -> bool:
        """Apply a direction change; it takes effect on the next tick."""
        async with session.lock:
            changed = session.engine.set_direction(direction)
            state = session.engine.get_state() if changed else None
        if state is not None:
            await self._send(session, state)
        return changed

    async def restart(self, session: GameSession) -> dict:
        """Tear down the current timer, reset the engine and re-arm."""
        await self._disarm(session)
        async with session.lock:
            state = session.engine.reset()
        logger.info("Session %s restarted.", session.session_id)
        await self._send(session, state)
        self.start(session)
        return state

    async def close_session(self, session_id: str) -> None:
        """Retire a session and cancel its timer."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return
        await self._disarm(session)
        session.websocket = None
        session.connected = False
        logger.info("Session %s closed.", session_id)

    async def _disarm(self, session: GameSession) -> None:
        task = session._task
        session._task = None
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def _tick_loop(self, session: GameSession) -> None:
        """Advance the game every tick period until it ends."""
        interval = self.config.tick_interval
        try:
            while True:
                await asyncio.sleep(interval)
                async with session.lock:
                    state = session.engine.tick()
                    finished = session.engine.game_over
                await self._send(session, state)
                if finished:
                    logger.info(
                        "Session %s game over at tick %d.",
                        session.session_id, session.engine.tick_count,
                    )
                    break
        except asyncio.CancelledError:
            logger.info(
                "Tick loop cancelled for session %s.", session.session_id,
            )
        except Exception:
            logger.exception(
                "Tick loop error in session %s.", session.session_id,
            )

    async def _send(self, session: GameSession, state: dict) -> None:
        """Push a state snapshot to the session's socket, if connected."""
        ws = session.websocket
        if ws is None:
            return
        payload = json.dumps(state, separators=(",", ":"))
        try:
            if ws.client_state == WebSocketState.CONNECTED:
                await ws.send_text(payload)
        except Exception:
            logger.warning(
                "Failed sending state to session %s.", session.session_id,
            )
            session.websocket = None
            session.connected = False

    async def cleanup(self) -> None:
        """Cancel every running tick loop and drop all sessions."""
        for session_id in list(self._sessions):
            await self.close_session(session_id)
        logger.info("SessionManager cleanup complete.")
