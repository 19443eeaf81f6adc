"""Translation of raw browser input into engine directions."""

from __future__ import annotations

from browser_snake.snake import Direction

# KeyboardEvent.key values; single letters are matched case-insensitively.
KEY_BINDINGS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_DIRECTION_NAMES: dict[str, Direction] = {
    d.name.lower(): d for d in Direction
}


def direction_for_key(key: object) -> Direction | None:
    """Map a ``KeyboardEvent.key`` value to a direction, if bound."""
    if not isinstance(key, str):
        return None
    if len(key) == 1:
        key = key.lower()
    return KEY_BINDINGS.get(key)


def direction_for_name(name: object) -> Direction | None:
    """Map a touch-button direction name such as ``"up"``."""
    if not isinstance(name, str):
        return None
    return _DIRECTION_NAMES.get(name.strip().lower())


def parse_message(msg: object) -> tuple[str, Direction | None] | None:
    """Decode one client message into an ``(action, direction)`` pair.

    Recognised shapes are ``{"key": ...}``, ``{"direction": ...}`` and
    ``{"action": "restart"}``. Returns ``None`` for anything else.
    """
    if not isinstance(msg, dict):
        return None
    if msg.get("action") == "restart":
        return "restart", None
    if "key" in msg:
        direction = direction_for_key(msg["key"])
    elif "direction" in msg:
        direction = direction_for_name(msg["direction"])
    else:
        return None
    if direction is None:
        return None
    return "steer", direction
