"""In-memory pub/sub bus for change notification and gameplay events."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

# Published once per command or tick that changed visible state.
CHANGED = "changed"
STATUS = "status"
PHASE = "phase"
ENEMY_SPAWNED = "enemy_spawned"
ENEMY_ESCAPED = "enemy_escaped"
ENEMY_DEFEATED = "enemy_defeated"
TOWER_FIRED = "tower_fired"
TOWER_PLACED = "tower_placed"
TOWER_UPGRADED = "tower_upgraded"
TOWER_REMOVED = "tower_removed"
WAVE_CLEARED = "wave_cleared"
GAME_OVER = "game_over"

GAMEPLAY_SIGNALS = (
    PHASE,
    ENEMY_SPAWNED,
    ENEMY_ESCAPED,
    ENEMY_DEFEATED,
    TOWER_FIRED,
    TOWER_PLACED,
    TOWER_UPGRADED,
    TOWER_REMOVED,
    WAVE_CLEARED,
    GAME_OVER,
)


class SignalBus:
    """Queues published signals until :meth:`flush` dispatches them in order."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
