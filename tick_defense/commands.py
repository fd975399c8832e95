"""Player commands and the queue that routes them to handlers."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from tick_defense.types import Position


@dataclass(frozen=True)
class SelectTowerType:
    kind: str


@dataclass(frozen=True)
class TogglePlacement:
    pass


@dataclass(frozen=True)
class PlaceTower:
    position: Position


@dataclass(frozen=True)
class UpgradeFocused:
    pass


@dataclass(frozen=True)
class RemoveFocused:
    pass


@dataclass(frozen=True)
class Inspect:
    position: Position


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Reset:
    pass


class CommandQueue:
    """Routes player commands to typed handlers.

    One handler per command class, dispatched by type. ``handler(cmd) ->
    bool`` returns True when the command changed the game. Hosts that
    collect input between ticks use :meth:`enqueue` and :meth:`drain`;
    direct callers use :meth:`execute`.
    """

    def __init__(
        self,
        on_accept: Callable[[Any], None] | None = None,
        on_reject: Callable[[Any], None] | None = None,
    ) -> None:
        self._handlers: dict[type[Any], Callable[[Any], bool]] = {}
        self._pending: deque[Any] = deque()
        self._on_accept = on_accept
        self._on_reject = on_reject

    def handle(self, cmd_type: type[Any], handler: Callable[[Any], bool]) -> None:
        """Register a handler for a command type. Later calls overwrite."""
        self._handlers[cmd_type] = handler

    def execute(self, cmd: Any) -> bool:
        """Dispatch *cmd* immediately. Raises TypeError if no handler is registered."""
        cmd_type = type(cmd)
        handler = self._handlers.get(cmd_type)
        if handler is None:
            raise TypeError(f"No handler registered for {cmd_type.__qualname__}")
        accepted = handler(cmd)
        if accepted:
            if self._on_accept is not None:
                self._on_accept(cmd)
        elif self._on_reject is not None:
            self._on_reject(cmd)
        return accepted

    def enqueue(self, cmd: Any) -> None:
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self) -> list[tuple[Any, bool]]:
        """Execute every pending command in FIFO order. Returns ``[(cmd, accepted), ...]``."""
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            results.append((cmd, self.execute(cmd)))
        return results
