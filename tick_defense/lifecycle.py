"""Game lifecycle state machine."""
from __future__ import annotations

from typing import Callable

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"

START = "start"
PAUSE = "pause"
RESET = "reset"
DEFEAT = "defeat"

# phase -> [[event, target], ...]
TRANSITIONS: dict[str, list[list[str]]] = {
    IDLE: [[START, RUNNING], [RESET, IDLE]],
    RUNNING: [[PAUSE, PAUSED], [DEFEAT, GAME_OVER], [RESET, IDLE]],
    PAUSED: [[START, RUNNING], [RESET, IDLE]],
    GAME_OVER: [[START, RUNNING], [RESET, IDLE]],
}

_TransitionHook = Callable[[str, str, str], None]


class Lifecycle:
    """Tracks the current phase and applies event-driven transitions.

    ``on_transition(old, event, new)`` callbacks run after every accepted
    event, self-transitions included.
    """

    def __init__(
        self,
        transitions: dict[str, list[list[str]]] | None = None,
        initial: str = IDLE,
    ) -> None:
        self._transitions = transitions if transitions is not None else TRANSITIONS
        if initial not in self._transitions:
            raise ValueError(f"Unknown initial phase {initial!r}")
        self._phase = initial
        self._hooks: list[_TransitionHook] = []

    @property
    def phase(self) -> str:
        return self._phase

    def _target(self, event: str) -> str | None:
        for name, target in self._transitions.get(self._phase, ()):
            if name == event:
                return target
        return None

    def can(self, event: str) -> bool:
        return self._target(event) is not None

    def fire(self, event: str) -> str | None:
        """Apply *event*. Returns the new phase, or None if not allowed here."""
        target = self._target(event)
        if target is None:
            return None
        old = self._phase
        self._phase = target
        for hook in self._hooks:
            hook(old, event, target)
        return target

    def on_transition(self, hook: _TransitionHook) -> None:
        self._hooks.append(hook)
