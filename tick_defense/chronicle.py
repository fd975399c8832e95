"""Chronicle - bounded log of gameplay signals for inspection and replay summaries."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from tick_defense.signals import GAMEPLAY_SIGNALS, SignalBus


@dataclass
class Event:
    tick: int
    wave: int
    type: str
    data: dict[str, Any]


class Chronicle:
    def __init__(
        self,
        bus: SignalBus,
        clock_fn: Callable[[], tuple[int, int]],
        max_entries: int = 0,
    ) -> None:
        """*clock_fn* returns ``(total_ticks, wave)`` at dispatch time.

        Signals that carry their own ``wave`` field are filed under it."""
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[Event] = deque(maxlen=maxlen)
        self._clock_fn = clock_fn
        for sig in GAMEPLAY_SIGNALS:
            bus.subscribe(sig, self._record)

    def _record(self, signal: str, data: dict[str, Any]) -> None:
        tick, wave = self._clock_fn()
        wave = data.get("wave", wave)
        self._events.append(Event(tick=tick, wave=wave, type=signal, data=dict(data)))

    def query(self, type: str | None = None, wave: int | None = None) -> list[Event]:
        result: list[Event] = list(self._events)
        if type is not None:
            result = [e for e in result if e.type == type]
        if wave is not None:
            result = [e for e in result if e.wave == wave]
        return result

    def last(self, type: str) -> Event | None:
        for e in reversed(self._events):
            if e.type == type:
                return e
        return None

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
