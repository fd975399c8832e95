"""Clock and Ticker for the fixed-period simulation."""

from __future__ import annotations

import random
from typing import Callable

from tick_defense.types import TickContext

TICK_DURATION = 0.6


class Clock:
    """Counts ticks within the current wave.

    The counter is reset whenever a wave is prepared, so ``tick_number``
    is always relative to the start of the wave in progress.
    """

    def __init__(self, tick_duration: float = TICK_DURATION) -> None:
        if tick_duration <= 0:
            raise ValueError("tick_duration must be positive")
        self._dt = tick_duration
        self._tick_number = 0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
            random=rng,
        )

    def seconds(self, ticks: int) -> float:
        return ticks * self._dt

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number


class Ticker:
    """Cancellable periodic handle driven by the host loop.

    The host feeds wall-clock time with :meth:`feed`; the callback fires
    once for every whole period accumulated while the ticker is active.
    """

    def __init__(self, period: float, callback: Callable[[], None]) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self._period = period
        self._callback = callback
        self._accumulator = 0.0
        self._active = False

    @property
    def period(self) -> float:
        return self._period

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        self._accumulator = 0.0
        self._active = True

    def cancel(self) -> None:
        self._active = False
        self._accumulator = 0.0

    def feed(self, elapsed: float) -> int:
        """Accumulate *elapsed* seconds and fire due callbacks. Returns fire count."""
        if not self._active:
            return 0
        self._accumulator += elapsed
        fired = 0
        while self._active and self._accumulator >= self._period:
            self._accumulator -= self._period
            fired += 1
            self._callback()
        return fired
