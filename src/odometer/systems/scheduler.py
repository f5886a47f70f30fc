from __future__ import annotations

import heapq
from time import monotonic
from typing import Callable, List, Tuple

from odometer.constants import FALLBACK_FRAME_MS
from odometer.events.bus import EVENT_TICK, EventBus

FrameCallback = Callable[[float], None]


class CancelToken:
    """Handle for scheduled work; once cancelled the work never runs."""

    __slots__ = ("cancelled",)

    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FrameScheduler:
    """Cooperative scheduler for odometer frames and timers.

    With an event bus, frame callbacks run once per ``tick`` event (the host's
    display refresh, ``dt`` in seconds). Without one, :meth:`request_frame`
    falls back to a fixed cadence timer and the host advances time by calling
    :meth:`pump`. Callbacks receive the scheduler time in milliseconds.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        fallback_interval_ms: float = FALLBACK_FRAME_MS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.fallback_interval_ms = fallback_interval_ms
        self.refresh_driven = event_bus is not None
        self._clock = clock or monotonic
        self._last_pump: float | None = None
        self._now = 0.0
        self._sequence = 0
        self._frames: List[Tuple[CancelToken, FrameCallback]] = []
        self._timers: List[Tuple[float, int, CancelToken, FrameCallback]] = []
        if event_bus is not None:
            event_bus.subscribe(EVENT_TICK, self.on_tick)

    def now(self) -> float:
        return self._now

    def request_frame(self, callback: FrameCallback) -> CancelToken:
        if not self.refresh_driven:
            return self.call_later(self.fallback_interval_ms, callback)
        token = CancelToken()
        self._frames.append((token, callback))
        return token

    def call_later(self, delay_ms: float, callback: FrameCallback) -> CancelToken:
        token = CancelToken()
        self._sequence += 1
        due = self._now + max(0.0, float(delay_ms))
        heapq.heappush(self._timers, (due, self._sequence, token, callback))
        return token

    def on_tick(self, sender, **kwargs) -> None:
        dt = kwargs.get("dt", 1 / 60)
        self.advance(float(dt) * 1000.0)

    def pump(self) -> None:
        """Advance by the wall-clock time elapsed since the previous pump."""
        now = self._clock()
        if self._last_pump is None:
            self._last_pump = now
        elapsed = (now - self._last_pump) * 1000.0
        self._last_pump = now
        self.advance(elapsed)

    def advance(self, elapsed_ms: float) -> None:
        self._now += max(0.0, elapsed_ms)
        while self._timers and self._timers[0][0] <= self._now:
            _, _, token, callback = heapq.heappop(self._timers)
            if not token.cancelled:
                token.cancelled = True
                callback(self._now)
        # Frames requested while running this batch wait for the next refresh.
        frames, self._frames = self._frames, []
        for token, callback in frames:
            if not token.cancelled:
                token.cancelled = True
                callback(self._now)

    @property
    def pending(self) -> int:
        live_frames = sum(1 for token, _ in self._frames if not token.cancelled)
        live_timers = sum(1 for _, _, token, _ in self._timers if not token.cancelled)
        return live_frames + live_timers
