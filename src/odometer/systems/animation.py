from __future__ import annotations

from typing import Callable

from odometer.components.animation_plan import SlidePlan
from odometer.systems.planner import count_value
from odometer.systems.scheduler import CancelToken, FrameScheduler


class AnimationTask:
    """A single live plan driven frame by frame on a scheduler.

    The task owns one cancellation token; cancelling it invalidates every frame
    the task has scheduled, so a superseded plan never renders again.
    """

    def __init__(self, scheduler: FrameScheduler, duration: float, on_done: Callable[[], None]):
        self.scheduler = scheduler
        self.duration = duration
        self.token = CancelToken()
        self.started_at = 0.0
        self._on_done = on_done
        self._handle: CancelToken | None = None

    @property
    def live(self) -> bool:
        return not self.token.cancelled

    def start(self) -> "AnimationTask":
        self.started_at = self.scheduler.now()
        self._schedule()
        return self

    def cancel(self) -> None:
        self.token.cancel()
        if self._handle is not None:
            self._handle.cancel()

    def finish(self) -> None:
        if not self.live:
            return
        self.cancel()
        self._on_done()

    def _schedule(self) -> None:
        self._handle = self.scheduler.request_frame(self._frame)

    def _frame(self, now: float) -> None:
        if not self.live:
            return
        self.step(now - self.started_at, now)
        if self.live:
            self._schedule()

    def step(self, elapsed: float, now: float) -> None:
        raise NotImplementedError


class SlideAnimation(AnimationTask):
    """Plays a slide plan: reports progress each frame until the duration elapses."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        plan: SlidePlan,
        duration: float,
        on_progress: Callable[[float], None],
        on_done: Callable[[], None],
    ):
        super().__init__(scheduler, duration, on_done)
        self.plan = plan
        self._on_progress = on_progress

    def step(self, elapsed: float, now: float) -> None:
        if elapsed >= self.duration:
            self.finish()
            return
        self._on_progress(elapsed / self.duration)


class CountAnimation(AnimationTask):
    """Counts from ``old_value`` to ``new_value``, rendering at most once per frame interval.

    Intermediate values are rounded half-up at the format precision rather than
    to whole numbers, so fractional formats count through their cents.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        old_value: float,
        new_value: float,
        duration: float,
        ms_per_frame: float,
        precision: int,
        render: Callable[[float], None],
        on_done: Callable[[], None],
    ):
        super().__init__(scheduler, duration, on_done)
        self.old_value = old_value
        self.new_value = new_value
        self.ms_per_frame = ms_per_frame
        self.precision = precision
        self._render = render
        self._last = 0.0

    def start(self) -> "CountAnimation":
        super().start()
        self._last = self.started_at
        return self

    def step(self, elapsed: float, now: float) -> None:
        if elapsed > self.duration:
            self._render(self.new_value)
            self.finish()
            return
        if now - self._last >= self.ms_per_frame:
            self._last = now
            self._render(count_value(self.old_value, self.new_value, elapsed, self.duration, self.precision))
