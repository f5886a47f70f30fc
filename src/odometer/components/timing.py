from __future__ import annotations

import math
from dataclasses import dataclass, field

from odometer.constants import COUNT_FRAMERATE, DURATION, FRAMERATE, FRAMES_PER_VALUE


@dataclass(slots=True)
class Timing:
    """Animation timing with its derived per-frame fields.

    ``max_values`` is the number of distinct values a slide column may show
    within ``duration`` at ``framerate``; it is recomputed by :meth:`configure`
    whenever a timing input changes.
    """

    duration: float = DURATION
    framerate: float = FRAMERATE
    count_framerate: float = COUNT_FRAMERATE
    frames_per_value: float = FRAMES_PER_VALUE

    ms_per_frame: float = field(init=False)
    count_ms_per_frame: float = field(init=False)
    max_values: int = field(init=False)

    def __post_init__(self) -> None:
        self._recompute()

    def configure(
        self,
        *,
        duration: float | None = None,
        framerate: float | None = None,
        count_framerate: float | None = None,
    ) -> None:
        if duration is not None:
            self.duration = duration
        if framerate is not None:
            self.framerate = framerate
        if count_framerate is not None:
            self.count_framerate = count_framerate
        self._recompute()

    def _recompute(self) -> None:
        self.ms_per_frame = 1000 / self.framerate
        self.count_ms_per_frame = 1000 / self.count_framerate
        self.max_values = math.floor(self.duration / self.ms_per_frame / self.frames_per_value)

    @property
    def duration_property(self) -> str:
        duration = int(self.duration) if float(self.duration).is_integer() else self.duration
        return f"{duration}ms"
