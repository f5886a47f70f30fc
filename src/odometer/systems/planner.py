"""Frame planning for slide and count animations."""
from __future__ import annotations

import math
from fractions import Fraction
from typing import List, Optional

from odometer.components.animation_plan import DigitColumn, SlidePlan
from odometer.components.format_spec import FormatSpec
from odometer.constants import DIGIT_SPEEDBOOST
from odometer.utils.numeric import digit_count, round_half_up, scale_to_integer, truncate_div


def column_range(start: int, end: int) -> List[int]:
    """Every integer from ``start`` to ``end`` inclusive, in walking order."""
    step = 1 if end >= start else -1
    return list(range(start, end + step, step))


def subsample(start: int, end: int, limit: float) -> List[int]:
    """Walk from ``start`` to ``end`` in ``limit`` even steps, always landing on ``end``.

    Samples are taken from the step index in exact arithmetic, so the walk
    advances at any magnitude.
    """
    dist = end - start
    step = Fraction(dist) / Fraction(limit)
    half = Fraction(1, 2)
    frames: List[int] = []
    index = 0
    current = Fraction(start)
    while (dist > 0 and current < end) or (dist < 0 and current > end):
        frames.append(math.floor(current + half))
        index += 1
        current = start + step * index
    if not frames or frames[-1] != end:
        frames.append(end)
    return frames


def thin(frames: List[int], size: int) -> List[int]:
    """Evenly pick ``size`` frames keeping the first and the last one."""
    if len(frames) <= size:
        return frames
    last = len(frames) - 1
    return [frames[round(i * last / (size - 1))] for i in range(size)]


def plan_slide(
    old_value: float,
    new_value: float,
    format_spec: FormatSpec,
    max_values: int,
    speed_boost: float = DIGIT_SPEEDBOOST,
) -> Optional[SlidePlan]:
    """Plan the digit ribbons for sliding from ``old_value`` to ``new_value``.

    Fractional digits are animated as extra columns by scaling both values by
    ``10**precision``. A column whose distance exceeds ``max_values`` is
    subsampled; each further subsampled column is sampled more finely by
    ``speed_boost`` and then thinned back to ``max_values + 1`` frames. The cap
    wins, so the boost only shifts which intermediate values are shown, never
    how many.
    Returns ``None`` when there is nothing to animate.
    """
    precision = format_spec.precision
    old = scale_to_integer(old_value, precision)
    new = scale_to_integer(new_value, precision)
    if old == new:
        return None

    limit = max(1, max_values)
    count = max(digit_count(old, new), 1)
    if precision:
        count = max(count, precision + 1)

    columns: List[DigitColumn] = []
    boosted = 0
    for i in range(count):
        divisor = 10 ** (count - i - 1)
        start = truncate_div(old, divisor)
        end = truncate_div(new, divisor)
        dist = end - start

        if abs(dist) > limit:
            frames = subsample(start, end, limit * (1 + boosted * speed_boost))
            frames = thin(frames, limit + 1)
            boosted += 1
        else:
            frames = column_range(start, end)

        # Only the last digit of each intermediate value is shown in a column.
        columns.append(tuple(abs(frame) % 10 for frame in frames))

    return SlidePlan(
        columns=tuple(columns),
        negative=new < 0,
        radix_index=count - precision if precision else None,
        direction="up" if new > old else "down",
        precision=precision,
    )


def count_value(old_value: float, new_value: float, elapsed: float, duration: float, precision: int = 0) -> float:
    """Interpolated count readout ``elapsed`` ms into a ``duration`` ms animation."""
    if duration <= 0 or elapsed >= duration:
        return new_value
    fraction = max(0.0, elapsed) / duration
    return round_half_up(old_value + (new_value - old_value) * fraction, precision)
