from __future__ import annotations

import logging
import math
import re
from typing import Set, Union

from odometer.components.format_spec import FormatSpec
from odometer.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

RawValue = Union[str, int, float, None]

_SEPARATORS = re.compile(r"[.,\s\u00A0\u202F]")
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float(text: str) -> float | None:
    """Parse the longest leading float literal of ``text`` (``"12px"`` -> 12.0)."""
    match = _LEADING_FLOAT.match(text.strip())
    if match is None:
        return None
    return float(match.group(0))


def _grouping_marks(format_spec: FormatSpec) -> Set[str]:
    # Signs and literal digits in a group are kept so the number still parses.
    return {char for char in format_spec.repeating if char != "d" and not char.isdigit() and char not in "+-"}


def _strip_separators(text: str, marks: Set[str]) -> str:
    text = _SEPARATORS.sub("", text)
    return "".join(char for char in text if char not in marks)


def _normalize_text(raw: str, format_spec: FormatSpec) -> str:
    marks = _grouping_marks(format_spec)
    radix = format_spec.radix_symbol
    if format_spec.radix is None and radix in marks:
        # The default radix doubles as the grouping mark, as in "(.ddd)".
        return _strip_separators(raw, marks)
    whole, found, fraction = raw.partition(radix)
    text = _strip_separators(whole, marks)
    if found:
        text += "." + _strip_separators(fraction, marks)
    return text


def clean_value(raw: RawValue, format_spec: FormatSpec) -> float:
    """Turn raw input into a number rounded to the format's precision.

    Text is normalized first: the radix symbol is swapped for a decimal point
    and grouping separators and whitespace are dropped. Input that still does
    not parse is treated as 0.
    """
    if raw is None:
        value = 0.0
    elif isinstance(raw, str):
        parsed = parse_float(_normalize_text(raw, format_spec))
        if parsed is None:
            logger.debug("Unparsable odometer value %r, using 0", raw)
            parsed = 0.0
        value = parsed
    else:
        value = float(raw)

    if not math.isfinite(value):
        logger.debug("Non-finite odometer value %r, using 0", raw)
        value = 0.0
    return round_half_up(value, format_spec.precision)
