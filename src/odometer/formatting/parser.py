"""Digit format parsing.

A format reads right to left: an optional grouping group in parentheses whose
content repeats across the whole part (``"(,ddd)"``), or bare digit markers
(``"ddd"``), optionally followed by a radix character and the fractional digit
markers (``".dd"``). Every ``d`` is a digit slot; anything else in the group is
a spacer placed between digits.
"""
from __future__ import annotations

import re

from odometer.components.format_spec import FormatSpec
from odometer.constants import DIGIT_FORMAT, FALLBACK_PATTERN
from odometer.errors import InvalidFormat

FORMAT_PARSER = re.compile(
    r"^(?:\((?P<group>[^)]*)\)d*|(?P<plain>d+))"
    r"(?:(?P<radix>[^d()])(?P<fraction>d+))?$"
)


def parse_format(format_string: str | None, default: str = DIGIT_FORMAT) -> FormatSpec:
    """Parse ``format_string`` into a :class:`FormatSpec`.

    ``None`` or an empty string falls back to ``default``. Raises
    :class:`InvalidFormat` when the string does not match the grammar.
    """
    if not format_string:
        format_string = default or FALLBACK_PATTERN

    parsed = FORMAT_PARSER.match(format_string)
    if parsed is None:
        raise InvalidFormat(format_string)

    group = parsed.group("group")
    repeating = group if group is not None else parsed.group("plain")
    fraction = parsed.group("fraction") or ""
    return FormatSpec(
        repeating=repeating or FALLBACK_PATTERN,
        radix=parsed.group("radix"),
        precision=len(fraction),
    )
