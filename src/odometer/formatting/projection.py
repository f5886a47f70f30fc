"""Projection of values and slide plans onto renderable token streams."""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from odometer.components.animation_plan import SlidePlan
from odometer.components.format_spec import FormatSpec
from odometer.components.token import DIGIT, Token, spacer, static_digit
from odometer.constants import (
    CLASS_FIRST_VALUE,
    CLASS_LAST_VALUE,
    CLASS_NEGATION_MARK,
    CLASS_RADIX_MARK,
)
from odometer.errors import BadFormat
from odometer.utils.numeric import to_plain_string

FormatFunction = Callable[[float], str]


class PatternCursor:
    """Consumes a repeating pattern right to left, one digit slot at a time."""

    def __init__(self, pattern: str):
        self._pattern = pattern
        self._remaining = pattern

    def next_digit(self) -> List[str]:
        """Advance to the next digit marker, returning the spacers passed on the way."""
        spacers: List[str] = []
        recycled = False
        while True:
            if not self._remaining:
                if recycled:
                    raise BadFormat(self._pattern)
                self._remaining = self._pattern
                recycled = True
            char = self._remaining[-1]
            self._remaining = self._remaining[:-1]
            if char == "d":
                return spacers
            spacers.append(char)


def preserve_precision(value: float, precision: int) -> str:
    """String form of ``value`` keeping ``precision`` fractional digits, zeros included."""
    whole, _, fraction = to_plain_string(value).partition(".")
    fraction = fraction.rstrip("0")
    if precision:
        fraction = fraction.ljust(precision, "0")
    return f"{whole}.{fraction}" if fraction else whole


def format_digits(
    value: float,
    format_spec: FormatSpec,
    format_function: Optional[FormatFunction] = None,
) -> List[Token]:
    """Static token stream for ``value``, most significant token first."""
    if format_function is not None:
        return _custom_tokens(format_function(value))

    tokens: List[Token] = []
    cursor = PatternCursor(format_spec.repeating)
    whole_part = not format_spec.precision
    for char in reversed(preserve_precision(value, format_spec.precision)):
        if char == "-":
            tokens.append(spacer(char, CLASS_NEGATION_MARK))
            continue
        if char == ".":
            whole_part = True
            tokens.append(spacer(format_spec.radix_symbol, CLASS_RADIX_MARK))
            continue
        if whole_part:
            tokens.extend(spacer(mark) for mark in cursor.next_digit())
        tokens.append(static_digit(char))
    tokens.reverse()
    return tokens


def _custom_tokens(text: str) -> List[Token]:
    return [static_digit(char) if char in "0123456789" else spacer(char) for char in text]


def project_plan(plan: SlidePlan, format_spec: FormatSpec) -> List[Token]:
    """Token stream for a slide plan: one ribbon token per column plus spacers."""
    tokens: List[Token] = []
    cursor = PatternCursor(format_spec.repeating)
    precision = plan.precision
    for index, frames in enumerate(reversed(plan.columns)):
        if precision and index == precision:
            tokens.append(spacer(format_spec.radix_symbol, CLASS_RADIX_MARK))
        if index >= precision:
            tokens.extend(spacer(mark) for mark in cursor.next_digit())
        tokens.append(_ribbon(frames))
    if plan.negative:
        tokens.append(spacer("-", CLASS_NEGATION_MARK))
    tokens.reverse()
    return tokens


def _ribbon(frames: Iterable[int]) -> Token:
    frames = tuple(frames)
    classes = [CLASS_LAST_VALUE]
    if len(frames) == 1:
        classes.insert(0, CLASS_FIRST_VALUE)
    return Token(kind=DIGIT, text=str(frames[-1]), classes=tuple(classes), frames=frames)


def tokens_text(tokens: Iterable[Token]) -> str:
    """Text shown once every column has settled on its last frame."""
    return "".join(token.text for token in tokens)
