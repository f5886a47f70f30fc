from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal


def _to_decimal(value: float) -> Decimal:
    # repr gives the shortest string that round-trips, so 1.005 stays 1.005.
    return Decimal(repr(float(value)))


def round_half_up(value: float, precision: int = 0) -> float:
    """Round ``value`` to ``precision`` places, ties towards positive infinity.

    This is ``floor(value * 10**precision + 0.5) / 10**precision`` evaluated in
    decimal arithmetic, never banker's rounding.
    """
    scale = Decimal(10) ** precision
    scaled = (_to_decimal(value) * scale + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
    result = float(scaled / scale)
    return result if result else 0.0


def scale_to_integer(value: float, precision: int) -> int:
    """Shift ``precision`` fractional digits into the integer part."""
    scaled = _to_decimal(value) * (Decimal(10) ** precision)
    return int(scaled.to_integral_value(rounding=ROUND_FLOOR))


def truncate_div(value: int, divisor: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def digit_count(*values: int) -> int:
    """Number of decimal digits of the largest absolute value (0 for all zeros)."""
    largest = max(abs(v) for v in values)
    return len(str(largest)) if largest else 0


def to_plain_string(value: float) -> str:
    """String form of ``value`` without exponent notation."""
    return format(_to_decimal(value), "f")
