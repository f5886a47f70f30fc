"""Animated numeric displays: digit formats, slide/count planning and instances."""

from odometer.components.format_spec import FormatSpec
from odometer.components.token import Token
from odometer.config import (
    GlobalOptions,
    get_global_options,
    load_global_options,
    reset_global_options,
    set_global_options,
)
from odometer.errors import BadFormat, InvalidFormat, OdometerError
from odometer.formatting import clean_value, format_digits, parse_format, tokens_text
from odometer.odometer import Odometer
from odometer.rendering.surface import Surface, TextSurface
from odometer.systems.planner import plan_slide
from odometer.systems.scheduler import CancelToken, FrameScheduler

__all__ = [
    "BadFormat",
    "CancelToken",
    "FormatSpec",
    "FrameScheduler",
    "GlobalOptions",
    "InvalidFormat",
    "Odometer",
    "OdometerError",
    "Surface",
    "TextSurface",
    "Token",
    "clean_value",
    "format_digits",
    "get_global_options",
    "load_global_options",
    "parse_format",
    "plan_slide",
    "reset_global_options",
    "set_global_options",
    "tokens_text",
]
