"""Format parsing, value normalization and token projection."""

from .parser import FORMAT_PARSER, parse_format
from .normalizer import clean_value, parse_float
from .projection import (
    format_digits,
    preserve_precision,
    project_plan,
    tokens_text,
)

__all__ = [
    "FORMAT_PARSER",
    "clean_value",
    "format_digits",
    "parse_float",
    "parse_format",
    "preserve_precision",
    "project_plan",
    "tokens_text",
]
