"""Core value types - format options and the size unit scale."""

from multilang_text.core.format_options import FormatOptions, coerce_int
from multilang_text.core.size_units import (
    HUMAN_READABLE_SIZE_KEY,
    NOT_APPLICABLE_KEY,
    SIZE_RADIX,
    SIZE_UNITS,
    SizeUnit,
)

__all__ = [
    "FormatOptions",
    "coerce_int",
    "SizeUnit",
    "SIZE_UNITS",
    "SIZE_RADIX",
    "NOT_APPLICABLE_KEY",
    "HUMAN_READABLE_SIZE_KEY",
]
