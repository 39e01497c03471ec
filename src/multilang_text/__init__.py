"""
Multilang Text - text normalization for content display.

This package provides:
- Multilang tag resolution (<span lang="xx"> variants of one string)
- HTML tag cleaning and newline handling
- Word-boundary shortening with an ellipsis
- Human-readable byte sizes with localized units
"""

__version__ = "0.1.0"

# Make key components available at package level
from multilang_text.core import FormatOptions
from multilang_text.services import TextFormatter

__all__ = [
    "FormatOptions",
    "TextFormatter",
]
