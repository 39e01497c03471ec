"""Format options record and loose numeric coercion."""

import re
from dataclasses import dataclass
from typing import Any, Optional


_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def coerce_int(value: Any) -> Optional[int]:
    """
    Coerce a loosely typed value to an integer, the way parseInt would.

    Strings yield their leading integer prefix ("12px" -> 12), floats are
    truncated, and anything else (None, booleans, unparsable text) yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else None
    return None


@dataclass(frozen=True)
class FormatOptions:
    """Flags controlling the format pipeline."""

    clean: bool = False
    """Strip HTML markup"""

    single_line: bool = False
    """Collapse newlines into spaces instead of line breaks (only with clean)"""

    shorten_length: Optional[int] = None
    """Maximum characters before truncation; None or <= 0 disables it"""

    @property
    def should_shorten(self) -> bool:
        """True if truncation is enabled."""
        return self.shorten_length is not None and self.shorten_length > 0

    @classmethod
    def from_values(
        cls,
        clean: Any = False,
        single_line: Any = False,
        shorten_length: Any = None,
    ) -> "FormatOptions":
        """Build options from loosely typed caller input."""
        length = coerce_int(shorten_length)
        return cls(
            clean=bool(clean),
            single_line=bool(single_line),
            shorten_length=length if length is not None and length > 0 else None,
        )
