"""Size unit scale used for human-readable byte counts."""

from dataclasses import dataclass
from typing import Tuple


SIZE_RADIX = 1024


@dataclass(frozen=True)
class SizeUnit:
    """A unit on the byte-size scale."""

    symbol: str
    """Short unit name (e.g., "KB"), used when no label is translated"""

    label_key: str
    """Message key for the localized unit label"""


SIZE_UNITS: Tuple[SizeUnit, ...] = (
    SizeUnit(symbol="B", label_key="core.sizeb"),
    SizeUnit(symbol="KB", label_key="core.sizekb"),
    SizeUnit(symbol="MB", label_key="core.sizemb"),
    SizeUnit(symbol="GB", label_key="core.sizegb"),
    SizeUnit(symbol="TB", label_key="core.sizetb"),
)

NOT_APPLICABLE_KEY = "core.notapplicable"
HUMAN_READABLE_SIZE_KEY = "core.humanreadablesize"
