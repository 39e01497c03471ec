"""Translator - abstract lookup of localized message strings."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional


class CatalogError(Exception):
    """Raised when a message catalog cannot be loaded."""


class Translator(ABC):
    """
    Abstract service resolving message keys to localized strings.

    Lookups are synchronous and use the translator's own locale.
    """

    @abstractmethod
    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Translate a single message key.

        Args:
            key: Message key (e.g., "core.sizekb").
            params: Values interpolated into the message placeholders.

        Returns:
            Localized string.
        """
        pass

    def translate_many(self, keys: Iterable[str]) -> Dict[str, str]:
        """Translate several keys at once, keyed by message key."""
        return {key: self.translate(key) for key in keys}
