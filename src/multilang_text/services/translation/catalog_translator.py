"""Catalog Translator - message lookup backed by JSON catalog files."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from multilang_text.services.translation.translator import CatalogError, Translator

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_DIR = Path(__file__).resolve().parent.parent.parent / "locales"


def available_languages(catalog_dir: Optional[Path] = None) -> List[str]:
    """List the languages that have a catalog file, sorted by code."""
    directory = catalog_dir or BUNDLED_CATALOG_DIR
    return sorted(path.stem for path in directory.glob("*.json"))


class CatalogTranslator(Translator):
    """
    Translator reading flat JSON catalogs, one file per language.

    Format (``<catalog_dir>/<language>.json``):
    {
        "core.sizekb": "KB",
        "core.humanreadablesize": "{size} {unit}"
    }

    Lookups fall back to the default-language catalog, then to the key itself.
    Placeholders use str.format syntax.
    """

    def __init__(
        self,
        language: str = "en",
        default_language: str = "en",
        catalog_dir: Optional[Path] = None,
    ):
        self._catalog_dir = catalog_dir or BUNDLED_CATALOG_DIR
        self._language = language
        self._default_language = default_language

        self._fallback = self._load_catalog(default_language)
        if language == default_language:
            self._messages = self._fallback
        else:
            self._messages = self._load_optional_catalog(language)

    @property
    def language(self) -> str:
        """Language of the primary catalog."""
        return self._language

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        message = self._messages.get(key)
        if message is None:
            message = self._fallback.get(key)
        if message is None:
            logger.debug("Missing message key %s for %s", key, self._language)
            return key
        if params:
            return message.format_map(dict(params))
        return message

    def _load_optional_catalog(self, language: str) -> Dict[str, str]:
        """Load a catalog, falling back to an empty one on failure."""
        try:
            return self._load_catalog(language)
        except CatalogError as e:
            logger.warning("Using %s messages: %s", self._default_language, e)
            return {}

    def _load_catalog(self, language: str) -> Dict[str, str]:
        catalog_file = self._catalog_dir / f"{language}.json"
        try:
            data = json.loads(catalog_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot load catalog {catalog_file}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"Catalog {catalog_file} must be a JSON object")

        return {str(key): str(value) for key, value in data.items()}
