"""Translation services - abstract interface and JSON catalog implementation."""

from multilang_text.services.translation.translator import Translator, CatalogError
from multilang_text.services.translation.catalog_translator import CatalogTranslator, BUNDLED_CATALOG_DIR, available_languages

__all__ = [
    "Translator",
    "CatalogError",
    "CatalogTranslator",
    "BUNDLED_CATALOG_DIR",
    "available_languages",
]
