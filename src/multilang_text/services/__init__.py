"""Services layer - text formatting and its collaborators."""

from multilang_text.services.settings_manager import SettingsManager

# Language services
from multilang_text.services.language import LanguageResolver, StaticLanguageResolver, SettingsLanguageResolver, normalize_language_code

# Translation services
from multilang_text.services.translation import Translator, CatalogError, CatalogTranslator, available_languages

# Rendering services
from multilang_text.services.rendering import MarkupRenderer, SoupMarkupRenderer

from multilang_text.services.text_formatter import TextFormatter

__all__ = [
	"SettingsManager",
	"LanguageResolver",
	"StaticLanguageResolver",
	"SettingsLanguageResolver",
	"normalize_language_code",
	"Translator",
	"CatalogError",
	"CatalogTranslator",
	"available_languages",
	"MarkupRenderer",
	"SoupMarkupRenderer",
	"TextFormatter",
]
