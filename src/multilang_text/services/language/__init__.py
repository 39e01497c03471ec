"""Language services - abstract resolver and default implementations."""

from multilang_text.services.language.language_resolver import LanguageResolver, StaticLanguageResolver
from multilang_text.services.language.settings_language_resolver import SettingsLanguageResolver, normalize_language_code

__all__ = [
    "LanguageResolver",
    "StaticLanguageResolver",
    "SettingsLanguageResolver",
    "normalize_language_code",
]
