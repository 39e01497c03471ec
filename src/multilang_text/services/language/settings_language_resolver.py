"""Language resolution from settings and the system locale."""

import locale
import logging
from typing import Iterable, Optional

from multilang_text.services.language.language_resolver import LanguageResolver
from multilang_text.services.settings_manager import SettingsManager

logger = logging.getLogger(__name__)


def normalize_language_code(code: Optional[str]) -> Optional[str]:
    """
    Normalize a locale identifier to a lowercase language code.

    "en_US.UTF-8" -> "en_us", "pt-BR" -> "pt_br". Returns None for empty input
    and for the POSIX "C" locale.
    """
    if not code:
        return None
    code = code.split(".", 1)[0].split("@", 1)[0]
    code = code.replace("-", "_").strip().lower()
    if not code or code in ("c", "posix"):
        return None
    return code


class SettingsLanguageResolver(LanguageResolver):
    """
    Resolves the active language in priority order:

    1. The language configured in settings (MULTILANG_TEXT_LANGUAGE).
    2. The system locale, if it is one of the supported languages.
    3. The configured default language.

    A supported language matches either exactly ("pt_br") or by its base
    language ("en_us" matches a supported "en").
    """

    def __init__(
        self,
        settings: SettingsManager,
        supported_languages: Optional[Iterable[str]] = None,
    ):
        self._settings = settings
        self._supported = (
            {normalize_language_code(lang) for lang in supported_languages}
            if supported_languages is not None
            else None
        )

    def get_current_language(self) -> str:
        configured = normalize_language_code(self._settings.get_language())
        if configured:
            return configured

        system = self._match_supported(self._system_language())
        if system:
            logger.debug("Using system language %s", system)
            return system

        return normalize_language_code(self._settings.get_default_language()) or "en"

    def _match_supported(self, code: Optional[str]) -> Optional[str]:
        if code is None:
            return None
        if self._supported is None:
            return code
        if code in self._supported:
            return code
        base = code.split("_", 1)[0]
        return base if base in self._supported else None

    @staticmethod
    def _system_language() -> Optional[str]:
        try:
            code = locale.getlocale()[0]
        except ValueError:
            return None
        return normalize_language_code(code)
