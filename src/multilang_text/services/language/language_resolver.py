"""Language Resolver - abstract source of the active display language."""

from abc import ABC, abstractmethod
from typing import Awaitable, Union


class LanguageResolver(ABC):
    """
    Abstract service returning the active language code.

    Implementations may answer synchronously or return an awaitable when the
    lookup happens outside this process.
    """

    @abstractmethod
    def get_current_language(self) -> Union[str, Awaitable[str]]:
        """
        Get the language currently selected for display.

        Returns:
            Language code (e.g., "en", "pt_br"), or an awaitable resolving to it.
        """
        pass


class StaticLanguageResolver(LanguageResolver):
    """Resolver that always answers with a fixed language code."""

    def __init__(self, language: str):
        self._language = language

    def get_current_language(self) -> str:
        return self._language
