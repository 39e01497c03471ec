"""Markup Renderer - abstract conversion of markup to visible text."""

from abc import ABC, abstractmethod


class MarkupRenderer(ABC):
    """Abstract service rendering a markup fragment as plain visible text."""

    @abstractmethod
    def render_text(self, fragment: str) -> str:
        """
        Parse a markup fragment and return its visible text.

        Tags are dropped and character entities decoded.
        """
        pass
