"""Rendering services - abstract markup renderer and BeautifulSoup implementation."""

from multilang_text.services.rendering.markup_renderer import MarkupRenderer
from multilang_text.services.rendering.soup_markup_renderer import SoupMarkupRenderer

__all__ = [
    "MarkupRenderer",
    "SoupMarkupRenderer",
]
