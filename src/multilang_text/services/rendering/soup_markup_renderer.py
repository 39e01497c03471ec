"""BeautifulSoup-backed markup renderer."""

from bs4 import BeautifulSoup

from multilang_text.services.rendering.markup_renderer import MarkupRenderer


class SoupMarkupRenderer(MarkupRenderer):
    """Renders markup with BeautifulSoup, using the stdlib html.parser by default."""

    def __init__(self, parser: str = "html.parser"):
        self._parser = parser

    def render_text(self, fragment: str) -> str:
        soup = BeautifulSoup(fragment, self._parser)
        return soup.get_text()
