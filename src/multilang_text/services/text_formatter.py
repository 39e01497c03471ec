"""Text Formatter - multilang resolution, HTML cleaning and shortening of display text."""

import inspect
import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional, Union

from multilang_text.core import (
    HUMAN_READABLE_SIZE_KEY,
    NOT_APPLICABLE_KEY,
    SIZE_RADIX,
    SIZE_UNITS,
    FormatOptions,
    coerce_int,
)
from multilang_text.services.language import LanguageResolver
from multilang_text.services.rendering import MarkupRenderer
from multilang_text.services.translation import Translator

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 2
ELLIPSIS = "&hellip;"
LINE_BREAK = "<br />"

_TAG_RE = re.compile(r"(<([^>]+)>)", re.IGNORECASE)
_NEWLINE_RE = re.compile(r"(?:\r\n|\r|\n)")
_ANY_LANG_RE = re.compile(
    r'<(?:lang|span)[^>]+lang="([a-zA-Z0-9_-]+)"[^>]*>(.*?)</(?:lang|span)>'
)


def _lang_span_pattern(language: str) -> "re.Pattern[str]":
    """Pattern matching multilang spans for one language, capturing their content."""
    return re.compile(
        r'<(?:lang|span)[^>]+lang="' + re.escape(language) + r'"[^>]*>(.*?)</(?:lang|span)>'
    )


def _coerce_number(value: Any) -> Optional[Union[int, float]]:
    """Return value as a finite number, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _round_half_up(value: Union[int, float], digits: int) -> Union[int, float]:
    """
    Round to a number of decimals, halves away from zero.

    Works on the decimal representation of value so that 1.005 rounds to 1.01.
    Integral results are returned as int so they display without a fraction.
    """
    exact = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return int(rounded)
    return float(rounded)


class TextFormatter:
    """
    Formats text for display.

    Stateless apart from its three collaborators:
    - language_resolver: answers the active language code (sync or async)
    - translator: localizes unit labels, the size template and "n/a"
    - markup_renderer: turns a markup fragment into visible text

    Only treat_multilang_tags and the format pipeline are coroutines; they
    suspend once, while resolving the language.
    """

    def __init__(
        self,
        language_resolver: LanguageResolver,
        translator: Translator,
        markup_renderer: MarkupRenderer,
    ):
        self._language_resolver = language_resolver
        self._translator = translator
        self._markup_renderer = markup_renderer

    def bytes_to_size(self, num_bytes: Any, precision: Any = DEFAULT_PRECISION) -> str:
        """
        Convert a size in bytes into a human readable string.

        Args:
            num_bytes: Number of bytes to convert.
            precision: Number of digits after the decimal separator.

        Returns:
            Localized size (e.g., "1.5 KB"), or the localized "not applicable"
            string when num_bytes is missing, non-numeric or negative. Units
            without a translated label fall back to their symbol.
        """
        size = _coerce_number(num_bytes)
        if size is None or size < 0:
            return self._translator.translate(NOT_APPLICABLE_KEY)

        digits = coerce_int(precision)
        if digits is None or digits < 0:
            digits = DEFAULT_PRECISION

        labels = self._translator.translate_many(unit.label_key for unit in SIZE_UNITS)

        unit_index = 0
        while size >= SIZE_RADIX and unit_index < len(SIZE_UNITS) - 1:
            size = size / SIZE_RADIX
            unit_index += 1

        # Plain byte counts are shown as given; only scaled values are rounded.
        if unit_index > 0:
            size = _round_half_up(size, digits)
        elif isinstance(size, float) and size.is_integer():
            size = int(size)

        unit = SIZE_UNITS[unit_index]
        label = labels.get(unit.label_key)
        if not label or label == unit.label_key:
            label = unit.symbol

        return self._translator.translate(
            HUMAN_READABLE_SIZE_KEY,
            {"size": size, "unit": label},
        )

    def clean_tags(self, text: str, single_line: bool = False) -> str:
        """
        Remove HTML tags from a text.

        A regular expression drops the obvious tags first; the markup renderer
        then removes whatever is left and decodes entities.

        Args:
            text: The text to be cleaned.
            single_line: True to join all lines with spaces instead of <br />.

        Returns:
            Cleaned text.
        """
        text = _TAG_RE.sub("", text)
        text = self._markup_renderer.render_text(text)
        return self.replace_new_lines(text, " " if single_line else LINE_BREAK)

    def replace_new_lines(self, text: str, new_value: str) -> str:
        """Replace every \\r\\n, \\r and \\n in text with new_value."""
        return _NEWLINE_RE.sub(lambda _: new_value, text)

    def shorten_text(self, text: str, length: int) -> str:
        """
        Shorten a text to length characters and add an ellipsis.

        The cut is moved back to the last space, if there is one after the
        first character. Texts within length are returned unchanged.
        """
        if len(text) > length:
            text = text[:max(length, 0)]

            last_word_pos = text.rfind(" ")
            if last_word_pos > 0:
                text = text[:last_word_pos]
            text += ELLIPSIS
        return text

    async def format_text(
        self,
        text: Optional[str],
        clean: bool,
        single_line: bool = False,
        shorten_length: Any = None,
    ) -> str:
        """
        Format a text: treat multilang tags, then clean HTML and shorten if requested.

        Args:
            text: Text to format.
            clean: True if HTML tags should be removed.
            single_line: True if new lines should be removed. Only used with clean.
            shorten_length: Number of characters to shorten the text to.
        """
        options = FormatOptions.from_values(
            clean=clean, single_line=single_line, shorten_length=shorten_length
        )
        return await self.format_with_options(text, options)

    async def format_with_options(self, text: Optional[str], options: FormatOptions) -> str:
        """Run the format pipeline with an options record."""
        formatted = await self.treat_multilang_tags(text)
        if options.clean:
            formatted = self.clean_tags(formatted, options.single_line)
        if options.should_shorten:
            formatted = self.shorten_text(formatted, options.shorten_length)
        return formatted

    async def treat_multilang_tags(self, text: Optional[str]) -> str:
        """
        Keep only the current language in a text with multilang tags.

        Spans (<span lang="xx"> or <lang lang="xx">) in the current language are
        unwrapped; spans in any other language are removed with their content.
        """
        if not text:
            return ""

        language = self._language_resolver.get_current_language()
        if inspect.isawaitable(language):
            language = await language
        logger.debug("Treating multilang tags for language %s", language)

        text = _lang_span_pattern(str(language)).sub(r"\1", text)
        return _ANY_LANG_RE.sub("", text)
