"""Command-line entry point for formatting text."""

import asyncio
import logging
import sys
from typing import Optional

import click

from multilang_text.services import (
    CatalogTranslator,
    SettingsLanguageResolver,
    SettingsManager,
    SoupMarkupRenderer,
    StaticLanguageResolver,
    TextFormatter,
    available_languages,
)


def build_formatter(settings: SettingsManager, language: Optional[str] = None) -> TextFormatter:
    """
    Wire a TextFormatter with the default collaborators.

    This is the only place that knows how to instantiate the concrete services.
    """
    if language:
        resolver = StaticLanguageResolver(language)
    else:
        # System locales narrow to a language with a catalog ("en_us" -> "en").
        resolver = SettingsLanguageResolver(
            settings,
            supported_languages=available_languages(settings.get_catalog_dir()),
        )

    # Labels follow the same language as the displayed text.
    translator = CatalogTranslator(
        language=resolver.get_current_language(),
        default_language=settings.get_default_language(),
        catalog_dir=settings.get_catalog_dir(),
    )

    return TextFormatter(
        language_resolver=resolver,
        translator=translator,
        markup_renderer=SoupMarkupRenderer(),
    )


@click.group()
@click.option("--language", "-l", default=None, help="Active language code (overrides settings)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, language: Optional[str], verbose: bool):
    """Format multilang display text and byte sizes."""
    settings = SettingsManager()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = build_formatter(settings, language)


@cli.command("format")
@click.argument("text", required=False)
@click.option("--clean", is_flag=True, help="Strip HTML tags")
@click.option("--single-line", is_flag=True, help="Join lines with spaces when cleaning")
@click.option("--shorten", type=int, default=None, help="Shorten to N characters")
@click.pass_obj
def format_command(formatter: TextFormatter, text: Optional[str], clean: bool, single_line: bool, shorten: Optional[int]):
    """Resolve multilang tags, then optionally clean and shorten TEXT (default: stdin)."""
    if text is None:
        text = click.get_text_stream("stdin").read()
    click.echo(asyncio.run(formatter.format_text(text, clean, single_line, shorten)))


@cli.command("size")
@click.argument("num_bytes", metavar="BYTES", type=float)
@click.option("--precision", "-p", type=int, default=2, help="Digits after the decimal separator")
@click.pass_obj
def size_command(formatter: TextFormatter, num_bytes: float, precision: int):
    """Print BYTES in human readable form."""
    click.echo(formatter.bytes_to_size(num_bytes, precision))


def main():
    cli()


if __name__ == "__main__":
    main()
