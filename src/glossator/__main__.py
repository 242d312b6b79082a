"""CLI entry point for glossator."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from glossator.config import Settings
from glossator.errors import GlossatorError
from glossator.generator import compile_generator, load_generator
from glossator.gloss import GlossMode, parse_gloss
from glossator.lexicon import build_index, load_lexicon
from glossator.morphology import load_morphology
from glossator.translation import Translator, translate_text

logger = logging.getLogger("glossator")

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Send glossator logs to stderr through rich.

    DEBUG with --verbose, WARNING otherwise. Safe to call more than once.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=verbose, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    sys.exit(1)


def load_translator(settings: Settings) -> Translator:
    """Load lexicon and morphology from the working directory."""
    lexicon = load_lexicon(settings.lexicon_path)
    morphology = load_morphology(settings.morphology_path)
    index = build_index(lexicon.lexemes)
    logger.info(
        f"Loaded {len(index)} lexemes and {len(morphology.inflections)} inflections"
    )
    return Translator(index, morphology, max_depth=settings.max_depth)


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "-C",
    "--directory",
    "working_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Language project directory (default: $GLOSSATOR_WORKDIR or .)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, working_dir: str | None, verbose: bool):
    """glossator - translate glosses into a constructed language."""
    setup_logging(verbose)
    try:
        settings = Settings.from_env()
    except ValueError as e:
        fail(str(e))
    if working_dir:
        settings.working_dir = Path(working_dir)
    ctx.obj = settings


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--include-sources",
    "-s",
    is_flag=True,
    help="Wrap each translation with its source gloss",
)
@click.pass_obj
def text(settings: Settings, source, include_sources: bool):
    """Translate the __glossed__ regions of a text.

    Reads SOURCE (default: stdin) and prints the text with each glossed
    region replaced by its translation.

    Example: echo "bears: __bear#PL__" | glossator text
    """
    settings.include_sources = settings.include_sources or include_sources
    try:
        translate = load_translator(settings)
        output = translate_text(
            source.read(), translate, include_source=settings.include_sources
        )
    except (GlossatorError, OSError) as e:
        fail(str(e))
    click.echo(output, nl=False)


@cli.command()
@click.argument("glosses", nargs=-1)
@click.pass_obj
def tr(settings: Settings, glosses: tuple[str, ...]):
    """Translate glosses given on the command line.

    Bare words are lexicon pointers; use ^word for a literal.

    Example: glossator tr bear#PL "[^pre+see]"
    """
    try:
        parsed = [parse_gloss(GlossMode.IMPLICIT_POINTERS, g) for g in glosses]
        translate = load_translator(settings)
    except (GlossatorError, OSError) as e:
        fail(str(e))
    click.echo(" ".join(translate(g) for g in parsed))


@cli.command()
@click.argument("rule", required=False)
@click.option("--count", "-n", default=1, show_default=True, help="Words to generate")
@click.option("--seed", type=int, default=None, help="Random seed for repeatable output")
@click.pass_obj
def gen(settings: Settings, rule: str | None, count: int, seed: int | None):
    """Generate candidate words from generators.txt.

    Uses RULE if given, else the "default" rule.
    """
    try:
        rules = load_generator(settings.generator_path)
        generate = compile_generator(random.Random(seed).random, rules)
    except (GlossatorError, OSError) as e:
        fail(str(e))
    for _ in range(count):
        click.echo(generate(rule))


def main():
    cli()


if __name__ == "__main__":
    main()
