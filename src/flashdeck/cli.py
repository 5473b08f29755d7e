"""CLI entry point for flashdeck."""

import sys

import click

from flashdeck.config.log_setup import configure_logging
from flashdeck.config.settings import Settings


@click.group(invoke_without_command=True)
@click.option("--source", default=None, help="Deck file path or http(s) URL")
@click.option("--log-level", default=None, help="Override the configured log level")
@click.pass_context
def main(ctx: click.Context, source: str | None, log_level: str | None) -> None:
    """flashdeck — flashcard study in the terminal."""
    ctx.ensure_object(dict)
    settings = Settings.load()
    ctx.obj["settings"] = settings
    ctx.obj["source"] = source or settings.get_source()
    ctx.obj["log_level"] = log_level or settings.log_level
    if ctx.invoked_subcommand is None:
        ctx.invoke(launch)


_source_option = click.option(
    "--source", default=None, help="Deck file path or http(s) URL (overrides the group option)",
)


@main.command()
@_source_option
@click.pass_context
def launch(ctx: click.Context, source: str | None) -> None:
    """Launch the interactive study app."""
    from flashdeck.app.main_app import FlashdeckApp

    configure_logging(ctx.obj["log_level"], tui=True)
    app = FlashdeckApp(settings=ctx.obj["settings"], source=source or ctx.obj["source"])
    app.run()


@main.command()
@_source_option
@click.pass_context
def cards(ctx: click.Context, source: str | None) -> None:
    """List the cards parsed from the deck source."""
    from flashdeck.engine.deck_loader import load_deck

    configure_logging(ctx.obj["log_level"])
    settings: Settings = ctx.obj["settings"]
    deck = load_deck(source or ctx.obj["source"], timeout=settings.fetch_timeout_seconds)
    if deck.used_fallback:
        click.echo("(deck source unavailable, showing built-in sample cards)", err=True)
    for card in deck.cards:
        click.echo(f"  {card.id}: {card.question} -> {card.answer}")
    click.echo(f"{len(deck.cards)} cards")


@main.command()
@click.argument("guess")
@click.argument("expected")
def check(guess: str, expected: str) -> None:
    """Grade GUESS against EXPECTED the way typed answers are graded."""
    from flashdeck.engine.normalizer import answers_match

    if answers_match(guess, expected):
        click.echo("correct")
    else:
        click.echo("incorrect")
        sys.exit(1)
