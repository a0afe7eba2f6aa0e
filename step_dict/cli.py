"""Command-line interface for stepping through dictionary words."""

from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from step_dict import configure_logging
from step_dict.config import Settings, get_settings
from step_dict.dictionary import DictionaryTable, WordNotFoundError, get_dictionary
from step_dict.ranges import word_range
from step_dict.word import Word

console = Console()
err_console = Console(stderr=True)


def configure_verbose_logging() -> None:
    """Configure verbose debug logging."""
    logger.remove()
    logger.add(
        lambda msg: err_console.print(msg, end="", markup=False, highlight=False),
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    err_console.print("[dim]Debug logging enabled[/dim]")


def load_settings_or_abort() -> Settings:
    """Load settings from the environment / .env file or abort with a helpful message."""
    try:
        return get_settings()
    except ValidationError as e:
        err_console.print("[bold red]Error:[/bold red] Invalid configuration")
        err_console.print("\nCheck STEP_DICT_WORD_LIST and STEP_DICT_LOG_LEVEL in your environment or .env file.\n")
        err_console.print(f"Details: {e}")
        raise click.Abort from e


def load_dictionary_or_abort(word_list: Path | None) -> DictionaryTable:
    """Load the process-wide dictionary or abort if the word list is unusable."""
    try:
        return get_dictionary(word_list)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[bold red]Error:[/bold red] Failed to load word list: {e}")
        raise click.Abort from e


def missing_word_abort(error: WordNotFoundError) -> click.Abort:
    """Report a word outside the dictionary and return the Abort to raise."""
    err_console.print(f"[bold red]Error:[/bold red] '{error.word}' is not in the dictionary")
    return click.Abort()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--word-list",
    "word_list",
    default=None,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Sorted word list to step through (default: STEP_DICT_WORD_LIST or the bundled list)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, word_list: Path | None) -> None:
    """Step through the words of a fixed, sorted dictionary."""
    settings = load_settings_or_abort()

    if verbose:
        configure_verbose_logging()
    else:
        configure_logging(level=settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["table"] = load_dictionary_or_abort(word_list)


@cli.command("range")
@click.argument("start")
@click.argument("end")
@click.option("--inclusive", "-i", is_flag=True, help="Include END in the output")
@click.option("--reverse", "-r", is_flag=True, help="Print the range last word first")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None, help="Stop after N words")
def range_command(start: str, end: str, inclusive: bool, reverse: bool, limit: int | None) -> None:
    """Print every dictionary word from START to END, one per line."""
    words = word_range(start, end, inclusive=inclusive)
    try:
        iterator = reversed(words) if reverse else iter(words)
        for printed, word in enumerate(iterator):
            if limit is not None and printed >= limit:
                break
            click.echo(str(word))
    except WordNotFoundError as e:
        raise missing_word_abort(e) from e


@cli.command()
@click.argument("start")
@click.argument("end")
def distance(start: str, end: str) -> None:
    """Print how many steps forward END is from START."""
    try:
        steps = Word.steps_between(Word(start), Word(end))
    except WordNotFoundError as e:
        raise missing_word_abort(e) from e

    if steps is None:
        err_console.print(f"[yellow]'{end}' comes before '{start}'; no forward distance[/yellow]")
        return
    click.echo(str(steps))


@cli.command()
@click.argument("word")
@click.argument("count", type=click.IntRange(min=0))
@click.option("--backward", "-b", is_flag=True, help="Step toward the start of the dictionary")
@click.pass_context
def step(ctx: click.Context, word: str, count: int, backward: bool) -> None:
    """Print the word COUNT places after (or before) WORD."""
    try:
        if backward:
            result = Word.backward_checked(Word(word), count)
        else:
            result = Word.forward_checked(Word(word), count)
    except WordNotFoundError as e:
        raise missing_word_abort(e) from e

    if result is None:
        direction = "before" if backward else "after"
        err_console.print(f"[yellow]No word {count} places {direction} '{word}'[/yellow]")
        ctx.exit(1)
    click.echo(str(result))


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show where the dictionary came from and its bounds."""
    table: DictionaryTable = ctx.obj["table"]
    console.print(f"Source: [cyan]{table.source}[/cyan]")
    console.print(f"Words: [green]{len(table)}[/green]")
    console.print(f"First: [blue]{table.first}[/blue]")
    console.print(f"Last: [blue]{table.last}[/blue]")


if __name__ == "__main__":
    cli()
