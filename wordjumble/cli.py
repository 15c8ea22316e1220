import logging
import random
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from wordjumble.game.engine import JumbleEngine
from wordjumble.game.errors import JumbleError
from wordjumble.game.models import DEFAULT_DICTIONARY, JumbleConfig, LengthFilter
from wordjumble.game.scrambler import scramble as scramble_word
from wordjumble.storage.json_store import JsonStorage

app = typer.Typer(help="wordjumble: create and solve Jumble word puzzles.")
console = Console()
logger = logging.getLogger(__name__)

DictionaryOption = typer.Option(
    DEFAULT_DICTIONARY,
    "--dictionary",
    "-d",
    envvar="JUMBLE_DICTIONARY",
    help="Word list, one word per line (or a JSON array)",
)

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

def _rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None

def _fail(error: JumbleError):
    logger.debug("Command failed", exc_info=error)
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)

@app.command()
def create(
    count: int = typer.Option(5, "--count", "-n", help="Number of words in the puzzle"),
    allow: Optional[List[int]] = typer.Option(None, "--allow", help="Word length to allow (repeatable)"),
    deny: Optional[List[int]] = typer.Option(None, "--deny", help="Word length to skip (repeatable)"),
    dictionary: str = DictionaryOption,
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible puzzles"),
    save_dir: Optional[str] = typer.Option(None, help="Directory to save the puzzle as JSON"),
):
    """
    Creates a jumble from words that unscramble exactly one way.
    """
    try:
        config = JumbleConfig(
            num_words=count,
            dictionary=dictionary,
            length_filter=LengthFilter(allow=allow or [], deny=deny or []),
        )
    except ValueError as e:
        console.print(f"[red]Error: invalid options: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    try:
        engine = JumbleEngine.from_config(config, _rng(seed))
        puzzle = engine.create_puzzle()
    except JumbleError as e:
        _fail(e)

    table = Table(title="Jumble")
    table.add_column("#", justify="right")
    table.add_column("Scrambled", style="bold cyan")
    table.add_column("Solution", style="green")
    for i, entry in enumerate(puzzle.entries):
        table.add_row(str(i + 1), entry.scrambled, entry.solution)
    console.print(table)

    if save_dir:
        path = JsonStorage(save_dir).save_puzzle(puzzle)
        console.print(f"Saved puzzle to {path}")

@app.command()
def scramble(
    word: str = typer.Argument(..., help="Word to jumble"),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible scramble"),
):
    """
    Jumbles a single word.
    """
    try:
        jumbled = scramble_word(word, _rng(seed))
    except JumbleError as e:
        _fail(e)
    console.print(f"{jumbled} ({word.strip().lower()})")

def _print_words(words: List[str]):
    if not words:
        console.print("No words found")
        return
    for word in words:
        console.print(word)

@app.command()
def solve(
    word: str = typer.Argument(..., help="Jumbled word to solve"),
    dictionary: str = DictionaryOption,
):
    """
    Lists every dictionary word made of the same letters.
    """
    try:
        engine = JumbleEngine.from_config(JumbleConfig(dictionary=dictionary))
        words = engine.solve_word(word)
    except JumbleError as e:
        _fail(e)
    _print_words(words)

@app.command()
def crossword(
    pattern: str = typer.Argument(..., help="Pattern such as 'c?m?l', '?' marks an unknown letter"),
    dictionary: str = DictionaryOption,
):
    """
    Solves an incomplete word as needed for a crossword.
    """
    try:
        engine = JumbleEngine.from_config(JumbleConfig(dictionary=dictionary))
        words = engine.solve_crossword(pattern)
    except JumbleError as e:
        _fail(e)
    _print_words(words)

if __name__ == "__main__":
    app()
