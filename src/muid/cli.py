import json
import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from muid import config
from muid.corpus import default_corpus, load_corpus
from muid.errors import MiningTimeout, MuidError
from muid.log import log, setup_logging
from muid.miner import mine_parallel
from muid.muid import Muid

logger = logging.getLogger("muid.cli")


def _muid(ctx) -> Muid:
    """Build the Muid for this invocation, once."""
    if ctx.obj.get("muid") is None:
        corpus_path = ctx.obj.get("corpus_path")
        try:
            corpus = load_corpus(corpus_path) if corpus_path else default_corpus()
        except MuidError as e:
            raise click.ClickException(str(e))
        ctx.obj["muid"] = Muid(corpus)
    return ctx.obj["muid"]


@click.group()
@click.option(
    "--corpus",
    "corpus_path",
    envvar=config.CORPUS_ENV,
    type=click.Path(dir_okay=False),
    help="Alternate corpus JSON file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, corpus_path, verbose):
    """Mine and check memorable unique identifiers."""
    setup_logging("DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    ctx.obj["corpus_path"] = corpus_path


@cli.command("create")
@click.option(
    "--difficulty",
    "-d",
    type=int,
    default=config.DEFAULT_DIFFICULTY,
    show_default=True,
    help="Number of hash characters the animal must cover.",
)
@click.option("--timeout", type=float, help="Give up after this many seconds.")
@click.pass_context
def create(ctx, difficulty, timeout):
    """Mines a single new key and prints it as JSON."""
    muid = _muid(ctx)
    try:
        found = muid.create(difficulty, timeout=timeout)
    except MiningTimeout as e:
        raise click.ClickException(str(e))
    except MuidError as e:
        raise click.ClickException(f"Failed to create key: {e}")
    click.echo(json.dumps(found.to_dict(), indent=2))


@cli.command("mine")
@click.option("--difficulty", "-d", type=int, required=True, help="Hash characters to match.")
@click.option("--count", "-n", type=int, default=1, show_default=True, help="Keys to find.")
@click.option("--workers", "-w", type=int, help="Worker processes (default: one per core).")
@click.option("--timeout", type=float, help="Give up after this many seconds.")
@click.pass_context
def mine(ctx, difficulty, count, workers, timeout):
    """Mines keys in parallel and prints them as a table."""
    muid = _muid(ctx)
    console = Console()
    timed_out = False

    expected = muid.miner.expected_attempts(difficulty)
    try:
        with console.status(
            f"Mining {count} key(s) at difficulty {difficulty} "
            f"(~{expected:,.0f} attempts each)..."
        ):
            results = mine_parallel(
                muid.corpus, difficulty, count, workers=workers, timeout=timeout
            )
    except MiningTimeout as e:
        results = e.results
        timed_out = True
    except MuidError as e:
        raise click.ClickException(f"Mining failed: {e}")

    table = Table(title=f"Mined keys (difficulty {difficulty})")
    table.add_column("Animal", style="bold green")
    table.add_column("Key", style="cyan")
    table.add_column("Hash")
    for found in results:
        table.add_row(found.pretty, found.key, found.hash)
    console.print(table)

    if timed_out:
        click.echo(
            f"Timed out after {timeout}s with {len(results)} of {count} key(s).",
            err=True,
        )
        sys.exit(1)


@cli.command("validate")
@click.argument("key")
@click.pass_context
def validate(ctx, key):
    """Checks whether KEY hashes to an animal."""
    muid = _muid(ctx)
    try:
        valid = muid.validate(key)
    except MuidError as e:
        raise click.ClickException(str(e))
    click.echo("valid" if valid else "invalid")
    if not valid:
        sys.exit(1)


@cli.command("animal")
@click.argument("key")
@click.pass_context
def animal(ctx, key):
    """Prints the animal for a private KEY."""
    muid = _muid(ctx)
    try:
        name = muid.animal(key)
    except MuidError as e:
        raise click.ClickException(str(e))
    if name is None:
        raise click.ClickException(f"No animal found for key {key}")
    click.echo(name)


@cli.command("difficulty")
@click.argument("key")
@click.pass_context
def difficulty(ctx, key):
    """Prints the difficulty of KEY (0 if it has no animal)."""
    muid = _muid(ctx)
    try:
        click.echo(muid.difficulty(key))
    except MuidError as e:
        raise click.ClickException(str(e))


@cli.command("search")
@click.argument("code")
@click.pass_context
def search(ctx, code):
    """Prints the animal for a public CODE (the hash of a key)."""
    muid = _muid(ctx)
    try:
        name = muid.search(code)
    except MuidError as e:
        raise click.ClickException(str(e))
    if name is None:
        raise click.ClickException(f"No animal found for code {code}")
    click.echo(name)


@cli.command("shash")
@click.argument("source", type=click.File("rb"))
def shash(source):
    """Prints the 32-character hash of a file's contents ('-' for stdin)."""
    click.echo(Muid.shash(source.read()))


@cli.command("corpus-info")
@click.pass_context
def corpus_info(ctx):
    """Shows corpus entries per prefix length and the cost of mining each."""
    muid = _muid(ctx)
    corpus = muid.corpus
    log(logger, "debug", "Describing corpus", corpus=repr(corpus))

    table = Table(title=f"Corpus: {len(corpus)} entries")
    table.add_column("Difficulty", justify="right")
    table.add_column("Entries", justify="right")
    table.add_column("Expected attempts", justify="right")
    for length in sorted(corpus.lengths):
        expected = muid.miner.expected_attempts(length)
        style = "red" if length >= config.WARN_DIFFICULTY else None
        table.add_row(
            str(length), str(corpus.count(length)), f"{expected:,.0f}", style=style
        )
    Console().print(table)


if __name__ == "__main__":
    cli()
