"""CLI interface for protocol-playground."""

import logging

import typer
from rich.console import Console
from rich.table import Table

from protocol_playground.consts import (
    DEFAULT_GENERATOR,
    DEFAULT_SIDES,
    DEFAULT_TRIALS,
    LOG_FORMAT,
)
from protocol_playground.dice import Dice, roll_session
from protocol_playground.errors import InvalidArgumentError
from protocol_playground.generators import GeneratorRegistry, ReportsRange
from protocol_playground.models import Person, Starship, describe

app = typer.Typer(
    name="ppg",
    help="protocol-playground - Named entities and dice rolling through protocols",
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _print_equality(first: Starship, second: Starship) -> None:
    """Print whether two starships share a full name."""
    if first == second:
        console.print(f"[green]{first.full_name} and {second.full_name} are the same ship[/green]")
    else:
        console.print(f"[yellow]{first.full_name} and {second.full_name} are different ships[/yellow]")


@app.command()
def roll(
    sides: int = typer.Option(DEFAULT_SIDES, "--sides", "-s", help="Number of faces on the die"),
    trials: int = typer.Option(DEFAULT_TRIALS, "--trials", "-n", help="Number of rolls"),
    generator: str = typer.Option(
        DEFAULT_GENERATOR, "--generator", "-g", help="Generator name (see 'ppg generators')"
    ),
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible rolls"),
    as_json: bool = typer.Option(False, "--json", help="Print the roll session as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every draw"),
) -> None:
    """Roll a die several times."""
    _configure_logging(verbose)

    try:
        source = GeneratorRegistry().create(generator, seed=seed)
        dice = Dice(sides, source)
        session = roll_session(dice, trials, generator)
    except InvalidArgumentError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(session.model_dump_json())
        return

    for value in session.rolls:
        console.print(f"Random dice roll is {value}")


@app.command()
def name(
    ship_name: str = typer.Argument(..., help="Ship name, e.g. 'Enterprise'"),
    prefix: str = typer.Option(None, "--prefix", "-p", help="Registry prefix, e.g. 'USS'"),
) -> None:
    """Print a starship's full name."""
    console.print(describe(Starship(name=ship_name, prefix=prefix)))


@app.command()
def person(
    full_name: str = typer.Argument(..., help="Full name, printed unmodified"),
) -> None:
    """Print a person's full name."""
    console.print(describe(Person(full_name=full_name)))


@app.command()
def compare(
    name_a: str = typer.Argument(..., help="First ship name"),
    name_b: str = typer.Argument(..., help="Second ship name"),
    prefix_a: str = typer.Option(None, "--prefix-a", help="Prefix of the first ship"),
    prefix_b: str = typer.Option(None, "--prefix-b", help="Prefix of the second ship"),
) -> None:
    """Compare two starships by their full names."""
    _print_equality(
        Starship(name=name_a, prefix=prefix_a),
        Starship(name=name_b, prefix=prefix_b),
    )


@app.command()
def generators() -> None:
    """List the registered random number generators."""
    registry = GeneratorRegistry()

    table = Table(title="Random Number Generators")
    table.add_column("Name", style="cyan")
    table.add_column("Range", justify="right", style="magenta")
    table.add_column("Default", justify="center", style="green")

    for generator_name in registry.names():
        source = registry.create(generator_name)
        range_str = f"{source.low}-{source.high}" if isinstance(source, ReportsRange) else "N/A"
        table.add_row(generator_name, range_str, "*" if generator_name == DEFAULT_GENERATOR else "")

    console.print(table)


@app.command()
def demo(
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible rolls"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every draw"),
) -> None:
    """Walk through named entities, dice and starship equality."""
    _configure_logging(verbose)

    console.print("[bold]## Named entities[/bold]")
    donna = Person(full_name="Donna Mayfield")
    console.print(describe(donna))

    ncc1701 = Starship(name="Enterprise", prefix="USS")
    firefly = Starship(name="Serenity")
    console.print(describe(ncc1701))
    console.print(describe(firefly))

    console.print("\n[bold]## Dice[/bold]")
    dice = Dice(DEFAULT_SIDES, GeneratorRegistry().create(DEFAULT_GENERATOR, seed=seed))
    for _ in range(DEFAULT_TRIALS):
        console.print(f"Random dice roll is {dice.roll()}")

    console.print("\n[bold]## Equality[/bold]")
    _print_equality(ncc1701, Starship(name="USS Enterprise"))
    _print_equality(firefly, ncc1701)


if __name__ == "__main__":
    app()
