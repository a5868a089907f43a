import logging
from pathlib import Path
from typing import Optional

import typer

from bacon_number.config import BaconConfig
from bacon_number.exceptions import DatasetNotFoundException
from bacon_number.logging_config import setup_logging
from bacon_number.solver import BaconSolver, DistanceResult
from bacon_number.utils.formatting import clean_input_name, format_chain

logger = logging.getLogger(__name__)

app = typer.Typer(help="Degrees of separation between actors in a movie cast dataset.")

NO_RESULT_MESSAGE = "Invalid input(s) or no connection"
INVALID_INPUT_MESSAGE = "Please enter valid input (example: Bacon, Kevin)"
QUIT_CHOICES = {"q", "quit", "exit"}

DataOption = typer.Option(
    None,
    "--data",
    "-d",
    help="Path to the slash-delimited movie cast file. Defaults to BACON_DATA_PATH.",
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level for bacon_number modules (DEBUG, INFO, WARNING, ERROR). Other loggers keep BACON_LOG_LEVEL.",
    ),
    plain_logs: bool = typer.Option(
        False,
        "--plain-logs",
        help="Use plain log lines instead of Rich output.",
    ),
):
    """
    Find Bacon numbers and actor-to-actor distances.
    """
    config = BaconConfig.from_env()
    if plain_logs:
        config.use_rich_logs = False

    setup_logging(
        level=config.log_level,
        use_rich=config.use_rich_logs,
        package_level=log_level,
    )
    ctx.obj = config


def _load_solver(config: BaconConfig, data: Optional[Path]) -> BaconSolver:
    data_path = data or config.data_path
    if data_path is None:
        typer.echo("No dataset given. Pass --data or set BACON_DATA_PATH.", err=True)
        raise typer.Exit(code=2)

    try:
        return BaconSolver.from_file(data_path, config)
    except DatasetNotFoundException as e:
        logger.error(e.message)
        typer.echo(e.message, err=True)
        raise typer.Exit(code=1)


def _print_result(result: DistanceResult, label: str) -> None:
    if not result.found:
        typer.echo(NO_RESULT_MESSAGE)
        if result.message:
            typer.echo(result.message)
        return

    for line in format_chain(result.hops):
        typer.echo(line)
    typer.echo(f"{label}: {result.distance}")


@app.command()
def bacon(
    ctx: typer.Context,
    actor: str = typer.Argument(..., help='Actor name exactly as in the dataset, e.g. "Bacon, Kevin".'),
    data: Optional[Path] = DataOption,
):
    """
    Print the distance of an actor to the reference actor.
    """
    config: BaconConfig = ctx.obj
    solver = _load_solver(config, data)
    actor = clean_input_name(actor)
    if not actor:
        typer.echo(INVALID_INPUT_MESSAGE, err=True)
        raise typer.Exit(code=2)
    result = solver.bacon_number(actor)
    _print_result(result, "Bacon Number")
    if not result.found:
        raise typer.Exit(code=1)


@app.command()
def distance(
    ctx: typer.Context,
    first: str = typer.Argument(..., help="First actor name."),
    second: str = typer.Argument(..., help="Second actor name."),
    data: Optional[Path] = DataOption,
):
    """
    Print the distance between two actors.
    """
    config: BaconConfig = ctx.obj
    solver = _load_solver(config, data)
    first, second = clean_input_name(first), clean_input_name(second)
    if not first or not second:
        typer.echo(INVALID_INPUT_MESSAGE, err=True)
        raise typer.Exit(code=2)
    result = solver.find_distance(first, second)
    _print_result(result, "Distance")
    if not result.found:
        raise typer.Exit(code=1)


@app.command()
def stats(
    ctx: typer.Context,
    data: Optional[Path] = DataOption,
):
    """
    Print statistics about the loaded collaboration graph.
    """
    config: BaconConfig = ctx.obj
    solver = _load_solver(config, data)
    graph = solver.graph
    build_stats = graph.stats

    typer.echo(f"Records: {build_stats.records} ({build_stats.skipped} skipped)")
    typer.echo(f"Movies: {build_stats.movies}")
    typer.echo(f"Actors: {build_stats.actors}")
    typer.echo(f"Appearances: {build_stats.appearances}")
    typer.echo(f"Table size: {graph.actors.size}")
    typer.echo(f"Longest actor chain: {max(graph.actors.bucket_sizes())}")
    typer.echo(f"Build time: {build_stats.build_time_ms:.1f}ms")


@app.command()
def interactive(
    ctx: typer.Context,
    data: Optional[Path] = DataOption,
):
    """
    Load the dataset once and answer queries from a menu until 'q' is entered.
    """
    config: BaconConfig = ctx.obj
    solver = _load_solver(config, data)

    while True:
        typer.echo("Please enter your operation type:")
        typer.echo(f"1. Find Bacon Number (Distance of an actor to {solver.reference_actor})")
        typer.echo("2. Find Distance (Distance of two actors)")
        typer.echo("q. Quit")
        choice = clean_input_name(typer.prompt("Choice"))

        if choice.lower() in QUIT_CHOICES:
            break

        if choice == "1":
            actor = clean_input_name(typer.prompt("Please enter an actor name"))
            if not actor:
                typer.echo(INVALID_INPUT_MESSAGE)
                continue
            _print_result(solver.bacon_number(actor), "Bacon Number")
        elif choice == "2":
            first = clean_input_name(typer.prompt("Please enter first actor name"))
            second = clean_input_name(typer.prompt("Please enter second actor name"))
            if not first or not second:
                typer.echo(INVALID_INPUT_MESSAGE)
                continue
            _print_result(solver.find_distance(first, second), "Distance")
        else:
            typer.echo("Invalid choice")


if __name__ == "__main__":
    app()
