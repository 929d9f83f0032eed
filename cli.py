#!/usr/bin/env python3
"""
Growth Predictor CLI

Command-line interface for querying child growth reference distributions.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


def setup_paths():
    """Add the project root to sys.path for imports."""
    root = Path(__file__).parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


setup_paths()

from growthpredictor import __version__  # noqa: E402
from growthpredictor.config import get_settings  # noqa: E402
from growthpredictor.engines import QuerySession  # noqa: E402
from growthpredictor.errors import GrowthPredictorError  # noqa: E402
from growthpredictor.exporters import GnuplotScript, export_json, render_result  # noqa: E402


def report_error(error: GrowthPredictorError) -> None:
    """Print an error's diagnostics, one per line."""
    for line in error.diagnostics():
        console.print(f"[red]{escape(line)}[/red]", highlight=False)


def run_lines(
    session: QuerySession,
    lines,
    gnuplot: Optional[GnuplotScript] = None,
    prompt: str = "",
) -> int:
    """
    Run command lines until the input is exhausted.

    Blank lines are skipped. Errors are reported and the loop continues.

    Returns:
        Number of lines that failed
    """
    failures = 0
    if prompt:
        console.print(prompt, end="", markup=False, highlight=False)
    for raw in lines:
        line = raw.strip()
        if line:
            try:
                result = session.execute(line)
            except GrowthPredictorError as e:
                report_error(e)
                failures += 1
            else:
                render_result(console, result)
                if gnuplot is not None:
                    gnuplot.write_result(result)
        if prompt:
            console.print(prompt, end="", markup=False, highlight=False)
    if prompt:
        console.print()
    return failures


@click.group()
@click.version_option(version=__version__, prog_name="growthpredictor")
@click.option("--table", "table_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON reference table to use instead of the built-in one")
@click.option("--density-points", type=int, help="Samples on each side of the mean for density curves")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging level")
@click.pass_context
def cli(
    ctx: click.Context,
    table_path: Optional[Path],
    density_points: Optional[int],
    log_level: Optional[str],
):
    """
    Growth Predictor - Child Growth Reference Queries

    Ask how likely a height or weight is at a given age, or which ages a
    measurement is most typical for.
    """
    # Explicit options override the environment for this invocation only
    settings = get_settings().override(table_path, density_points, log_level)

    try:
        settings.validate()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger().setLevel(settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["session_factory"] = lambda: _load_session(settings)


def _load_session(settings) -> QuerySession:
    try:
        return QuerySession.from_settings(settings)
    except ValueError as e:
        raise click.UsageError(str(e)) from e


@cli.command()
@click.option("--gnuplot", "gnuplot_file", type=click.File("w"),
              help="Also write gnuplot commands for plottable results to this file")
@click.pass_context
def repl(ctx: click.Context, gnuplot_file: Optional[TextIO]):
    """
    Start an interactive query session.

    Examples:

        > height 10yo

        > age 150:5cm

        > lhs 10yo 140cm
    """
    session = ctx.obj["session_factory"]()
    settings = ctx.obj["settings"]
    gnuplot = GnuplotScript(gnuplot_file) if gnuplot_file else None

    console.print("[bold]Welcome to Growth Predictor[/bold]")
    console.print("[dim]Type 'help' for a list of commands[/dim]")
    console.print()

    run_lines(session, click.get_text_stream("stdin"), gnuplot=gnuplot, prompt=settings.prompt)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--gnuplot", "gnuplot_file", type=click.File("w"),
              help="Write gnuplot commands for the result to this file")
@click.pass_context
def query(ctx: click.Context, words: tuple, as_json: bool, gnuplot_file: Optional[TextIO]):
    """
    Run a single query.

    Examples:

        growthpredictor query lhs 10yo 140cm

        growthpredictor query age 30:2kg --json
    """
    session = ctx.obj["session_factory"]()

    try:
        result = session.execute(" ".join(words))
    except GrowthPredictorError as e:
        report_error(e)
        ctx.exit(1)

    if as_json:
        click.echo(export_json(result))
    else:
        render_result(console, result)

    if gnuplot_file is not None:
        GnuplotScript(gnuplot_file).write_result(result)


@cli.command()
@click.pass_context
def table(ctx: click.Context):
    """
    Show the reference table.
    """
    session = ctx.obj["session_factory"]()

    out = Table(title="Growth Reference by Age")
    out.add_column("Age", justify="right", style="cyan")
    out.add_column("Height mean (cm)", justify="right")
    out.add_column("Height SD", justify="right")
    out.add_column("Weight mean (kg)", justify="right")
    out.add_column("Weight SD", justify="right")

    for age, data in session.table.items():
        out.add_row(
            str(age),
            str(data.height.mean),
            str(data.height.standard_deviation),
            str(data.weight.mean),
            str(data.weight.standard_deviation),
        )

    console.print(out)


@cli.command()
@click.pass_context
def commands(ctx: click.Context):
    """
    List available query commands.
    """
    session = ctx.obj["session_factory"]()

    out = Table(title="Query Commands")
    out.add_column("Usage", style="cyan")
    out.add_column("Description")

    for variant in session.registry:
        out.add_row(variant.usage(), variant.summary)

    console.print(out)


@cli.command()
def info():
    """
    Show information about Growth Predictor.
    """
    console.print(Panel(
        "[bold]Growth Predictor[/bold]\n\n"
        "Statistical queries over a reference table of child height and\n"
        "weight distributions for ages 5 to 17.\n\n"
        "[dim]Each age group is modeled as a normal distribution per measurement.[/dim]",
        title="About",
        border_style="blue",
    ))

    console.print("\n[bold]Measurements:[/bold]")
    console.print("  • <age>yo            age in whole years")
    console.print("  • <value>[:<w>]cm    height, optionally a range of width w")
    console.print("  • <value>[:<w>]kg    weight, optionally a range of width w")
    console.print("\n  Without :<w>, a value covers its last decimal place:")
    console.print("  160cm is [160, 161), 160.25cm is [160.25, 160.26).")

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  growthpredictor query height 10yo")
    console.print("  growthpredictor query age 150:5cm")
    console.print("  growthpredictor query lhs 10yo 140cm")
    console.print("  growthpredictor repl")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
