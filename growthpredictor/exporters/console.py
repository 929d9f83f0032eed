"""
Rich console rendering for query results.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from growthpredictor.models import (
    AgeProbabilities,
    CommandHelp,
    CumulativeProbability,
    DistributionCurve,
    QueryResult,
)


def _format_axis(bounds: tuple[float | None, float | None]) -> str:
    low, high = ("*" if b is None else f"{b:g}" for b in bounds)
    return f"[{low}:{high}]"


def render_result(console: Console, result: QueryResult) -> None:
    """Print a query result to the console."""
    if isinstance(result, CumulativeProbability):
        console.print(result.formatted, markup=False, highlight=False)
    elif isinstance(result, CommandHelp):
        for line in result.lines:
            console.print(line, markup=False, highlight=False)
    elif isinstance(result, AgeProbabilities):
        unit = result.measurement.unit
        table = Table(
            title=escape(f"P({result.measurement.value} in [{result.minimum}, {result.maximum}) {unit})"),
            min_width=40,
        )
        table.add_column("Age", justify="right", style="cyan")
        table.add_column("Probability", justify="right", style="green")
        for age, probability in result.points:
            table.add_row(str(age), f"{probability:.6e}")
        console.print(table)
    elif isinstance(result, DistributionCurve):
        console.print(Panel(
            f"[bold]{result.measurement.value.capitalize()} at {result.age} years[/bold]\n\n"
            f"Mean: {result.mean} {result.measurement.unit}\n"
            f"Standard deviation: {result.standard_deviation} {result.measurement.unit}\n"
            f"X range: {escape(_format_axis(result.x_range))}\n"
            f"Samples: {len(result.points)}\n\n"
            f"[dim]{escape(result.expression)}[/dim]",
            title="Growth Distribution",
            border_style="blue",
        ))
    else:
        raise TypeError(f"Cannot render {type(result).__name__}")
