"""
Gnuplot command-script sink.

Writes the commands a gnuplot session needs to draw a result to any text
stream, e.g. a file that is later run with ``gnuplot -p script.gp``. No
gnuplot process is started here.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from growthpredictor.models import AgeProbabilities, DistributionCurve, QueryResult


def range_expression(low: float | None, high: float | None) -> str:
    """Gnuplot range literal; ``None`` becomes the autoscale marker ``*``."""
    return "[{}:{}]".format("*" if low is None else low, "*" if high is None else high)


class GnuplotScript:
    """Line-oriented writer of gnuplot commands."""

    def __init__(self, stream: TextIO, show_key: bool = False):
        self.stream = stream
        if not show_key:
            self.send("unset key")

    def send(self, message: str) -> None:
        self.stream.write(message + "\n")
        self.stream.flush()

    def set_xrange(self, low: float | None, high: float | None) -> None:
        self.send(f"set xrange {range_expression(low, high)}")

    def set_yrange(self, low: float | None, high: float | None) -> None:
        self.send(f"set yrange {range_expression(low, high)}")

    def plot(self, arguments: str) -> None:
        self.send(f"plot {arguments}")

    def plot_data(self, rows: Iterable[str], arguments: str = "") -> None:
        """Plot inline data rows terminated by ``e``."""
        self.send("plot '-'" + (f" {arguments}" if arguments.strip() else ""))
        for row in rows:
            self.send(row)
        self.send("e")

    def write_result(self, result: QueryResult) -> bool:
        """
        Emit the commands for a plottable result.

        Returns False for results that have nothing to plot.
        """
        if isinstance(result, DistributionCurve):
            self.set_xrange(*result.x_range)
            self.set_yrange(*result.y_range)
            self.plot(result.expression)
            return True
        if isinstance(result, AgeProbabilities):
            self.set_xrange(*result.x_range)
            self.set_yrange(*result.y_range)
            self.plot_data((f"{age} {probability!r}" for age, probability in result.points), "w lp")
            return True
        return False
