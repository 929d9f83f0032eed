"""
Normal-distribution calculations for growth queries.

The cumulative distribution is expressed through the error function:

    Φ(x) = (1 + erf((x - μ) / (σ√2))) / 2

Offsets from the mean are taken in decimal arithmetic; conversion to float
happens only when the error function is evaluated. ``erf`` saturates to ±1
for large arguments, so values far in the tails give 0 or 1 rather than
raising.
"""

from __future__ import annotations

import math
from decimal import Decimal

import numpy as np
from scipy import special, stats

from growthpredictor.models import ContinuousRange, GrowthDistribution

SQRT2 = math.sqrt(2)

# Half-width of the plotted domain, in standard deviations
PLOT_SPAN_SD = 6

DEFAULT_HALF_POINTS = 100


def _erf_argument(distribution: GrowthDistribution, x: Decimal) -> float:
    offset = Decimal(x) - distribution.mean
    return float(offset) / float(distribution.standard_deviation) / SQRT2


def density(distribution: GrowthDistribution, x: Decimal | float) -> float:
    """Probability density at ``x``."""
    return float(stats.norm.pdf(
        float(x),
        loc=float(distribution.mean),
        scale=float(distribution.standard_deviation),
    ))


def cdf(distribution: GrowthDistribution, x: Decimal) -> float:
    """Probability that a measurement is below ``x``."""
    return (1 + float(special.erf(_erf_argument(distribution, x)))) / 2


def range_probability(distribution: GrowthDistribution, value_range: ContinuousRange) -> float:
    """
    Probability that a measurement falls in ``[minimum, maximum)``.

    Differences the two error-function values directly instead of two CDFs,
    which skips the ``1 +`` and ``/ 2`` steps on each side.
    """
    upper = float(special.erf(_erf_argument(distribution, value_range.maximum)))
    lower = float(special.erf(_erf_argument(distribution, value_range.minimum)))
    return (upper - lower) / 2


def plot_domain(distribution: GrowthDistribution) -> tuple[float, float]:
    """The x-range ``mean ± 6 sd`` used when plotting a density curve."""
    span = distribution.standard_deviation * PLOT_SPAN_SD
    return float(distribution.mean - span), float(distribution.mean + span)


def density_expression(distribution: GrowthDistribution, variable: str = "x") -> str:
    """The density as a gnuplot expression in ``variable``."""
    mean = distribution.mean
    sd = distribution.standard_deviation
    return (
        f"1 / sqrt(2 * pi * {sd} ** 2)"
        f" * exp(-({variable} - {mean}) ** 2 / (2 * {sd} ** 2))"
    )


def sample_density(
    distribution: GrowthDistribution,
    half_points: int = DEFAULT_HALF_POINTS,
) -> list[tuple[float, float]]:
    """
    Sample the density across the plot domain.

    Returns ``2 * half_points + 1`` evenly spaced ``(x, y)`` pairs, symmetric
    about the mean.
    """
    if half_points < 1:
        raise ValueError("half_points must be at least 1")

    mean = float(distribution.mean)
    sd = float(distribution.standard_deviation)
    offsets = PLOT_SPAN_SD * sd * np.arange(-half_points, half_points + 1) / half_points
    xs = mean + offsets
    ys = stats.norm.pdf(xs, loc=mean, scale=sd)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]
