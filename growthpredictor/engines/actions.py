"""
Query actions and the default command registry.

Each action reads the reference table through an ``ActionContext`` and
returns a result model for a sink to render. Nothing here prints or plots.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from knowledge.growth import ReferenceTable
from growthpredictor.errors import UnknownAgeError
from growthpredictor.models import (
    AgeProbabilities,
    CommandHelp,
    ContinuousRange,
    CumulativeProbability,
    DistributionCurve,
    Measurement,
)

from . import distribution as dist
from .resolver import CommandRegistry, CommandVariant

EXIT_HINT = "Press Ctrl-D (Ctrl-Z then Enter on Windows) to exit"


@dataclass(frozen=True)
class ActionContext:
    """Read-only handles an action may use."""

    table: ReferenceTable
    registry: CommandRegistry
    density_half_points: int = dist.DEFAULT_HALF_POINTS


def _distribution_at(context: ActionContext, measurement: Measurement, age: int):
    try:
        return context.table.distribution(age, measurement)
    except KeyError:
        raise UnknownAgeError(age) from None


def plot_growth_distribution(
    context: ActionContext,
    measurement: Measurement,
    age: int,
) -> DistributionCurve:
    """Density curve of ``measurement`` at ``age`` over mean ± 6 sd."""
    distribution = _distribution_at(context, measurement, age)
    return DistributionCurve(
        measurement=measurement,
        age=age,
        mean=distribution.mean,
        standard_deviation=distribution.standard_deviation,
        x_range=dist.plot_domain(distribution),
        expression=dist.density_expression(distribution),
        points=dist.sample_density(distribution, context.density_half_points),
    )


def age_group_probabilities(
    context: ActionContext,
    measurement: Measurement,
    value_range: ContinuousRange,
) -> AgeProbabilities:
    """Probability of ``value_range`` at every reference age, ascending."""
    points = [
        (age, dist.range_probability(measurement.select(data), value_range))
        for age, data in context.table.items()
    ]
    ages = context.table.ages
    return AgeProbabilities(
        measurement=measurement,
        minimum=value_range.minimum,
        maximum=value_range.maximum,
        x_range=(float(ages[0]), float(ages[-1])),
        points=points,
    )


def cumulative_probability(
    context: ActionContext,
    measurement: Measurement,
    age: int,
    value: Decimal,
) -> CumulativeProbability:
    """Probability that ``measurement`` at ``age`` is below ``value``."""
    distribution = _distribution_at(context, measurement, age)
    return CumulativeProbability(
        measurement=measurement,
        age=age,
        value=value,
        probability=dist.cdf(distribution, value),
    )


def command_help(context: ActionContext) -> CommandHelp:
    lines = ["Commands:"]
    lines.extend(f"  {variant.usage()}" for variant in context.registry)
    lines.append(EXIT_HINT)
    return CommandHelp(lines=lines)


def build_registry() -> CommandRegistry:
    """
    Register the built-in command variants.

    ``lhs`` and ``gis`` are the same query under two names. Height variants
    come before weight variants, so a line that fits both resolves to height.
    """
    H, W = Measurement.HEIGHT, Measurement.WEIGHT
    registry = CommandRegistry()

    registry.register(CommandVariant(
        "height",
        lambda ctx, args: plot_growth_distribution(ctx, H, args.age),
        uses_age=True,
        summary="Height distribution at an age",
    ))
    registry.register(CommandVariant(
        "weight",
        lambda ctx, args: plot_growth_distribution(ctx, W, args.age),
        uses_age=True,
        summary="Weight distribution at an age",
    ))
    registry.register(CommandVariant(
        "age",
        lambda ctx, args: age_group_probabilities(ctx, H, args.height),
        uses_height=True,
        height_is_range=True,
        summary="Probability of a height range at each age",
    ))
    registry.register(CommandVariant(
        "age",
        lambda ctx, args: age_group_probabilities(ctx, W, args.weight),
        uses_weight=True,
        weight_is_range=True,
        summary="Probability of a weight range at each age",
    ))
    for target in ("lhs", "gis"):
        registry.register(CommandVariant(
            target,
            lambda ctx, args: cumulative_probability(ctx, H, args.age, args.height),
            uses_age=True,
            uses_height=True,
            summary="Probability of a lower height at an age",
        ))
        registry.register(CommandVariant(
            target,
            lambda ctx, args: cumulative_probability(ctx, W, args.age, args.weight),
            uses_age=True,
            uses_weight=True,
            summary="Probability of a lower weight at an age",
        ))
    registry.register(CommandVariant(
        "help",
        lambda ctx, args: command_help(ctx),
        summary="List commands",
    ))
    return registry
