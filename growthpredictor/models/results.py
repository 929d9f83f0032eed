"""
Query results handed to the rendering sinks.

Axis hints use ``None`` for an open bound (gnuplot's ``*``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

from .growth import Measurement

AxisRange = tuple[Optional[float], Optional[float]]


class DistributionCurve(BaseModel):
    """Density curve of one measurement at one age."""

    kind: Literal["distribution"] = "distribution"
    measurement: Measurement
    age: int
    mean: Decimal
    standard_deviation: Decimal
    x_range: AxisRange
    y_range: AxisRange = (0.0, None)
    expression: str
    points: list[tuple[float, float]] = Field(default_factory=list)


class AgeProbabilities(BaseModel):
    """Probability of a measurement range for every reference age."""

    kind: Literal["age-probabilities"] = "age-probabilities"
    measurement: Measurement
    minimum: Decimal
    maximum: Decimal
    x_range: AxisRange
    y_range: AxisRange = (0.0, None)
    points: list[tuple[int, float]] = Field(default_factory=list)


class CumulativeProbability(BaseModel):
    """Probability that a measurement at an age falls below a value."""

    kind: Literal["cumulative"] = "cumulative"
    measurement: Measurement
    age: int
    value: Decimal
    probability: float

    @computed_field
    @property
    def formatted(self) -> str:
        return format(self.probability, ".20E")


class CommandHelp(BaseModel):
    kind: Literal["help"] = "help"
    lines: list[str]


QueryResult = Union[DistributionCurve, AgeProbabilities, CumulativeProbability, CommandHelp]
