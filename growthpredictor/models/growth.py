"""
Reference growth distributions.

Each reference age carries one normal distribution for height (cm) and one
for weight (kg). These models are immutable; the reference table is built
once and only read afterwards.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GrowthDistribution(BaseModel):
    """Normal distribution of a single measurement at a single age."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mean: Decimal
    standard_deviation: Decimal = Field(gt=0, alias="standardDeviation")


class AgeGroupGrowthData(BaseModel):
    """Height and weight distributions for one age group."""

    model_config = ConfigDict(frozen=True)

    height: GrowthDistribution
    weight: GrowthDistribution

    @classmethod
    def from_pairs(
        cls,
        height: tuple[Decimal | str, Decimal | str],
        weight: tuple[Decimal | str, Decimal | str],
    ) -> AgeGroupGrowthData:
        """Build from ``(mean, standard_deviation)`` pairs."""
        return cls(
            height=GrowthDistribution(
                mean=Decimal(height[0]), standard_deviation=Decimal(height[1])
            ),
            weight=GrowthDistribution(
                mean=Decimal(weight[0]), standard_deviation=Decimal(weight[1])
            ),
        )


class Measurement(str, Enum):
    HEIGHT = "height"
    WEIGHT = "weight"

    @property
    def unit(self) -> str:
        return "cm" if self is Measurement.HEIGHT else "kg"

    @property
    def axis_title(self) -> str:
        return f"{self.value.capitalize()} ({self.unit})"

    def select(self, data: AgeGroupGrowthData) -> GrowthDistribution:
        """Pick this measurement's distribution out of an age group."""
        return data.height if self is Measurement.HEIGHT else data.weight
