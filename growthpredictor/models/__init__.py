"""
Data models for Growth Predictor.
"""

from .arguments import (
    ArgumentSlot,
    BoundArguments,
    CommandArguments,
    ContinuousRange,
    ContinuousRangeOrPoint,
    ParsedCommand,
    ValidationErrorKind,
)
from .growth import AgeGroupGrowthData, GrowthDistribution, Measurement
from .results import (
    AgeProbabilities,
    AxisRange,
    CommandHelp,
    CumulativeProbability,
    DistributionCurve,
    QueryResult,
)

__all__ = [
    "ArgumentSlot",
    "BoundArguments",
    "CommandArguments",
    "ContinuousRange",
    "ContinuousRangeOrPoint",
    "ParsedCommand",
    "ValidationErrorKind",
    "AgeGroupGrowthData",
    "GrowthDistribution",
    "Measurement",
    "AgeProbabilities",
    "AxisRange",
    "CommandHelp",
    "CumulativeProbability",
    "DistributionCurve",
    "QueryResult",
]
