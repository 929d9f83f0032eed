"""
Reference table of child height and weight by age.

Each age (years) maps to a normal distribution for height (cm) and one for
weight (kg), given as (mean, standard deviation). Values are kept as decimal
strings so the table holds exactly the published figures.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from decimal import Decimal
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from growthpredictor.models import AgeGroupGrowthData, GrowthDistribution, Measurement

logger = logging.getLogger(__name__)

# Format: age_years -> ((height_mean, height_sd), (weight_mean, weight_sd))
GROWTH_BY_AGE: dict[int, tuple[tuple[str, str], tuple[str, str]]] = {
    5: (("109.4", "4.66"), ("18.5", "2.48")),
    6: (("115.5", "4.83"), ("20.8", "3.15")),
    7: (("121.5", "5.13"), ("23.4", "3.72")),
    8: (("127.3", "5.50"), ("26.4", "4.71")),
    9: (("133.4", "6.14"), ("29.7", "5.72")),
    10: (("140.1", "6.77"), ("33.9", "6.85")),
    11: (("146.7", "6.63"), ("38.8", "7.66")),
    12: (("151.8", "5.90"), ("43.6", "7.95")),
    13: (("154.9", "5.44"), ("47.3", "7.70")),
    14: (("156.5", "5.30"), ("49.9", "7.41")),
    15: (("157.1", "5.29"), ("51.5", "7.76")),
    16: (("157.6", "5.32"), ("52.6", "7.72")),
    17: (("157.9", "5.38"), ("53.0", "7.83")),
}


class ReferenceTable(Mapping[int, AgeGroupGrowthData]):
    """
    Read-only mapping from age to growth data, iterated in ascending age.
    """

    def __init__(self, entries: Mapping[int, AgeGroupGrowthData]):
        if not entries:
            raise ValueError("Reference table must contain at least one age")
        self._entries: dict[int, AgeGroupGrowthData] = {
            age: entries[age] for age in sorted(entries)
        }

    def __getitem__(self, age: int) -> AgeGroupGrowthData:
        return self._entries[age]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def ages(self) -> list[int]:
        return list(self._entries)

    def distribution(self, age: int, measurement: Measurement) -> GrowthDistribution:
        """Get one measurement's distribution at ``age``; ``KeyError`` if absent."""
        return measurement.select(self._entries[age])


def build_default_table() -> ReferenceTable:
    """Build the canonical table for ages 5-17."""
    return ReferenceTable({
        age: AgeGroupGrowthData.from_pairs(height, weight)
        for age, (height, weight) in GROWTH_BY_AGE.items()
    })


_ENTRIES_ADAPTER = TypeAdapter(dict[int, AgeGroupGrowthData])


def load_reference_table(path: Path) -> ReferenceTable:
    """
    Load a reference table from a JSON file.

    Expected layout::

        {"5": {"height": {"mean": 109.4, "standard_deviation": 4.66},
               "weight": {"mean": 18.5, "standard_deviation": 2.48}}, ...}

    ``standardDeviation`` is accepted in place of ``standard_deviation``.
    Numbers may be written as JSON numbers or strings; both are read as
    decimals without passing through binary floating point.

    Raises:
        ValueError: if the file is not valid JSON or does not match the layout.
    """
    text = Path(path).read_text()
    try:
        raw = json.loads(text, parse_float=Decimal)
        entries = _ENTRIES_ADAPTER.validate_python(raw)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid reference table {path}: {e}") from e

    table = ReferenceTable(entries)
    logger.debug("Loaded reference table from %s with ages %s", path, table.ages)
    return table
