"""
Tests for query actions and the reference table.
"""

import json
import math
import re
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


def _context():
    from knowledge.growth import build_default_table
    from growthpredictor.engines import ActionContext, build_registry

    return ActionContext(table=build_default_table(), registry=build_registry())


class TestReferenceTable:
    """Test the built-in reference table."""

    def test_covers_ages_5_to_17(self):
        from knowledge.growth import build_default_table

        table = build_default_table()
        assert table.ages == list(range(5, 18))
        assert len(table) == 13

    def test_values_are_exact(self):
        from knowledge.growth import build_default_table

        data = build_default_table()[10]
        assert data.height.mean == Decimal("140.1")
        assert data.height.standard_deviation == Decimal("6.77")
        assert data.weight.mean == Decimal("33.9")
        assert data.weight.standard_deviation == Decimal("6.85")

    def test_unknown_age(self):
        from knowledge.growth import build_default_table
        from growthpredictor.models import Measurement

        table = build_default_table()
        assert 4 not in table
        with pytest.raises(KeyError):
            table.distribution(4, Measurement.HEIGHT)

    def test_iterates_in_ascending_age(self):
        from knowledge.growth import ReferenceTable, build_default_table

        table = build_default_table()
        shuffled = ReferenceTable({age: table[age] for age in (17, 5, 11)})
        assert list(shuffled) == [5, 11, 17]

    def test_empty_table_rejected(self):
        from knowledge.growth import ReferenceTable

        with pytest.raises(ValueError):
            ReferenceTable({})


class TestTableLoader:
    """Test loading a reference table from JSON."""

    def test_load(self, tmp_path):
        from knowledge.growth import load_reference_table

        path = tmp_path / "table.json"
        path.write_text(json.dumps({
            "7": {
                "height": {"mean": 121.5, "standardDeviation": 5.13},
                "weight": {"mean": "23.4", "standard_deviation": "3.72"},
            },
            "6": {
                "height": {"mean": 115.5, "standard_deviation": 4.83},
                "weight": {"mean": 20.8, "standard_deviation": 3.15},
            },
        }))

        table = load_reference_table(path)

        assert table.ages == [6, 7]
        assert table[7].height.standard_deviation == Decimal("5.13")
        assert table[7].weight.mean == Decimal("23.4")

    def test_invalid_json(self, tmp_path):
        from knowledge.growth import load_reference_table

        path = tmp_path / "table.json"
        path.write_text("{not json")

        with pytest.raises(ValueError):
            load_reference_table(path)

    def test_non_positive_sd(self, tmp_path):
        from knowledge.growth import load_reference_table

        path = tmp_path / "table.json"
        path.write_text(json.dumps({
            "5": {
                "height": {"mean": 109.4, "standard_deviation": 0},
                "weight": {"mean": 18.5, "standard_deviation": 2.48},
            },
        }))

        with pytest.raises(ValueError):
            load_reference_table(path)


class TestActions:
    """Test the three query shapes."""

    def test_distribution_curve(self):
        from growthpredictor.engines import plot_growth_distribution
        from growthpredictor.models import Measurement

        curve = plot_growth_distribution(_context(), Measurement.HEIGHT, 10)

        assert curve.age == 10
        assert curve.mean == Decimal("140.1")
        assert curve.x_range[0] == pytest.approx(99.48)
        assert curve.x_range[1] == pytest.approx(180.72)
        assert curve.y_range == (0.0, None)
        assert "6.77" in curve.expression
        assert len(curve.points) == 201

    def test_distribution_uses_configured_samples(self):
        from knowledge.growth import build_default_table
        from growthpredictor.engines import ActionContext, build_registry, plot_growth_distribution
        from growthpredictor.models import Measurement

        context = ActionContext(
            table=build_default_table(), registry=build_registry(), density_half_points=10
        )
        curve = plot_growth_distribution(context, Measurement.WEIGHT, 5)

        assert len(curve.points) == 21
        assert curve.mean == Decimal("18.5")

    def test_distribution_unknown_age(self):
        from growthpredictor.engines import plot_growth_distribution
        from growthpredictor.errors import UnknownAgeError
        from growthpredictor.models import Measurement

        with pytest.raises(UnknownAgeError):
            plot_growth_distribution(_context(), Measurement.HEIGHT, 99)

    def test_cumulative_unknown_age(self):
        from growthpredictor.engines import cumulative_probability
        from growthpredictor.errors import UnknownAgeError
        from growthpredictor.models import Measurement

        with pytest.raises(UnknownAgeError) as exc_info:
            cumulative_probability(_context(), Measurement.WEIGHT, 4, Decimal("20"))

        assert exc_info.value.age == 4

    def test_age_probabilities(self):
        from growthpredictor.engines import age_group_probabilities
        from growthpredictor.engines.distribution import range_probability
        from growthpredictor.models import ContinuousRange, Measurement

        context = _context()
        value_range = ContinuousRange(Decimal("150"), Decimal("155"))
        result = age_group_probabilities(context, Measurement.HEIGHT, value_range)

        assert [age for age, _ in result.points] == list(range(5, 18))
        assert result.x_range == (5.0, 17.0)
        assert all(0 <= p <= 1 for _, p in result.points)
        assert dict(result.points)[12] == pytest.approx(
            range_probability(context.table[12].height, value_range)
        )
        # 150-155cm is far more typical at 13 than at 5
        assert dict(result.points)[13] > dict(result.points)[5]

    def test_cumulative_probability(self):
        from growthpredictor.engines import cumulative_probability
        from growthpredictor.models import Measurement

        result = cumulative_probability(_context(), Measurement.HEIGHT, 10, Decimal("140"))

        expected = (1 + math.erf((140 - 140.1) / 6.77 / math.sqrt(2))) / 2
        assert result.probability == pytest.approx(expected, rel=1e-12)
        assert 0.4941 < result.probability < 0.4942
        assert re.fullmatch(r"\d\.\d{20}E[+-]\d+", result.formatted)
        assert result.formatted.startswith("4.941")

    def test_command_help(self):
        from growthpredictor.engines import command_help
        from growthpredictor.engines.actions import EXIT_HINT

        lines = command_help(_context()).lines

        assert lines[0] == "Commands:"
        assert "  height <age>yo" in lines
        assert "  age <height>[:<delta>]cm" in lines
        assert "  age <weight>[:<delta>]kg" in lines
        assert "  lhs <age>yo <height>cm" in lines
        assert "  gis <age>yo <weight>kg" in lines
        assert "  help" in lines
        assert lines[-1] == EXIT_HINT
