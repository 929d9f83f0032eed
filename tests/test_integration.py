"""
Integration tests for Growth Predictor.
"""

import math
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


class TestSession:
    """Test whole command lines through a query session."""

    def test_lhs_end_to_end(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.models import CumulativeProbability

        result = QuerySession().execute("lhs 10yo 140cm")

        assert isinstance(result, CumulativeProbability)
        expected = (1 + math.erf(-0.1 / 6.77 / math.sqrt(2))) / 2
        assert result.probability == pytest.approx(expected, rel=1e-12)
        assert 0 < result.probability < 1
        assert "E-01" in result.formatted

    def test_gis_matches_lhs(self):
        from growthpredictor.engines import QuerySession

        session = QuerySession()
        lhs = session.execute("lhs 12yo 40.5kg")
        gis = session.execute("gis 12yo 40.5kg")

        assert lhs.probability == gis.probability
        assert lhs.measurement.value == "weight"

    def test_age_with_height_range(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.models import AgeProbabilities, Measurement

        result = QuerySession().execute("age 160:1cm")

        assert isinstance(result, AgeProbabilities)
        assert result.measurement is Measurement.HEIGHT
        assert result.minimum == Decimal("160")
        assert result.maximum == Decimal("161")
        assert len(result.points) == 13

    def test_age_with_implied_weight_range(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.models import Measurement

        result = QuerySession().execute("age 30.5kg")

        assert result.measurement is Measurement.WEIGHT
        assert result.maximum - result.minimum == Decimal("0.1")

    def test_distribution(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.models import DistributionCurve

        result = QuerySession(density_half_points=50).execute("weight 8yo")

        assert isinstance(result, DistributionCurve)
        assert result.mean == Decimal("26.4")
        assert len(result.points) == 101

    def test_unknown_age_then_continue(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.errors import UnknownAgeError

        session = QuerySession()

        with pytest.raises(UnknownAgeError) as exc_info:
            session.execute("height 99yo")
        assert exc_info.value.diagnostics() == [
            "Cannot find growth data corresponding to requested age."
        ]

        assert session.execute("height 9yo").age == 9

    def test_missing_age_not_unknown_target(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.errors import ValidationFailure

        with pytest.raises(ValidationFailure) as exc_info:
            QuerySession().execute("height")

        assert exc_info.value.diagnostics() == ["Age is required."]

    def test_help(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.models import CommandHelp

        result = QuerySession().execute("help")
        assert isinstance(result, CommandHelp)
        assert len(result.lines) == 11

    def test_help_rejects_arguments(self):
        from growthpredictor.engines import QuerySession
        from growthpredictor.errors import ValidationFailure

        with pytest.raises(ValidationFailure) as exc_info:
            QuerySession().execute("help 10yo")

        assert exc_info.value.diagnostics() == ["Age is unnecessary."]


class TestSettings:
    """Test environment configuration."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        from growthpredictor.config import reset_settings

        for name in (
            "GROWTHPREDICTOR_TABLE_PATH",
            "GROWTHPREDICTOR_DENSITY_POINTS",
            "GROWTHPREDICTOR_LOG_LEVEL",
            "GROWTHPREDICTOR_PROMPT",
        ):
            monkeypatch.delenv(name, raising=False)
        reset_settings()
        yield
        reset_settings()

    def test_defaults(self):
        from growthpredictor.config import get_settings

        settings = get_settings()
        settings.validate()

        assert settings.table_path is None
        assert settings.density_half_points == 100
        assert settings.log_level == "WARNING"
        assert settings.prompt == "> "

    def test_singleton(self):
        from growthpredictor.config import get_settings

        assert get_settings() is get_settings()

    def test_override_leaves_singleton_alone(self, tmp_path):
        from growthpredictor.config import get_settings

        path = tmp_path / "table.json"
        overridden = get_settings().override(path, 7, "debug")

        assert overridden.table_path == path
        assert overridden.density_half_points == 7
        assert overridden.log_level == "DEBUG"
        assert get_settings().table_path is None
        assert get_settings().density_half_points == 100
        assert get_settings().log_level == "WARNING"

    def test_bad_density_points(self, monkeypatch):
        from growthpredictor.config import get_settings

        monkeypatch.setenv("GROWTHPREDICTOR_DENSITY_POINTS", "lots")

        with pytest.raises(ValueError):
            get_settings().validate()

    def test_missing_table_file(self, monkeypatch, tmp_path):
        from growthpredictor.config import get_settings

        monkeypatch.setenv("GROWTHPREDICTOR_TABLE_PATH", str(tmp_path / "missing.json"))

        with pytest.raises(ValueError):
            get_settings().validate()

    def test_session_from_settings(self, monkeypatch):
        from growthpredictor.config import get_settings
        from growthpredictor.engines import QuerySession

        monkeypatch.setenv("GROWTHPREDICTOR_DENSITY_POINTS", "5")
        session = QuerySession.from_settings(get_settings())

        assert len(session.execute("height 10yo").points) == 11


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
