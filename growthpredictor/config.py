"""
Runtime configuration for Growth Predictor.

Settings come from environment variables; command-line options override them.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_DENSITY_POINTS = 100
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "> "


class Settings:
    """Configuration read from ``GROWTHPREDICTOR_*`` environment variables."""

    def __init__(self):
        table_path = os.environ.get("GROWTHPREDICTOR_TABLE_PATH")
        self.table_path: Path | None = Path(table_path) if table_path else None
        self.density_points_raw = os.environ.get("GROWTHPREDICTOR_DENSITY_POINTS")
        self.log_level = os.environ.get("GROWTHPREDICTOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        self.prompt = os.environ.get("GROWTHPREDICTOR_PROMPT", DEFAULT_PROMPT)

    def override(
        self,
        table_path: Optional[Path] = None,
        density_points: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> Settings:
        """Return a copy with the given values replacing the environment's."""
        settings = copy.copy(self)
        if table_path is not None:
            settings.table_path = table_path
        if density_points is not None:
            settings.density_points_raw = str(density_points)
        if log_level:
            settings.log_level = log_level.upper()
        return settings

    @property
    def density_half_points(self) -> int:
        """Samples on each side of the mean when a density curve is sampled."""
        if not self.density_points_raw:
            return DEFAULT_DENSITY_POINTS
        return int(self.density_points_raw)

    def validate(self) -> None:
        """Raise error if a setting is unusable."""
        if self.table_path is not None and not self.table_path.is_file():
            raise ValueError(f"GROWTHPREDICTOR_TABLE_PATH does not exist: {self.table_path}")
        try:
            points = self.density_half_points
        except ValueError:
            raise ValueError(
                f"GROWTHPREDICTOR_DENSITY_POINTS must be an integer, got {self.density_points_raw!r}"
            ) from None
        if points < 1:
            raise ValueError("GROWTHPREDICTOR_DENSITY_POINTS must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")


# -----------------------------------------------------------------------------
# Singleton instance
# -----------------------------------------------------------------------------

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
