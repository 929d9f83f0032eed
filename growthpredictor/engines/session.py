"""
One query session: parse a line, resolve its variant, run it.
"""

from __future__ import annotations

import logging

from knowledge.growth import ReferenceTable, build_default_table, load_reference_table
from growthpredictor.config import Settings
from growthpredictor.models import QueryResult
from growthpredictor.parsing import parse_command

from .actions import ActionContext, build_registry
from .distribution import DEFAULT_HALF_POINTS
from .resolver import CommandRegistry

logger = logging.getLogger(__name__)


class QuerySession:
    """
    Runs command lines against a reference table.

    The table and registry are shared read-only; a session holds no
    per-line state, so one instance can serve any number of lines.
    """

    def __init__(
        self,
        table: ReferenceTable | None = None,
        registry: CommandRegistry | None = None,
        density_half_points: int = DEFAULT_HALF_POINTS,
    ):
        self.context = ActionContext(
            table=table if table is not None else build_default_table(),
            registry=registry if registry is not None else build_registry(),
            density_half_points=density_half_points,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> QuerySession:
        table = None
        if settings.table_path:
            table = load_reference_table(settings.table_path)
        return cls(table=table, density_half_points=settings.density_half_points)

    @property
    def table(self) -> ReferenceTable:
        return self.context.table

    @property
    def registry(self) -> CommandRegistry:
        return self.context.registry

    def execute(self, line: str) -> QueryResult:
        """
        Run one command line.

        Raises:
            GrowthPredictorError: parse, resolution or lookup failures. These
                are raised before any result is produced.
        """
        command = parse_command(line)
        variant = self.registry.resolve(command.target, command.arguments)
        logger.debug("Running %s for %r", variant.usage(), line)
        return variant.invoke(self.context, command.arguments)
