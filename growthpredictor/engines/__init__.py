"""
Query engines: distribution math, variant resolution and actions.
"""

from .actions import (
    ActionContext,
    age_group_probabilities,
    build_registry,
    command_help,
    cumulative_probability,
    plot_growth_distribution,
)
from .resolver import CommandRegistry, CommandVariant
from .session import QuerySession

__all__ = [
    "ActionContext",
    "age_group_probabilities",
    "build_registry",
    "command_help",
    "cumulative_probability",
    "plot_growth_distribution",
    "CommandRegistry",
    "CommandVariant",
    "QuerySession",
]
