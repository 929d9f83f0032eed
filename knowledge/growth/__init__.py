"""
Growth reference data.
"""

from .reference_table import (
    GROWTH_BY_AGE,
    ReferenceTable,
    build_default_table,
    load_reference_table,
)

__all__ = [
    "GROWTH_BY_AGE",
    "ReferenceTable",
    "build_default_table",
    "load_reference_table",
]
