"""
JSON exporter for query results.
"""

from __future__ import annotations

import json
from pathlib import Path

from growthpredictor.models import QueryResult


def export_json(
    result: QueryResult,
    output_path: Path | None = None,
    indent: int = 2,
) -> str:
    """
    Export a query result to JSON.

    Decimals are written as strings so table values keep their exact digits.

    Args:
        result: The result to export
        output_path: Optional path to write the JSON file
        indent: JSON indentation level

    Returns:
        JSON string representation of the result
    """
    data = result.model_dump(mode="json")
    json_str = json.dumps(data, indent=indent)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str)

    return json_str
