"""
Result sinks for Growth Predictor.
"""

from .console import render_result
from .gnuplot import GnuplotScript, range_expression
from .json_export import export_json

__all__ = [
    "render_result",
    "GnuplotScript",
    "range_expression",
    "export_json",
]
