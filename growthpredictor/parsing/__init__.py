"""
Command parsing.
"""

from .parser import parse_age, parse_command, parse_decimal, parse_range_or_point

__all__ = ["parse_age", "parse_command", "parse_decimal", "parse_range_or_point"]
