"""
Command-line parsing.

Grammar::

    <target> [<int>yo] [<number>[:<width>]cm] [<number>[:<width>]kg]

Tokens after the target may appear in any order. When the same suffix
appears more than once the last token wins. A token without a recognized
suffix aborts the whole line.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from growthpredictor.errors import ParseError, UnrecognizedTokenError
from growthpredictor.models import (
    ArgumentSlot,
    CommandArguments,
    ContinuousRangeOrPoint,
    ParsedCommand,
)

logger = logging.getLogger(__name__)

AGE_SUFFIX = "yo"
HEIGHT_SUFFIX = "cm"
WEIGHT_SUFFIX = "kg"

_INTEGER = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_decimal(text: str) -> Decimal | None:
    """Parse a plain decimal literal, or return None if malformed."""
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    return Decimal(text)


def parse_age(text: str) -> int:
    """Parse the number part of an ``<int>yo`` token."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        raise ParseError("Cannot convert input data to age.", ArgumentSlot.AGE, "value")
    return int(text)


def parse_range_or_point(text: str, slot: ArgumentSlot) -> ContinuousRangeOrPoint:
    """
    Parse the number part of a ``VALUE[:WIDTH]`` token.

    ``fraction_digits`` is the count of characters after the decimal point
    in VALUE. An empty WIDTH after the colon means no explicit width.

    Raises:
        ParseError: naming ``value`` or ``width`` as the field that failed.
    """
    name = slot.label.lower()
    value_text, _, width_text = text.partition(":")
    value_text = value_text.strip()
    width_text = width_text.strip()

    value = parse_decimal(value_text)
    if value is None:
        raise ParseError(
            f"Cannot convert input data to {name}: malformed value '{value_text}'.",
            slot,
            "value",
        )

    fraction_digits = 0
    point = value_text.find(".")
    if point >= 0:
        fraction_digits = len(value_text) - point - 1

    width = None
    if width_text:
        width = parse_decimal(width_text)
        if width is None or width <= 0:
            raise ParseError(
                f"Cannot convert input data to {name}: malformed width '{width_text}'.",
                slot,
                "width",
            )

    return ContinuousRangeOrPoint(value=value, fraction_digits=fraction_digits, range_width=width)


def parse_command(line: str) -> ParsedCommand:
    """
    Split a command line into its target and typed arguments.

    Raises:
        ParseError: if the line is empty or any token is malformed.
    """
    tokens = line.split()
    if not tokens:
        raise ParseError("Cannot parse input command.")

    target, *rest = tokens
    age: int | None = None
    height: ContinuousRangeOrPoint | None = None
    weight: ContinuousRangeOrPoint | None = None

    for token in rest:
        if token.endswith(AGE_SUFFIX):
            age = parse_age(token[:-2])
        elif token.endswith(HEIGHT_SUFFIX):
            height = parse_range_or_point(token[:-2], ArgumentSlot.HEIGHT)
        elif token.endswith(WEIGHT_SUFFIX):
            weight = parse_range_or_point(token[:-2], ArgumentSlot.WEIGHT)
        else:
            logger.debug("Rejecting line %r at token %r", line, token)
            raise UnrecognizedTokenError(token)

    return ParsedCommand(target=target, arguments=CommandArguments(age=age, height=height, weight=weight))
