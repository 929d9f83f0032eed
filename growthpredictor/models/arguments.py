"""
Typed command arguments.

A command line such as ``lhs 10yo 140.5cm`` is parsed into a target name and
a ``CommandArguments`` bundle. Height and weight tokens keep their decimal
precision so the implied measurement range can be rebuilt later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from enum import Enum, IntEnum


# =============================================================================
# ENUMS
# =============================================================================


class ArgumentSlot(IntEnum):
    """Argument positions, ordered for diagnostic output."""

    AGE = 1
    HEIGHT = 2
    WEIGHT = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class ValidationErrorKind(str, Enum):
    REQUIRED_MISSING = "required-missing"
    UNNECESSARY_PRESENT = "unnecessary-present"
    POINT_EXPECTED_GOT_RANGE = "point-expected-got-range"

    def describe(self, slot: ArgumentSlot) -> str:
        if self is ValidationErrorKind.REQUIRED_MISSING:
            return f"{slot.label} is required."
        if self is ValidationErrorKind.UNNECESSARY_PRESENT:
            return f"{slot.label} is unnecessary."
        return f"{slot.label} expects point but got range."


# =============================================================================
# VALUES
# =============================================================================


@dataclass(frozen=True)
class ContinuousRangeOrPoint:
    """
    A parsed height or weight token.

    ``fraction_digits`` records how many digits followed the decimal point in
    the literal; it only feeds the implied range width and is ignored when
    comparing tokens.
    """

    value: Decimal
    fraction_digits: int = field(default=0, compare=False)
    range_width: Decimal | None = None

    @property
    def is_range(self) -> bool:
        """True when an explicit ``:WIDTH`` was given."""
        return self.range_width is not None

    @property
    def implied_width(self) -> Decimal:
        return Decimal(1).scaleb(-self.fraction_digits)

    def to_range(self) -> ContinuousRange:
        return ContinuousRange.from_token(self)


def _exact_sum(a: Decimal, b: Decimal) -> Decimal:
    """Add two finite decimals without rounding."""
    low = min(a.as_tuple().exponent, b.as_tuple().exponent)
    high = max(a.adjusted(), b.adjusted(), low)
    with localcontext() as ctx:
        ctx.prec = high - low + 2
        return a + b


@dataclass(frozen=True)
class ContinuousRange:
    """Half-open interval ``[minimum, maximum)``."""

    minimum: Decimal
    maximum: Decimal

    @classmethod
    def from_token(cls, token: ContinuousRangeOrPoint) -> ContinuousRange:
        width = token.range_width if token.range_width is not None else token.implied_width
        return cls(minimum=token.value, maximum=_exact_sum(token.value, width))

    @property
    def width(self) -> Decimal:
        return _exact_sum(self.maximum, self.minimum.copy_negate())

    def __str__(self) -> str:
        return f"[{self.minimum}, {self.maximum})"


@dataclass(frozen=True)
class CommandArguments:
    """Arguments parsed from one command line; any subset may be absent."""

    age: int | None = None
    height: ContinuousRangeOrPoint | None = None
    weight: ContinuousRangeOrPoint | None = None

    def get(self, slot: ArgumentSlot) -> int | ContinuousRangeOrPoint | None:
        if slot is ArgumentSlot.AGE:
            return self.age
        if slot is ArgumentSlot.HEIGHT:
            return self.height
        return self.weight

    def is_range(self, slot: ArgumentSlot) -> bool:
        value = self.get(slot)
        return isinstance(value, ContinuousRangeOrPoint) and value.is_range


@dataclass(frozen=True)
class BoundArguments:
    """
    Arguments shaped for a specific command variant.

    Range-typed slots hold a ``ContinuousRange``, point-typed slots hold the
    bare ``Decimal`` value, and unused slots are ``None``.
    """

    age: int | None = None
    height: Decimal | ContinuousRange | None = None
    weight: Decimal | ContinuousRange | None = None


@dataclass(frozen=True)
class ParsedCommand:
    target: str
    arguments: CommandArguments = field(default_factory=CommandArguments)
