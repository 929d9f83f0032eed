"""
Exceptions raised while parsing, resolving and running growth queries.

Every exception carries the user-facing diagnostic lines so the command loop
can report them and carry on with the next line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from growthpredictor.models import ArgumentSlot, ValidationErrorKind


class GrowthPredictorError(Exception):
    """Base class for recoverable errors in this library."""

    def diagnostics(self) -> list[str]:
        """Lines to show the user."""
        return [str(self)]


class ParseError(GrowthPredictorError):
    """Raised when a command token cannot be converted to a typed value.

    ``slot`` is the argument the token was meant for (``None`` when the token
    could not be attributed to any slot) and ``field`` is the part of a
    ``VALUE[:WIDTH]`` token that failed, when known.
    """

    def __init__(
        self,
        message: str,
        slot: ArgumentSlot | None = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.slot = slot
        self.field = field


class UnrecognizedTokenError(ParseError):
    """Raised when a token carries none of the ``yo``/``cm``/``kg`` suffixes."""

    def __init__(self, token: str):
        super().__init__(f"Cannot parse token '{token}'.")
        self.token = token


class UnknownTargetError(GrowthPredictorError):
    """Raised when no command variant is registered under the target name."""

    def __init__(self, target: str):
        super().__init__("Unknown target value.")
        self.target = target


class ValidationFailure(GrowthPredictorError):
    """Raised when a target exists but none of its variants fit the arguments.

    ``errors`` holds the best-fitting variant's errors ordered by slot.
    """

    def __init__(
        self,
        target: str,
        errors: list[tuple[ArgumentSlot, ValidationErrorKind]],
    ):
        self.target = target
        self.errors = errors
        super().__init__("; ".join(self.diagnostics()))

    def diagnostics(self) -> list[str]:
        return [kind.describe(slot) for slot, kind in self.errors]


class UnknownAgeError(GrowthPredictorError):
    """Raised when the reference table has no entry for the requested age."""

    def __init__(self, age: int):
        super().__init__("Cannot find growth data corresponding to requested age.")
        self.age = age
