"""
Command variants and overload resolution.

Several variants may share a target name; they differ in which of age,
height and weight they consume and whether height/weight is taken as a
point or a range. Resolution tries the candidates in registration order and
takes the first that validates cleanly. When none does, the candidate with
the fewest errors (earliest on ties) is reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from growthpredictor.errors import UnknownTargetError, ValidationFailure
from growthpredictor.models import (
    ArgumentSlot,
    BoundArguments,
    CommandArguments,
    ValidationErrorKind,
)

if TYPE_CHECKING:
    from growthpredictor.models import QueryResult

    from .actions import ActionContext

logger = logging.getLogger(__name__)

Compute = Callable[["ActionContext", BoundArguments], "QueryResult"]


@dataclass(frozen=True)
class CommandVariant:
    """One resolvable shape of a command."""

    target: str
    compute: Compute = field(compare=False, repr=False)
    uses_age: bool = False
    uses_height: bool = False
    height_is_range: bool = False
    uses_weight: bool = False
    weight_is_range: bool = False
    summary: str = field(default="", compare=False)

    def uses(self, slot: ArgumentSlot) -> bool:
        if slot is ArgumentSlot.AGE:
            return self.uses_age
        if slot is ArgumentSlot.HEIGHT:
            return self.uses_height
        return self.uses_weight

    def is_range(self, slot: ArgumentSlot) -> bool:
        if slot is ArgumentSlot.HEIGHT:
            return self.height_is_range
        if slot is ArgumentSlot.WEIGHT:
            return self.weight_is_range
        return False

    def validate(self, arguments: CommandArguments) -> dict[ArgumentSlot, ValidationErrorKind]:
        """
        Check the arguments against this variant.

        Returns at most one error per slot, keyed in slot order. An empty
        dict means the variant accepts the arguments.
        """
        errors: dict[ArgumentSlot, ValidationErrorKind] = {}
        for slot in ArgumentSlot:
            present = arguments.get(slot) is not None
            if self.uses(slot) and not present:
                errors[slot] = ValidationErrorKind.REQUIRED_MISSING
            elif not self.uses(slot) and present:
                errors[slot] = ValidationErrorKind.UNNECESSARY_PRESENT
            elif not self.is_range(slot) and arguments.is_range(slot):
                errors[slot] = ValidationErrorKind.POINT_EXPECTED_GOT_RANGE
        return errors

    def bind(self, arguments: CommandArguments) -> BoundArguments:
        """Shape validated arguments for ``compute``."""
        bound: dict[str, Any] = {}
        if self.uses_age:
            bound["age"] = arguments.age
        if self.uses_height and arguments.height is not None:
            bound["height"] = (
                arguments.height.to_range() if self.height_is_range else arguments.height.value
            )
        if self.uses_weight and arguments.weight is not None:
            bound["weight"] = (
                arguments.weight.to_range() if self.weight_is_range else arguments.weight.value
            )
        return BoundArguments(**bound)

    def invoke(self, context: ActionContext, arguments: CommandArguments) -> QueryResult:
        return self.compute(context, self.bind(arguments))

    def usage(self) -> str:
        """Usage line, e.g. ``age <height>[:<delta>]cm``."""
        parts = [self.target]
        if self.uses_age:
            parts.append("<age>yo")
        if self.uses_height:
            parts.append("<height>" + ("[:<delta>]" if self.height_is_range else "") + "cm")
        if self.uses_weight:
            parts.append("<weight>" + ("[:<delta>]" if self.weight_is_range else "") + "kg")
        return " ".join(parts)


class CommandRegistry:
    """
    Ordered collection of command variants.

    Registration order is significant: it breaks ties between variants that
    accept the same arguments.
    """

    def __init__(self, variants: Iterable[CommandVariant] = ()):
        self._variants: list[CommandVariant] = []
        for variant in variants:
            self.register(variant)

    def register(self, variant: CommandVariant) -> CommandVariant:
        self._variants.append(variant)
        return variant

    def __iter__(self) -> Iterator[CommandVariant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    @property
    def targets(self) -> list[str]:
        """Distinct target names in registration order."""
        return list(dict.fromkeys(v.target for v in self._variants))

    def candidates(self, target: str) -> list[CommandVariant]:
        return [v for v in self._variants if v.target == target]

    def resolve(self, target: str, arguments: CommandArguments) -> CommandVariant:
        """
        Pick the variant of ``target`` that accepts ``arguments``.

        Raises:
            UnknownTargetError: if no variant has this target name.
            ValidationFailure: with the best candidate's errors if none fits.
        """
        candidates = self.candidates(target)
        if not candidates:
            raise UnknownTargetError(target)

        best: dict[ArgumentSlot, ValidationErrorKind] | None = None
        for variant in candidates:
            errors = variant.validate(arguments)
            if not errors:
                logger.debug("Resolved %r to %s", target, variant.usage())
                return variant
            logger.debug("Candidate %s rejected with %d error(s)", variant.usage(), len(errors))
            if best is None or len(errors) < len(best):
                best = errors

        raise ValidationFailure(target, sorted(best.items()))
