"""Strategy validation."""

from collections.abc import Mapping
from typing import Any, Literal

from sweepdedupe.comparisons import COMPARISONS
from sweepdedupe.mutators import MUTATORS
from sweepdedupe.strategies.models import Strategy

__all__ = ["validate_strategy"]

_REQUIRED_FIELDS = ("title", "description", "mutators")


def validate_strategy(strategy: Strategy | Mapping[str, Any]) -> Literal[True] | list[str]:
    """Check a strategy descriptor for structural problems.

    All checks run; violations are accumulated rather than stopping at the
    first one.

    Parameters
    ----------
    strategy : Strategy | Mapping[str, Any]
        Descriptor to check. Mappings are converted with
        ``Strategy.from_dict`` first.

    Returns
    -------
    Literal[True] | list[str]
        True if the strategy is valid, otherwise the list of violations.

    Raises
    ------
    UnknownStrategyError
        If a mapping descriptor has no ``steps`` list at all.
    """
    if not isinstance(strategy, Strategy):
        strategy = Strategy.from_dict(strategy)

    errors: list[str] = []

    for name in _REQUIRED_FIELDS:
        if getattr(strategy, name) is None or getattr(strategy, name) == "":
            errors.append(f"Field {name} is missing")

    if not strategy.steps:
        errors.append("Should contain at least one step")

    for field, names in (strategy.mutators or {}).items():
        for name in names:
            if name not in MUTATORS:
                errors.append(f"Field {field} uses unknown mutator {name!r}")

    for number, step in enumerate(strategy.steps, start=1):
        if not step.fields:
            errors.append(f"Step #{number} contains no fields")
        if not step.sort or not all(step.sort):
            errors.append(f"Step #{number} contains no sort field(s)")
        if not step.comparison:
            errors.append(f"Step #{number} contains no comparison")
        elif step.comparison not in COMPARISONS:
            errors.append(f"Step #{number} uses unknown comparison {step.comparison!r}")

    return errors if errors else True
