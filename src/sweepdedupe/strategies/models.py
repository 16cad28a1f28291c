"""Strategy and step descriptors.

A strategy bundles the mutators to apply per field with an ordered list
of sweep steps. Descriptors are immutable once built; they can be written
as plain mappings (e.g. loaded from JSON) and converted with
``Strategy.from_dict``.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sweepdedupe.errors import UnknownStrategyError

__all__ = ["Step", "Strategy"]


def _as_tuple(value: Any, what: str) -> tuple[str, ...]:
    """Cast a single name or a list of names to a tuple of names."""
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence) and all(isinstance(name, str) for name in value):
        return tuple(value)
    raise UnknownStrategyError(
        f"Invalid strategy schema: {what} must be a name or a list of names, got {value!r}"
    )


@dataclass(frozen=True)
class Step:
    """One pass of the sweep engine.

    Attributes
    ----------
    fields : tuple[str, ...]
        Fields compared for each candidate pair.
    sort : tuple[str, ...]
        Fields the records are sorted by before the sweep, in priority order.
    comparison : str
        Name of the registered comparison applied to every field.
    skip_omitted : bool
        Score a field 0 when either side is empty instead of comparing it.
    """

    fields: tuple[str, ...]
    sort: tuple[str, ...]
    comparison: str
    skip_omitted: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Step":
        """Build a step from a mapping.

        ``sort`` and ``fields`` may be a single field name or a list.
        ``skipOmitted`` is accepted as an alias of ``skip_omitted``.
        Any other shape raises ``UnknownStrategyError``.
        """
        if not isinstance(data, Mapping):
            raise UnknownStrategyError(f"Invalid strategy schema: step must be a mapping, got {data!r}")
        skip_omitted = data.get("skip_omitted", data.get("skipOmitted", True))
        return cls(
            fields=_as_tuple(data.get("fields"), "step fields"),
            sort=_as_tuple(data.get("sort"), "step sort"),
            comparison=data.get("comparison") or "",
            skip_omitted=bool(skip_omitted),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "fields": list(self.fields),
            "sort": self.sort[0] if len(self.sort) == 1 else list(self.sort),
            "comparison": self.comparison,
            "skip_omitted": self.skip_omitted,
        }


@dataclass(frozen=True)
class Strategy:
    """A named duplicate-detection policy.

    Attributes
    ----------
    title : str
        Short human-readable title.
    description : str
        Longer description, usually citing the source of the strategy.
    mutators : Mapping[str, tuple[str, ...]] | None
        Field name to mutator chain. None when the descriptor omitted it.
    steps : tuple[Step, ...]
        Sweep steps in execution order.
    """

    title: str
    description: str
    mutators: Mapping[str, tuple[str, ...]] | None
    steps: tuple[Step, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Strategy":
        """Build a strategy from a mapping.

        Missing ``title``, ``description`` or ``mutators`` are left empty
        for ``validate_strategy`` to report.

        Raises
        ------
        UnknownStrategyError
            If ``steps`` is missing or is not a list of step mappings, or
            ``mutators`` is not a mapping of field names to mutator names.
        """
        steps = data.get("steps")
        if not isinstance(steps, Sequence) or isinstance(steps, str):
            raise UnknownStrategyError("Invalid strategy schema: 'steps' must be a list")

        raw_mutators = data.get("mutators")
        mutators = None
        if raw_mutators is not None:
            if not isinstance(raw_mutators, Mapping):
                raise UnknownStrategyError("Invalid strategy schema: 'mutators' must be a mapping")
            mutators = {
                field: _as_tuple(names, f"mutators for {field}") for field, names in raw_mutators.items()
            }

        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            mutators=mutators,
            steps=tuple(Step.from_dict(step) for step in steps),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "mutators": {field: list(names) for field, names in (self.mutators or {}).items()},
            "steps": [step.to_dict() for step in self.steps],
        }
