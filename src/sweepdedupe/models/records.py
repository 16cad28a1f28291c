"""Record data models for sweepdedupe.

Input references are plain string-keyed mappings owned by the caller.
The engine wraps each one in a ``WorkingRecord`` holding the normalized
field values and the per-step duplicate evidence gathered by the sweep.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# A field value is a string, a list of strings, or absent
FieldValue = str | list[str] | None

# Backreference to another record, either its index or its record number
RecordRef = int | str

Reference = Mapping[str, Any]


def is_empty(value: Any) -> bool:
    """Return True when a field value counts as omitted.

    ``None``, empty strings and empty lists are omitted. Numbers such as
    ``0`` are real values.
    """
    if value is None:
        return True
    if isinstance(value, str | list | tuple):
        return len(value) == 0
    return False


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of one sweep step for one record.

    Attributes
    ----------
    score : float
        Similarity score in [0, 1] of the strongest match seen in the step.
    dupe_of : RecordRef | None
        Reference to the earlier-sorted record this one duplicates. ``None``
        when the record was only ever the anchor of a match.
    """

    score: float
    dupe_of: RecordRef | None = None


@dataclass(slots=True)
class WorkingRecord:
    """Working copy of one input reference used during a run.

    Attributes
    ----------
    original : Mapping[str, Any]
        The caller's record, never mutated.
    index : int
        0-based position in the input sequence.
    rec_number : RecordRef
        Caller-supplied ``recNumber`` when present, else ``index + 1``.
    fields : dict[str, Any]
        Original fields with the strategy's mutated fields replaced.
    steps : list[StepResult | None]
        One slot per strategy step, ``None`` until the step records a result.
    score : float
        Mean of the populated step scores, set by the aggregator.
    """

    original: Reference
    index: int
    rec_number: RecordRef
    fields: dict[str, Any]
    steps: list[StepResult | None] = field(default_factory=list)
    score: float = 0.0

    def get(self, name: str) -> Any:
        """Return the working value of field ``name`` (None if absent)."""
        return self.fields.get(name)

    def sort_key(self, names: Sequence[str]) -> tuple[tuple[int, str], ...]:
        """Build an ascending sort key over ``names``.

        Plain ascending order on the text, so ``""`` sorts first; only
        absent fields (``None``) sort after everything. Lists are compared
        on their comma-joined text.
        """
        return tuple(_sort_token(self.fields.get(name)) for name in names)

    def ref(self, use_rec_number: bool) -> RecordRef:
        """Identity of this record as seen in ``dupeOf`` backreferences."""
        return self.rec_number if use_rec_number else self.index

    @property
    def dupe_of(self) -> list[RecordRef]:
        """First-seen ordered union of backreferences across all steps."""
        seen: list[RecordRef] = []
        for result in self.steps:
            if result is None or result.dupe_of is None:
                continue
            if result.dupe_of not in seen:
                seen.append(result.dupe_of)
        return seen


def _sort_token(value: Any) -> tuple[int, str]:
    if value is None:
        return (1, "")
    if isinstance(value, list | tuple):
        return (0, ", ".join(str(v) for v in value))
    return (0, str(value))
