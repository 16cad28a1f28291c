"""Normalization pass: build working records from the input."""

from collections.abc import Mapping, Sequence
from typing import Any

from sweepdedupe.models import WorkingRecord
from sweepdedupe.mutators import apply_mutators
from sweepdedupe.strategies import Strategy

__all__ = ["build_working_record", "normalize_records"]


def build_working_record(original: Mapping[str, Any], index: int, strategy: Strategy) -> WorkingRecord:
    """Wrap one input record and run the strategy's mutator chains on it.

    Every field named in the mutator map is replaced by the chain's output,
    starting from ``""`` when the field is absent or empty. All other
    fields are copied verbatim.

    Parameters
    ----------
    original : Mapping[str, Any]
        Caller's record, left untouched.
    index : int
        Position of the record in the input.
    strategy : Strategy
        Strategy whose mutator map is applied.

    Returns
    -------
    WorkingRecord
        Working record with one empty result slot per strategy step.
    """
    fields = dict(original)
    for field, names in (strategy.mutators or {}).items():
        fields[field] = apply_mutators(names, original.get(field) or "", original)

    return WorkingRecord(
        original=original,
        index=index,
        rec_number=original.get("recNumber") or index + 1,
        fields=fields,
        steps=[None] * len(strategy.steps),
    )


def normalize_records(records: Sequence[Mapping[str, Any]], strategy: Strategy) -> list[WorkingRecord]:
    """Build one working record per input record, in input order."""
    return [build_working_record(original, index, strategy) for index, original in enumerate(records)]
