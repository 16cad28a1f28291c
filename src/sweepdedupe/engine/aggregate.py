"""Score aggregation and action dispatch."""

from collections.abc import Mapping, Sequence
from typing import Any

from sweepdedupe.engine.config import Action, DedupeSettings, Marker
from sweepdedupe.models import WorkingRecord

__all__ = ["aggregate", "dispatch", "resolve_marker"]


def aggregate(records: Sequence[WorkingRecord]) -> dict[str, int]:
    """Set each record's score to the mean of its populated step scores.

    Records no step touched keep a score of 0.0.

    Returns
    -------
    dict[str, int]
        Counters: ``scored`` records with at least one step result and
        ``with_dupe_of`` records carrying a backreference.
    """
    counters = {"scored": 0, "with_dupe_of": 0}
    for record in records:
        results = [result for result in record.steps if result is not None]
        record.score = sum(result.score for result in results) / len(results) if results else 0.0
        if results:
            counters["scored"] += 1
        if record.dupe_of:
            counters["with_dupe_of"] += 1
    return counters


def resolve_marker(marker: Marker, original: Mapping[str, Any]) -> Any:
    """Return ``marker``, calling it with the original record when callable."""
    return marker(original) if callable(marker) else marker


def dispatch(
    originals: Sequence[Mapping[str, Any]],
    records: Sequence[WorkingRecord],
    settings: DedupeSettings,
) -> list[dict[str, Any]]:
    """Apply the configured action to the original records.

    ``originals`` and ``records`` are aligned by input index. Outputs are
    new dicts; the caller's records are never modified.

    Parameters
    ----------
    originals : Sequence[Mapping[str, Any]]
        Caller's records in input order.
    records : Sequence[WorkingRecord]
        Aggregated working records in input order.
    settings : DedupeSettings
        Run settings (action, field, threshold, markers).

    Returns
    -------
    list[dict[str, Any]]
        STATS and MARK return every record annotated with
        ``settings.action_field``; DELETE returns the records scoring below
        the threshold.
    """
    if settings.action == Action.STATS:
        return [
            {
                **original,
                settings.action_field: {"score": record.score, "dupeOf": record.dupe_of},
            }
            for original, record in zip(originals, records, strict=True)
        ]

    if settings.action == Action.MARK:
        output = []
        for original, record in zip(originals, records, strict=True):
            marker = settings.mark_dupe if record.score >= settings.threshold else settings.mark_ok
            output.append({**original, settings.action_field: resolve_marker(marker, original)})
        return output

    return [
        dict(original)
        for original, record in zip(originals, records, strict=True)
        if record.score < settings.threshold
    ]
