"""Sort-sweep duplicate detection.

For each strategy step the working records are sorted by the step's sort
fields and walked with two cursors: ``i`` marks the current anchor and
``n`` the candidate compared against it. A positive score records the
candidate as a duplicate of the anchor and advances ``n``; a zero score
advances ``n`` only while the two records still share the same sort key,
otherwise the anchor moves on. Since duplicates sort next to each other,
most of the O(n^2) pairs are never compared.
"""

from collections.abc import Callable, Sequence

from sweepdedupe.comparisons import Comparison, get_comparison
from sweepdedupe.engine.config import FieldWeight
from sweepdedupe.models import StepResult, WorkingRecord, is_empty
from sweepdedupe.strategies import Step, Strategy

__all__ = ["compare_via_step", "sort_records", "sweep_step", "sweep"]


def compare_via_step(
    a: WorkingRecord,
    b: WorkingRecord,
    step: Step,
    comparison: Comparison | None = None,
    field_weight: FieldWeight = FieldWeight.MINIMUM,
) -> float:
    """Score a pair of records over the fields of one step.

    Parameters
    ----------
    a, b : WorkingRecord
        Records to compare.
    step : Step
        Step naming the fields and the comparison.
    comparison : Comparison | None, optional
        Pre-resolved comparison; looked up from ``step`` when omitted.
    field_weight : FieldWeight, optional
        MINIMUM keeps the lowest field score, AVERAGE takes their mean.

    Returns
    -------
    float
        Combined score in [0, 1].
    """
    if comparison is None:
        comparison = get_comparison(step.comparison)

    scores: list[float] = []
    for field in step.fields:
        value_a = a.get(field)
        value_b = b.get(field)
        if step.skip_omitted and (is_empty(value_a) or is_empty(value_b)):
            scores.append(0.0)
        else:
            scores.append(comparison(value_a, value_b))

    if not scores:
        return 0.0
    if field_weight == FieldWeight.AVERAGE:
        return sum(scores) / len(scores)
    return min(1.0, *scores)


def sort_records(records: Sequence[WorkingRecord], sort: Sequence[str]) -> list[WorkingRecord]:
    """Stable ascending sort on the normalized values of ``sort``."""
    return sorted(records, key=lambda record: record.sort_key(sort))


def sweep_step(
    ordered: Sequence[WorkingRecord],
    step: Step,
    step_index: int,
    *,
    field_weight: FieldWeight = FieldWeight.MINIMUM,
    mark_original: bool = False,
    use_rec_number: bool = False,
    progress: Callable[[int, int], object] | None = None,
    step_count: int = 1,
) -> dict[str, int]:
    """Run one step of the sweep over records already sorted for it.

    Results are written into slot ``step_index`` of each record's ``steps``.

    Returns
    -------
    dict[str, int]
        Counters: ``comparisons`` made and ``duplicates`` recorded.
    """
    comparison = get_comparison(step.comparison)
    total = len(ordered)
    counters = {"comparisons": 0, "duplicates": 0}

    i = 0
    n = 1
    while n < total:
        if progress is not None:
            progress(step_index * total + i, step_count * total)

        anchor = ordered[i]
        candidate = ordered[n]
        score = compare_via_step(anchor, candidate, step, comparison, field_weight)
        counters["comparisons"] += 1

        if score > 0:
            if anchor.steps[step_index] is None:
                anchor.steps[step_index] = StepResult(score if mark_original else 0.0)

            existing = candidate.steps[step_index]
            if existing is None or score >= existing.score:
                if existing is None or existing.dupe_of is None:
                    counters["duplicates"] += 1
                candidate.steps[step_index] = StepResult(score, anchor.ref(use_rec_number))

            n += 1
        elif anchor.sort_key(step.sort) == candidate.sort_key(step.sort):
            n += 1
        else:
            i += 1
            n = i + 1
            continue

        if n >= total:
            i += 1
            n = i + 1

    return counters


def sweep(
    records: Sequence[WorkingRecord],
    strategy: Strategy,
    *,
    field_weight: FieldWeight = FieldWeight.MINIMUM,
    mark_original: bool = False,
    use_rec_number: bool = False,
    progress: Callable[[int, int], object] | None = None,
    on_step: Callable[[int, Step, dict[str, int]], object] | None = None,
) -> dict[str, int]:
    """Run every step of ``strategy`` over the working records.

    Records are re-sorted from input order whenever a step's sort fields
    differ from the previous step's; otherwise the previous order is kept.

    Parameters
    ----------
    records : Sequence[WorkingRecord]
        Working records in input order.
    strategy : Strategy
        Strategy whose steps are run in order.
    field_weight : FieldWeight, optional
        Per-field score combination.
    mark_original : bool, optional
        Give the anchor of a match the match score instead of 0.
    use_rec_number : bool, optional
        Reference records by ``rec_number`` instead of index.
    progress : Callable[[int, int], object] | None, optional
        Called as ``progress(current, maximum)`` before each comparison.
    on_step : Callable[[int, Step, dict[str, int]], object] | None, optional
        Called after each step with its index, the step and its counters.

    Returns
    -------
    dict[str, int]
        Counters summed over all steps.
    """
    totals = {"steps": len(strategy.steps), "comparisons": 0, "duplicates": 0}
    ordered: list[WorkingRecord] = list(records)
    sorted_by: tuple[str, ...] | None = None

    for step_index, step in enumerate(strategy.steps):
        if sorted_by != step.sort:
            ordered = sort_records(records, step.sort)
            sorted_by = step.sort

        counters = sweep_step(
            ordered,
            step,
            step_index,
            field_weight=field_weight,
            mark_original=mark_original,
            use_rec_number=use_rec_number,
            progress=progress,
            step_count=len(strategy.steps),
        )
        totals["comparisons"] += counters["comparisons"]
        totals["duplicates"] += counters["duplicates"]

        if on_step is not None:
            on_step(step_index, step, counters)

    return totals
