"""Tests for the Deduper run orchestration."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from sweepdedupe.audit.logger import AuditLogger
from sweepdedupe.engine import Action, Deduper, DupeRef
from sweepdedupe.errors import (
    InvalidInputError,
    InvalidSettingError,
    StrategyValidationError,
    UnknownStrategyError,
)
from sweepdedupe.models import WorkingRecord
from sweepdedupe.strategies import STRATEGIES, register_strategy


@pytest.fixture
def broken_strategy() -> str:
    """Register a strategy that fails validation, removed after the test."""
    register_strategy(
        "broken",
        {"title": "Broken", "steps": [{"fields": ["doi"], "sort": "doi", "comparison": "exact"}]},
    )
    yield "broken"
    del STRATEGIES["broken"]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_set_single_and_bulk_is_chainable() -> None:
    """Test set() accepts a name/value pair or a mapping and returns self."""
    deduper = Deduper()

    result = deduper.set("action", "mark").set({"threshold": 0.5, "markDupe": "X"})

    assert result is deduper
    assert deduper.settings.action is Action.MARK
    assert deduper.settings.threshold == 0.5
    assert deduper.settings.mark_dupe == "X"


@pytest.mark.unit
def test_constructor_overrides_and_mapping() -> None:
    """Test settings mapping and keyword overrides combine."""
    deduper = Deduper({"strategy": "doiOnly", "dupeRef": "recnumber"}, threshold=0.3)

    assert deduper.settings.strategy == "doiOnly"
    assert deduper.settings.dupe_ref is DupeRef.RECNUMBER
    assert deduper.settings.threshold == 0.3


@pytest.mark.unit
def test_set_invalid_value_raises() -> None:
    """Test invalid values are rejected when set."""
    with pytest.raises(InvalidSettingError):
        Deduper().set("fieldWeight", "median")


# ---------------------------------------------------------------------------
# Runs
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_doi_duplicates_detected(doi_records: list[dict[str, Any]]) -> None:
    """Test records sharing a normalized DOI are linked."""
    output = Deduper(strategy="doiOnly").run(doi_records)

    assert output[0]["dedupe"] == {"score": 0.0, "dupeOf": []}
    assert output[1]["dedupe"] == {"score": 0.0, "dupeOf": []}
    assert output[2]["dedupe"] == {"score": 1.0, "dupeOf": [0]}


@pytest.mark.unit
def test_dupe_ref_recnumber(doi_records: list[dict[str, Any]]) -> None:
    """Test backreferences use recNumber when configured."""
    output = Deduper(strategy="doiOnly", dupe_ref="recnumber").run(doi_records)

    assert output[2]["dedupe"]["dupeOf"] == ["A1"]


@pytest.mark.unit
def test_rec_number_defaults_to_position() -> None:
    """Test records without recNumber are numbered from 1."""
    records = [{"doi": "d"}, {"doi": "d"}]

    output = Deduper(strategy="doiOnly", dupe_ref="recnumber").run(records)

    assert output[1]["dedupe"]["dupeOf"] == [1]


@pytest.mark.unit
def test_input_records_never_mutated(doi_records: list[dict[str, Any]]) -> None:
    """Test the caller's records are left as they were."""
    before = copy.deepcopy(doi_records)

    Deduper(strategy="doiOnly", action="mark").run(doi_records)

    assert doi_records == before


@pytest.mark.unit
def test_runs_are_idempotent(doi_records: list[dict[str, Any]]) -> None:
    """Test repeated runs on the same instance give identical output."""
    deduper = Deduper(strategy="clark")

    assert deduper.run(doi_records) == deduper.run(doi_records)


@pytest.mark.unit
@pytest.mark.parametrize("action", ["stats", "mark", "delete"])
def test_scores_and_lengths(doi_records: list[dict[str, Any]], action: str) -> None:
    """Test STATS and MARK keep every record; DELETE keeps a subsequence."""
    output = Deduper(strategy="clark", action=action).run(doi_records)

    if action == "delete":
        assert output == [doi_records[0], doi_records[1]]
    else:
        assert [r["title"] for r in output] == ["First", "Second", "Third"]
    if action == "stats":
        assert all(0.0 <= r["dedupe"]["score"] <= 1.0 for r in output)


@pytest.mark.unit
def test_empty_input_returns_empty() -> None:
    """Test an empty library runs cleanly."""
    assert Deduper().run([]) == []


@pytest.mark.unit
def test_on_normalized_receives_working_records(doi_records: list[dict[str, Any]]) -> None:
    """Test the normalization snapshot shows mutated fields."""
    snapshots: list[list[WorkingRecord]] = []

    Deduper(strategy="doiOnly", on_normalized=snapshots.append).run(doi_records)

    assert len(snapshots) == 1
    assert [w.get("doi") for w in snapshots[0]] == [
        "https://doi.org/10.1000/182",
        "https://doi.org/10.1000/999",
        "https://doi.org/10.1000/182",
    ]


@pytest.mark.unit
def test_on_progress_called(doi_records: list[dict[str, Any]]) -> None:
    """Test progress is reported at least once, leading edge first."""
    calls: list[tuple[int, int]] = []

    Deduper(strategy="doiOnly", on_progress=lambda c, m: calls.append((c, m))).run(doi_records)

    assert calls[0] == (0, 3)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("source", [42, None, {"title": "x"}, [1, 2]])
def test_invalid_input_rejected(source: Any) -> None:
    """Test inputs that are not sequences of mappings are rejected."""
    with pytest.raises(InvalidInputError):
        Deduper().run(source)


@pytest.mark.unit
def test_unknown_strategy_rejected() -> None:
    """Test unknown strategy names abort the run."""
    with pytest.raises(UnknownStrategyError):
        Deduper(strategy="missing").run([])


@pytest.mark.unit
def test_invalid_strategy_rejected(broken_strategy: str) -> None:
    """Test validation failures carry every message."""
    with pytest.raises(StrategyValidationError) as excinfo:
        Deduper(strategy=broken_strategy).run([])

    assert excinfo.value.errors == ["Field description is missing", "Field mutators is missing"]
    assert str(excinfo.value).startswith("Invalid strategy - Field description is missing, ")


@pytest.mark.unit
def test_validation_can_be_disabled(broken_strategy: str) -> None:
    """Test a strategy that fails validation still runs when checks are off."""
    output = Deduper(strategy=broken_strategy, validate_strategy=False).run([{"doi": "a"}, {"doi": "a"}])

    assert output[1]["dedupe"]["dupeOf"] == [0]


# ---------------------------------------------------------------------------
# Audit events
# ---------------------------------------------------------------------------


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_run_emits_stage_events(tmp_path: Path, doi_records: list[dict[str, Any]]) -> None:
    """Test a successful run logs every stage between start and finish."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger("run_1", log_path) as logger:
        Deduper(strategy="doiOnly", logger=logger).run(doi_records)

    events = _read_events(log_path)
    names = [e["event"] for e in events]

    assert names[0] == "run_started"
    assert names[-1] == "run_finished"
    assert events[-1]["data"]["status"] == "success"
    assert events[-1]["data"]["records_out"] == 3
    stages = [e["stage"] for e in events if e["event"] == "stage_finished"]
    assert stages == ["normalize", "sweep", "aggregate", "dispatch"]
    assert "step_finished" in names


@pytest.mark.unit
def test_run_failure_logs_error(tmp_path: Path) -> None:
    """Test failures are logged before being re-raised."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger("run_1", log_path) as logger:
        with pytest.raises(UnknownStrategyError):
            Deduper(strategy="missing", logger=logger).run([])

    events = _read_events(log_path)

    assert events[0]["event"] == "error"
    assert events[0]["level"] == "ERROR"
    assert events[0]["data"]["exception_class"] == "UnknownStrategyError"
    assert events[-1]["data"]["status"] == "failed"
