"""Tests for strategy descriptors, validation and the catalog."""

import json
from pathlib import Path

import pytest

from sweepdedupe.errors import UnknownStrategyError
from sweepdedupe.strategies import (
    STRATEGIES,
    Step,
    Strategy,
    get_strategy,
    list_strategies,
    load_strategy_file,
    register_strategy,
    validate_strategy,
)

_VALID = {
    "title": "Test",
    "description": "Test strategy",
    "mutators": {"title": ["noCase", "noSpace"], "doi": "doiRewrite"},
    "steps": [
        {"fields": ["doi"], "sort": "doi", "comparison": "exact"},
        {"fields": ["title", "year"], "sort": ["title", "year"], "comparison": "exactTruncate"},
    ],
}


@pytest.fixture
def scratch_catalog() -> None:
    """Restore the strategy catalog after a test registers entries."""
    saved = dict(STRATEGIES)
    yield
    STRATEGIES.clear()
    STRATEGIES.update(saved)


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_strategy_from_dict_casts_names_to_tuples() -> None:
    """Test single names and lists both become tuples."""
    strategy = Strategy.from_dict(_VALID)

    assert strategy.mutators == {"title": ("noCase", "noSpace"), "doi": ("doiRewrite",)}
    assert strategy.steps[0] == Step(fields=("doi",), sort=("doi",), comparison="exact")
    assert strategy.steps[1].sort == ("title", "year")
    assert strategy.steps[1].skip_omitted is True


@pytest.mark.unit
def test_step_accepts_camel_case_skip_omitted() -> None:
    """Test skipOmitted alias."""
    step = Step.from_dict({"fields": "title", "sort": "title", "comparison": "exact", "skipOmitted": False})

    assert step.skip_omitted is False
    assert step.fields == ("title",)


@pytest.mark.unit
def test_strategy_to_dict_round_trips() -> None:
    """Test to_dict output builds an equal strategy."""
    strategy = Strategy.from_dict(_VALID)

    assert Strategy.from_dict(strategy.to_dict()) == strategy


@pytest.mark.unit
@pytest.mark.parametrize("steps", [None, "doi", 42])
def test_strategy_without_step_list_rejected(steps: object) -> None:
    """Test a descriptor whose steps are not a list is malformed."""
    with pytest.raises(UnknownStrategyError, match="Invalid strategy schema"):
        Strategy.from_dict({**_VALID, "steps": steps})


@pytest.mark.unit
@pytest.mark.parametrize("mutators", [["noCase"], "noCase", 5])
def test_strategy_with_non_mapping_mutators_rejected(mutators: object) -> None:
    """Test mutators must map field names to mutator chains."""
    with pytest.raises(UnknownStrategyError, match="Invalid strategy schema"):
        Strategy.from_dict({**_VALID, "mutators": mutators})


@pytest.mark.unit
@pytest.mark.parametrize(
    "step",
    [
        {"fields": 5, "sort": "doi", "comparison": "exact"},
        {"fields": ["doi"], "sort": 5, "comparison": "exact"},
        {"fields": ["doi", 7], "sort": "doi", "comparison": "exact"},
    ],
)
def test_step_with_non_name_fields_rejected(step: dict) -> None:
    """Test step fields and sort must be a name or a list of names."""
    with pytest.raises(UnknownStrategyError, match="Invalid strategy schema"):
        Step.from_dict(step)


@pytest.mark.unit
def test_mutator_chain_must_be_names() -> None:
    """Test a mutator chain that is not a list of names is malformed."""
    with pytest.raises(UnknownStrategyError, match="mutators for title"):
        Strategy.from_dict({**_VALID, "mutators": {"title": 3}})


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_valid_strategy() -> None:
    """Test a complete strategy validates."""
    assert validate_strategy(_VALID) is True


@pytest.mark.unit
@pytest.mark.parametrize("name", ["clark", "bramer", "doiOnly", "forbes", "forbesMinFN", "forbesMinFP"])
def test_builtin_strategies_validate(name: str) -> None:
    """Test every built-in strategy passes validation."""
    assert validate_strategy(get_strategy(name)) is True


@pytest.mark.unit
def test_validate_accumulates_every_violation() -> None:
    """Test all problems are reported together."""
    descriptor = {
        "title": "",
        "steps": [
            {"fields": [], "sort": "title", "comparison": "exact"},
            {"fields": ["title"], "sort": [], "comparison": ""},
        ],
    }

    errors = validate_strategy(descriptor)

    assert errors == [
        "Field title is missing",
        "Field description is missing",
        "Field mutators is missing",
        "Step #1 contains no fields",
        "Step #2 contains no sort field(s)",
        "Step #2 contains no comparison",
    ]


@pytest.mark.unit
def test_validate_requires_a_step() -> None:
    """Test an empty step list is a violation."""
    errors = validate_strategy({**_VALID, "steps": []})

    assert errors == ["Should contain at least one step"]


@pytest.mark.unit
def test_validate_empty_mutator_map_is_allowed() -> None:
    """Test a strategy may normalize nothing."""
    assert validate_strategy({**_VALID, "mutators": {}}) is True


@pytest.mark.unit
def test_validate_flags_unknown_names() -> None:
    """Test unregistered mutators and comparisons are reported."""
    descriptor = {
        **_VALID,
        "mutators": {"title": ["noCase", "shout"]},
        "steps": [{"fields": ["title"], "sort": "title", "comparison": "fuzzy"}],
    }

    errors = validate_strategy(descriptor)

    assert errors == [
        "Field title uses unknown mutator 'shout'",
        "Step #1 uses unknown comparison 'fuzzy'",
    ]


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_builtin_catalog_contents() -> None:
    """Test the catalog is seeded with the built-in strategies in order."""
    names = [name for name, _ in list_strategies()]

    assert names[:6] == ["clark", "bramer", "doiOnly", "forbes", "forbesMinFN", "forbesMinFP"]


@pytest.mark.unit
def test_get_strategy_unknown_raises() -> None:
    """Test unknown strategy names raise UnknownStrategyError."""
    with pytest.raises(UnknownStrategyError, match="Unknown strategy specified"):
        get_strategy("nope")


@pytest.mark.unit
@pytest.mark.usefixtures("scratch_catalog")
def test_register_strategy_from_mapping() -> None:
    """Test registering a raw descriptor."""
    strategy = register_strategy("custom", _VALID)

    assert get_strategy("custom") is strategy
    assert strategy.title == "Test"


@pytest.mark.unit
@pytest.mark.usefixtures("scratch_catalog")
def test_load_strategy_file(tmp_path: Path) -> None:
    """Test JSON descriptors register under the file stem."""
    path = tmp_path / "titles.json"
    path.write_text(json.dumps(_VALID), encoding="utf-8")

    name, strategy = load_strategy_file(path)

    assert name == "titles"
    assert get_strategy("titles") == strategy


@pytest.mark.unit
@pytest.mark.usefixtures("scratch_catalog")
def test_load_strategy_file_with_explicit_name(tmp_path: Path) -> None:
    """Test an explicit catalog name overrides the stem."""
    path = tmp_path / "titles.json"
    path.write_text(json.dumps(_VALID), encoding="utf-8")

    name, _ = load_strategy_file(path, name="mine")

    assert name == "mine"
    assert "mine" in STRATEGIES


@pytest.mark.unit
@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_strategy_file_rejects_bad_content(tmp_path: Path, content: str) -> None:
    """Test invalid JSON and non-object documents are rejected."""
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(UnknownStrategyError, match="Invalid strategy file"):
        load_strategy_file(path)


@pytest.mark.unit
def test_load_strategy_file_missing(tmp_path: Path) -> None:
    """Test missing files raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_strategy_file(tmp_path / "absent.json")
