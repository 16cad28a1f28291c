"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from sweepdedupe.models import WorkingRecord  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "synthetic"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the synthetic reference libraries."""
    return FIXTURES_DIR


@pytest.fixture
def make_working() -> Callable[..., WorkingRecord]:
    """Factory for working records with minimal boilerplate.

    Fields are given as keyword arguments and used both as the original
    record and as the normalized values.
    """

    def _factory(index: int = 0, *, steps: int = 1, rec_number: Any = None, **fields: Any) -> WorkingRecord:
        return WorkingRecord(
            original=dict(fields),
            index=index,
            rec_number=rec_number if rec_number is not None else index + 1,
            fields=dict(fields),
            steps=[None] * steps,
        )

    return _factory


@pytest.fixture
def doi_records() -> list[dict[str, Any]]:
    """Three references, the first and last sharing a DOI written two ways."""
    return [
        {"title": "First", "doi": "10.1000/182", "recNumber": "A1"},
        {"title": "Second", "doi": "10.1000/999", "recNumber": "A2"},
        {"title": "Third", "doi": "https://doi.org/10.1000/182", "recNumber": "A3"},
    ]
