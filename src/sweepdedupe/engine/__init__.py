"""Duplicate-detection engine.

This package provides the run orchestration (``Deduper``), its settings,
and the normalization, sweep, aggregation and dispatch stages.
"""

from sweepdedupe.engine.aggregate import aggregate, dispatch
from sweepdedupe.engine.config import Action, DedupeSettings, DupeRef, FieldWeight
from sweepdedupe.engine.normalize import normalize_records
from sweepdedupe.engine.progress import Throttle
from sweepdedupe.engine.runner import Deduper
from sweepdedupe.engine.sweep import compare_via_step, sweep

__all__ = [
    "Action",
    "DedupeSettings",
    "Deduper",
    "DupeRef",
    "FieldWeight",
    "Throttle",
    "aggregate",
    "compare_via_step",
    "dispatch",
    "normalize_records",
    "sweep",
]
