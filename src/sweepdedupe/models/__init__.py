"""Shared data types for sweepdedupe.

Strategy descriptors live closer to their consumers in
sweepdedupe.strategies.
"""

from sweepdedupe.models.records import (
    FieldValue,
    RecordRef,
    Reference,
    StepResult,
    WorkingRecord,
    is_empty,
)

__all__ = [
    "FieldValue",
    "RecordRef",
    "Reference",
    "StepResult",
    "WorkingRecord",
    "is_empty",
]
