"""Audit logging subsystem for sweepdedupe.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: Run identifier factory
"""

from sweepdedupe.audit.helpers import generate_run_id
from sweepdedupe.audit.logger import AuditLogger
from sweepdedupe.utils import get_iso_timestamp

__all__ = [
    "AuditLogger",
    "generate_run_id",
    "get_iso_timestamp",
]
