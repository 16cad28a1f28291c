"""Sort-sweep duplicate detection for bibliographic references.

This package provides:
- Data models (sweepdedupe.models) - working records and step results
- Mutators (sweepdedupe.mutators) - field normalization functions
- Comparisons (sweepdedupe.comparisons) - pairwise field similarity
- Strategies (sweepdedupe.strategies) - descriptors, validation, catalog
- Engine (sweepdedupe.engine) - normalization, sweep, aggregation, actions
- Parsing (sweepdedupe.parse) - RIS, BibTeX and JSON library ingestion
- Audit (sweepdedupe.audit) - structured JSONL logging
- CLI (sweepdedupe.cli) - command-line interface
- Public API (sweepdedupe.api) - high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from sweepdedupe.api import (
    ParseError,
    dedupe,
    parse_bytes,
    parse_file,
    write_jsonl,
)
from sweepdedupe.engine import Action, DedupeSettings, Deduper, DupeRef, FieldWeight
from sweepdedupe.errors import (
    DedupeError,
    InvalidInputError,
    InvalidSettingError,
    StrategyValidationError,
    UnknownStrategyError,
)
from sweepdedupe.strategies import (
    Step,
    Strategy,
    get_strategy,
    list_strategies,
    load_strategy_file,
    register_strategy,
    validate_strategy,
)

__all__ = [
    "__version__",
    "__license__",
    "Action",
    "DedupeError",
    "DedupeSettings",
    "Deduper",
    "DupeRef",
    "FieldWeight",
    "InvalidInputError",
    "InvalidSettingError",
    "ParseError",
    "Step",
    "Strategy",
    "StrategyValidationError",
    "UnknownStrategyError",
    "dedupe",
    "get_strategy",
    "list_strategies",
    "load_strategy_file",
    "parse_bytes",
    "parse_file",
    "register_strategy",
    "validate_strategy",
    "write_jsonl",
]
