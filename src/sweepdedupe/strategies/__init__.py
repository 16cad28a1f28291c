"""Strategy descriptors, validation and catalog.

A strategy names the mutators applied to each field and the ordered sweep
steps used to find duplicates. Built-in strategies: clark (default),
bramer, doiOnly, forbes, forbesMinFN, forbesMinFP.
"""

from sweepdedupe.strategies.catalog import (
    STRATEGIES,
    get_strategy,
    list_strategies,
    load_strategy_file,
    register_strategy,
)
from sweepdedupe.strategies.models import Step, Strategy
from sweepdedupe.strategies.validation import validate_strategy

__all__ = [
    "STRATEGIES",
    "Step",
    "Strategy",
    "get_strategy",
    "list_strategies",
    "load_strategy_file",
    "register_strategy",
    "validate_strategy",
]
