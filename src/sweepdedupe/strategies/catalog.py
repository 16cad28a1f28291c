"""Named strategy catalog.

Strategies are registered under a name and looked up by the engine when
a run starts. The catalog is seeded with the built-in strategies on
import; callers may add their own with ``register_strategy`` or
``load_strategy_file``.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sweepdedupe.errors import UnknownStrategyError
from sweepdedupe.strategies.builtin import BUILTIN_STRATEGIES
from sweepdedupe.strategies.models import Strategy

__all__ = [
    "STRATEGIES",
    "get_strategy",
    "list_strategies",
    "load_strategy_file",
    "register_strategy",
]

STRATEGIES: dict[str, Strategy] = {}


def register_strategy(name: str, strategy: Strategy | Mapping[str, Any]) -> Strategy:
    """Add or replace a strategy in the catalog.

    Parameters
    ----------
    name : str
        Catalog name.
    strategy : Strategy | Mapping[str, Any]
        Strategy or raw descriptor mapping.

    Returns
    -------
    Strategy
        The registered strategy.

    Raises
    ------
    UnknownStrategyError
        If the descriptor mapping is malformed.
    """
    if not isinstance(strategy, Strategy):
        strategy = Strategy.from_dict(strategy)
    STRATEGIES[name] = strategy
    return strategy


def get_strategy(name: str) -> Strategy:
    """Look up a strategy by name.

    Raises
    ------
    UnknownStrategyError
        If no strategy is registered under ``name``.
    """
    try:
        return STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(f"Unknown strategy specified: {name!r}") from None


def list_strategies() -> list[tuple[str, Strategy]]:
    """Return ``(name, strategy)`` pairs in registration order."""
    return list(STRATEGIES.items())


def load_strategy_file(path: Path | str, name: str | None = None) -> tuple[str, Strategy]:
    """Load a JSON strategy descriptor and register it.

    Parameters
    ----------
    path : Path | str
        JSON file holding one strategy descriptor.
    name : str | None, optional
        Catalog name. Defaults to the file stem.

    Returns
    -------
    tuple[str, Strategy]
        Registered name and strategy.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    UnknownStrategyError
        If the file is not valid JSON or not a descriptor object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Strategy file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise UnknownStrategyError(f"Invalid strategy file {path}: {e}") from e

    if not isinstance(data, dict):
        raise UnknownStrategyError(f"Invalid strategy file {path}: expected a JSON object")

    name = name or path.stem
    return name, register_strategy(name, data)


for _name, _descriptor in BUILTIN_STRATEGIES.items():
    register_strategy(_name, _descriptor)
