"""Mutator registry.

A mutator is a named, pure ``(value, record) -> value`` function used to
normalize one field before comparison. Mutators are looked up by name when
a strategy is executed.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sweepdedupe.models import Reference

__all__ = [
    "MUTATORS",
    "Mutator",
    "MutatorFn",
    "apply_mutators",
    "get_mutator",
    "register_mutator",
]

MutatorFn = Callable[[str, Reference], str]


@dataclass(frozen=True, slots=True)
class Mutator:
    """A registered field mutator.

    Attributes
    ----------
    name : str
        Registry name used in strategy descriptors (e.g. ``noCase``).
    title : str
        Short human-readable title.
    description : str
        Longer description of the transformation.
    handler : MutatorFn
        The transformation, called as ``handler(value, record)``.
    """

    name: str
    title: str
    description: str
    handler: MutatorFn

    def __call__(self, value: Any, record: Reference) -> Any:
        """Apply the mutator, element-wise when ``value`` is a list."""
        if isinstance(value, list | tuple):
            return [self.handler(_as_text(item), record) for item in value]
        return self.handler(_as_text(value), record)


MUTATORS: dict[str, Mutator] = {}


def register_mutator(name: str, *, title: str, description: str) -> Callable[[MutatorFn], MutatorFn]:
    """Register the decorated function as mutator ``name``.

    Parameters
    ----------
    name : str
        Registry name.
    title : str
        Short human-readable title.
    description : str
        Longer description.

    Returns
    -------
    Callable[[MutatorFn], MutatorFn]
        Decorator returning the function unchanged.
    """

    def decorator(func: MutatorFn) -> MutatorFn:
        MUTATORS[name] = Mutator(name=name, title=title, description=description, handler=func)
        return func

    return decorator


def get_mutator(name: str) -> Mutator:
    """Look up a mutator by name.

    Raises
    ------
    KeyError
        If no mutator is registered under ``name``.
    """
    try:
        return MUTATORS[name]
    except KeyError:
        valid = ", ".join(sorted(MUTATORS))
        raise KeyError(f"Unknown mutator: {name!r}. Valid mutators: {valid}") from None


def apply_mutators(names: Iterable[str], value: Any, record: Mapping[str, Any]) -> Any:
    """Run a chain of mutators left to right.

    Parameters
    ----------
    names : Iterable[str]
        Mutator names in application order.
    value : Any
        Starting value (the raw field value, or ``""`` when absent).
    record : Mapping[str, Any]
        The full original record, for cross-field lookups.

    Returns
    -------
    Any
        The value after the last mutator.
    """
    for name in names:
        value = get_mutator(name)(value, record)
    return value


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
