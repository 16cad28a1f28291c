"""Pairwise field comparisons.

A comparison is a named, pure ``(a, b) -> score`` function returning a
similarity in [0, 1]. Comparisons are looked up by name when a strategy
step is executed.
"""

import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rapidfuzz.distance import JaroWinkler

__all__ = [
    "COMPARISONS",
    "Comparison",
    "CompareFn",
    "exact",
    "exact_truncate",
    "get_comparison",
    "jaro_winkler",
    "random_score",
    "register_comparison",
]

CompareFn = Callable[[Any, Any], float]


@dataclass(frozen=True, slots=True)
class Comparison:
    """A registered comparison.

    Attributes
    ----------
    name : str
        Registry name used in strategy steps (e.g. ``exact``).
    title : str
        Short human-readable title.
    description : str
        Longer description of the metric.
    handler : CompareFn
        Similarity function, called as ``handler(a, b)``.
    """

    name: str
    title: str
    description: str
    handler: CompareFn

    def __call__(self, a: Any, b: Any) -> float:
        """Score two field values."""
        return float(self.handler(a, b))


COMPARISONS: dict[str, Comparison] = {}


def register_comparison(
    name: str, *, title: str, description: str
) -> Callable[[CompareFn], CompareFn]:
    """Register the decorated function as comparison ``name``."""

    def decorator(func: CompareFn) -> CompareFn:
        COMPARISONS[name] = Comparison(name=name, title=title, description=description, handler=func)
        return func

    return decorator


def get_comparison(name: str) -> Comparison:
    """Look up a comparison by name.

    Raises
    ------
    KeyError
        If no comparison is registered under ``name``.
    """
    try:
        return COMPARISONS[name]
    except KeyError:
        valid = ", ".join(sorted(COMPARISONS))
        raise KeyError(f"Unknown comparison: {name!r}. Valid comparisons: {valid}") from None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list | tuple):
        return ", ".join(str(v) for v in value)
    return str(value)


@register_comparison(
    "exact",
    title="Exact comparison",
    description="Simple character-by-character exact comparison, lists compared element-wise",
)
def exact(a: Any, b: Any) -> float:
    """Return 1.0 if both values are equal, 0.0 otherwise.

    Lists and tuples are compared structurally, so ``["A", "B"]`` equals
    ``("A", "B")`` but not ``["B", "A"]``.
    """
    if isinstance(a, list | tuple) and isinstance(b, list | tuple):
        return 1.0 if list(a) == list(b) else 0.0
    return 1.0 if a == b else 0.0


@register_comparison(
    "exactTruncate",
    title="Exact comparison with truncate",
    description="Exact comparison after truncating both strings to the length of the shortest",
)
def exact_truncate(a: Any, b: Any) -> float:
    """Return 1.0 if the shorter value is a prefix of the longer one.

    Examples
    --------
    >>> exact_truncate("a study of", "a study of mice")
    1.0
    >>> exact_truncate("a study", "the study")
    0.0
    """
    text_a = _as_text(a)
    text_b = _as_text(b)
    size = min(len(text_a), len(text_b))
    return 1.0 if text_a[:size] == text_b[:size] else 0.0


@register_comparison(
    "jaroWinkler",
    title="Jaro-Winkler",
    description="String similarity using the Jaro-Winkler metric",
)
def jaro_winkler(a: Any, b: Any) -> float:
    """Jaro-Winkler similarity of the two values in [0, 1]."""
    return JaroWinkler.normalized_similarity(_as_text(a), _as_text(b))


@register_comparison(
    "random",
    title="Random",
    description="Ignore the values and draw a uniform score between 0 and 1, for calibration only",
)
def random_score(a: Any, b: Any) -> float:
    return random.uniform(0.0, 1.0)
