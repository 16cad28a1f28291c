"""Pairwise similarity comparisons.

Built-in catalog: exact, exactTruncate, jaroWinkler and random (the last
one is for calibrating strategies, not for production use).
"""

from sweepdedupe.comparisons.registry import (
    COMPARISONS,
    CompareFn,
    Comparison,
    exact,
    exact_truncate,
    get_comparison,
    jaro_winkler,
    random_score,
    register_comparison,
)

__all__ = [
    "COMPARISONS",
    "CompareFn",
    "Comparison",
    "exact",
    "exact_truncate",
    "get_comparison",
    "jaro_winkler",
    "random_score",
    "register_comparison",
]
