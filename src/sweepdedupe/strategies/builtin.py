"""Built-in strategy descriptors.

Field names follow the flat reference layout produced by
``sweepdedupe.parse``: ``title``, ``authors`` (list), ``journal``,
``year``, ``volume``, ``number`` (issue), ``pages``, ``doi``, ``urls``.
"""

from typing import Any

_TITLE_MUTATORS = ["stripHtmlTags", "deburr", "alphaNumericOnly", "noCase", "noSpace"]
_JOURNAL_MUTATORS = ["deburr", "alphaNumericOnly", "noCase", "noSpace"]

CLARK: dict[str, Any] = {
    "title": "Clark",
    "description": "General purpose multi-step sweep over identifiers, titles and citation details",
    "mutators": {
        "authors": "authorRewriteSingle",
        "doi": "doiRewrite",
        "title": _TITLE_MUTATORS,
        "journal": _JOURNAL_MUTATORS,
        "year": "numericOnly",
        "volume": "numericOnly",
        "number": "numericOnly",
        "pages": "consistentPageNumbering",
    },
    "steps": [
        {"fields": ["doi"], "sort": "doi", "comparison": "exact"},
        {"fields": ["title", "year"], "sort": "title", "comparison": "exact"},
        {"fields": ["title", "volume", "pages"], "sort": "title", "comparison": "exact"},
        {"fields": ["authors", "year", "pages"], "sort": "pages", "comparison": "exact"},
        {
            "fields": ["journal", "volume", "number", "pages"],
            "sort": ["journal", "volume"],
            "comparison": "exact",
        },
    ],
}

BRAMER: dict[str, Any] = {
    "title": "Bramer et. al.",
    "description": (
        "Bramer et. al. (https://doi.org/10.3163/1536-5050.104.3.014) "
        "deduplication sweep strategy"
    ),
    "mutators": {
        "author": "authorRewrite",
        "doi": "doiRewrite",
        "title": ["deburr", "alphaNumericOnly", "noCase"],
        "year": "numericOnly",
    },
    "steps": [
        {"fields": ["doi"], "sort": "doi", "comparison": "exact"},
        {"fields": ["author", "year", "title", "journal"], "sort": "title", "comparison": "exact"},
        {"fields": ["author", "year", "title", "pages"], "sort": "pages", "comparison": "exact"},
        {"fields": ["title", "volume", "pages"], "sort": "title", "comparison": "exact"},
        {"fields": ["authors", "volume", "pages"], "sort": "title", "comparison": "exact"},
        {"fields": ["year", "volume", "issue", "pages"], "sort": "title", "comparison": "exact"},
        {"fields": ["title"], "sort": "title", "comparison": "exact"},
        {"fields": ["authors", "year"], "sort": "title", "comparison": "exact"},
    ],
}

DOI_ONLY: dict[str, Any] = {
    "title": "DOI only",
    "description": "Compare references by their normalized DOI and nothing else",
    "mutators": {"doi": "doiRewrite"},
    "steps": [
        {"fields": ["doi"], "sort": "doi", "comparison": "exact"},
    ],
}

FORBES: dict[str, Any] = {
    "title": "Forbes",
    "description": "Balanced sweep tolerating truncated titles",
    "mutators": {
        "authors": "authorRewriteSingle",
        "doi": "doiRewrite",
        "title": ["removeEnclosingBrackets", *_TITLE_MUTATORS],
        "journal": _JOURNAL_MUTATORS,
        "year": "numericOnly",
        "volume": "numericOnly",
        "number": "numericOnly",
        "pages": "consistentPageNumbering",
    },
    "steps": [
        {"fields": ["doi"], "sort": "doi", "comparison": "exact"},
        {"fields": ["title", "year"], "sort": "title", "comparison": "exactTruncate"},
        {"fields": ["title", "volume", "pages"], "sort": "title", "comparison": "exactTruncate"},
        {"fields": ["authors", "year", "volume", "pages"], "sort": "pages", "comparison": "exact"},
        {
            "fields": ["journal", "volume", "number", "pages"],
            "sort": ["journal", "volume"],
            "comparison": "exact",
        },
    ],
}

FORBES_MIN_FN: dict[str, Any] = {
    "title": "Forbes (minimize false negatives)",
    "description": "Recall-tuned variant of Forbes with looser steps",
    "mutators": FORBES["mutators"],
    "steps": [
        {"fields": ["doi"], "sort": "doi", "comparison": "exact"},
        {"fields": ["title"], "sort": "title", "comparison": "exactTruncate"},
        {"fields": ["doi"], "sort": "title", "comparison": "exact"},
        {"fields": ["authors", "year"], "sort": "pages", "comparison": "exact"},
        {"fields": ["volume", "pages"], "sort": "pages", "comparison": "exact"},
        {"fields": ["journal", "year", "pages"], "sort": ["journal", "volume"], "comparison": "exact"},
    ],
}

FORBES_MIN_FP: dict[str, Any] = {
    "title": "Forbes (minimize false positives)",
    "description": "Precision-tuned variant of Forbes requiring more agreeing fields per step",
    "mutators": FORBES["mutators"],
    "steps": [
        {"fields": ["doi", "title"], "sort": "doi", "comparison": "exactTruncate"},
        {"fields": ["title", "year", "pages"], "sort": "title", "comparison": "exact"},
        {"fields": ["title", "authors", "year"], "sort": "title", "comparison": "exact"},
        {
            "fields": ["authors", "year", "volume", "number", "pages"],
            "sort": "pages",
            "comparison": "exact",
        },
    ],
}

BUILTIN_STRATEGIES: dict[str, dict[str, Any]] = {
    "clark": CLARK,
    "bramer": BRAMER,
    "doiOnly": DOI_ONLY,
    "forbes": FORBES,
    "forbesMinFN": FORBES_MIN_FN,
    "forbesMinFP": FORBES_MIN_FP,
}
