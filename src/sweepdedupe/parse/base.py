"""Base types and utilities for reference library parsers."""

import re
from collections.abc import Iterable
from typing import Any, NamedTuple

SUPPORTED_EXTENSIONS: dict[str, str] = {
    ".ris": "ris",
    ".bib": "bibtex",
    ".json": "json",
    ".jsonl": "jsonl",
}

# Fields holding a list of values; every other field holds one string
LIST_FIELDS = frozenset({"authors", "urls", "keywords"})


class ParseError(Exception):
    """Raised when a reference library cannot be read at all."""


class ParseResult(NamedTuple):
    """Result of parsing a reference library.

    Supports tuple unpacking: ``records, warnings, errors = parse_ris(...)``.

    Attributes
    ----------
    records : list[dict[str, Any]]
        Parsed references as flat field mappings.
    warnings : list[str]
        Warning messages.
    errors : list[str]
        Error messages.
    """

    records: list[dict[str, Any]]
    warnings: list[str]
    errors: list[str]


def build_reference(fields: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Fold ``(field, value)`` pairs into a flat reference.

    List fields accumulate every value in order; for other fields the
    first non-empty value wins.

    Parameters
    ----------
    fields : Iterable[tuple[str, str]]
        Field name and value pairs in source order.

    Returns
    -------
    dict[str, Any]
        Flat reference mapping.
    """
    reference: dict[str, Any] = {}
    for field, value in fields:
        value = value.strip()
        if not value:
            continue
        if field in LIST_FIELDS:
            reference.setdefault(field, []).append(value)
        elif field not in reference:
            reference[field] = value
    return reference


def join_pages(start: str | None, end: str | None) -> str | None:
    """Join start and end pages as ``start-end``."""
    if start and end and end != start:
        return f"{start}-{end}"
    return start or end or None


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of file bytes using deterministic strategy.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8, latin-1, etc.).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def sniff_format(lines: list[str]) -> str:
    """Sniff format by inspecting file content.

    RIS detection requires only the ``TY`` tag because the closing ``ER``
    may fall beyond the sample when the first record is large.

    Parameters
    ----------
    lines : list[str]
        Lines of the file (at least 100 recommended).

    Returns
    -------
    str
        Format identifier (ris|bibtex|json|jsonl|unknown).
    """
    sample_text = "\n".join(lines[:100])
    stripped = sample_text.lstrip()

    if stripped.startswith("["):
        return "json"

    if stripped.startswith("{"):
        first_line = stripped.split("\n", 1)[0].rstrip()
        return "jsonl" if first_line.endswith("}") else "json"

    if re.search(r"^@\w+\s*\{", sample_text, re.MULTILINE):
        return "bibtex"

    if re.search(r"^TY  - ", sample_text, re.MULTILINE):
        return "ris"

    return "unknown"
