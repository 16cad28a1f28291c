"""JSON and JSON Lines reference parsers.

A JSON library is an array of reference objects (a single object is read
as a one-record library). A JSON Lines library holds one reference object
per line; blank lines are ignored.
"""

import json
from typing import Any

from sweepdedupe.parse.base import ParseResult


def parse_json(lines: list[str]) -> ParseResult:
    """Parse a JSON array of reference objects.

    Parameters
    ----------
    lines : list[str]
        File content as decoded lines.

    Returns
    -------
    ParseResult
        Records, warnings, and errors.
    """
    warnings: list[str] = []
    errors: list[str] = []
    records: list[dict[str, Any]] = []

    try:
        data = json.loads("\n".join(lines))
    except json.JSONDecodeError as e:
        errors.append(f"Line {e.lineno}: Invalid JSON: {e.msg}")
        return ParseResult(records, warnings, errors)

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        errors.append(f"Expected a JSON array of objects, got {type(data).__name__}")
        return ParseResult(records, warnings, errors)

    for index, item in enumerate(data):
        if isinstance(item, dict):
            records.append(item)
        else:
            warnings.append(f"Item {index}: Skipping non-object entry of type {type(item).__name__}")

    return ParseResult(records, warnings, errors)


def parse_jsonl(lines: list[str]) -> ParseResult:
    """Parse JSON Lines, one reference object per line.

    Parameters
    ----------
    lines : list[str]
        File content as decoded lines.

    Returns
    -------
    ParseResult
        Records, warnings, and errors.
    """
    warnings: list[str] = []
    errors: list[str] = []
    records: list[dict[str, Any]] = []

    for line_num, line in enumerate(lines):
        if not line.strip():
            continue
        try:
            item = json.loads(line)
        except json.JSONDecodeError as e:
            errors.append(f"Line {line_num}: Invalid JSON: {e.msg}")
            continue
        if isinstance(item, dict):
            records.append(item)
        else:
            warnings.append(f"Line {line_num}: Skipping non-object entry of type {type(item).__name__}")

    return ParseResult(records, warnings, errors)
