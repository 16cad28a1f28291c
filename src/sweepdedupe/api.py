"""Public API for sweepdedupe.

This module provides the high-level entry points:
- Parsing reference library files and bytes into flat records
- Exporting records to JSONL format
- Running duplicate detection in one call
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from sweepdedupe.audit.logger import AuditLogger
from sweepdedupe.engine import Deduper
from sweepdedupe.engine.progress import ProgressFn
from sweepdedupe.parse import ParseError, parse_bytes, parse_file

__all__ = [
    "ParseError",
    "dedupe",
    "parse_bytes",
    "parse_file",
    "write_jsonl",
]


def write_jsonl(
    records: Iterable[Mapping[str, Any]],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> int:
    """Write records to JSONL file (one JSON object per line).

    Output is deterministic with consistent field ordering and UTF-8 encoding.

    Parameters
    ----------
    records : Iterable[Mapping[str, Any]]
        Records to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.

    Returns
    -------
    int
        Number of records written.

    Examples
    --------
    Export parsed records to JSONL:

        >>> from sweepdedupe import parse_file, write_jsonl
        >>> records = parse_file("references.ris")
        >>> write_jsonl(records, "output.jsonl")
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for record in records:
            json_str = json.dumps(
                dict(record),
                ensure_ascii=False,
                sort_keys=sort_keys,
                default=str,
            )
            f.write(json_str + "\n")
            count += 1
    return count


def dedupe(
    source: Any,
    *,
    on_progress: ProgressFn | None = None,
    logger: AuditLogger | None = None,
    **settings: Any,
) -> list[dict[str, Any]]:
    """Detect duplicates in a reference library.

    Parameters
    ----------
    source : Any
        Sequence of record mappings, a library file path, or library bytes.
    on_progress : ProgressFn | None, optional
        Progress callback, called as ``on_progress(current, maximum)``.
    logger : AuditLogger | None, optional
        Audit logger for run and stage events.
    **settings : Any
        Engine settings (``strategy``, ``action``, ``threshold``, ...);
        camelCase names are accepted too.

    Returns
    -------
    list[dict[str, Any]]
        Output records in input order.

    Raises
    ------
    DedupeError
        If the input, strategy or settings are invalid.
    ParseError
        If a path or bytes input cannot be parsed.

    Examples
    --------
    Mark duplicates in a RIS file:

        >>> from sweepdedupe import dedupe
        >>> output = dedupe("references.ris", action="mark")
        >>> [record["dedupe"] for record in output]
        ['OK', 'OK', 'DUPE']

    Drop duplicates using a specific strategy:

        >>> unique = dedupe(records, strategy="forbes", action="delete", threshold=0.5)
    """
    deduper = Deduper(on_progress=on_progress, logger=logger, **settings)
    return deduper.run(source)
