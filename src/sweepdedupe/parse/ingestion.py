"""Reference library ingestion: bytes or files to flat references."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from sweepdedupe.parse.base import (
    SUPPORTED_EXTENSIONS,
    ParseError,
    ParseResult,
    detect_encoding,
    normalize_line_endings,
    sniff_format,
)
from sweepdedupe.parse.bibtex import parse_bibtex
from sweepdedupe.parse.jsonl import parse_json, parse_jsonl
from sweepdedupe.parse.ris import parse_ris

ParserFn = Callable[[list[str]], ParseResult]

_PARSER_MAP: dict[str, ParserFn] = {
    "ris": parse_ris,
    "bibtex": parse_bibtex,
    "json": parse_json,
    "jsonl": parse_jsonl,
}


def get_parser_for_format(format_name: str) -> ParserFn | None:
    """Get parser function for format.

    Parameters
    ----------
    format_name : str
        Format name (ris|bibtex|json|jsonl).

    Returns
    -------
    ParserFn | None
        Parser function or None if format not supported.
    """
    return _PARSER_MAP.get(format_name)


def ingest_bytes(data: bytes, fmt: str | None = None, source: str = "<bytes>") -> ParseResult:
    """Decode and parse a reference library held in memory.

    Parameters
    ----------
    data : bytes
        Raw library content.
    fmt : str | None, optional
        Format name. Sniffed from the content when omitted.
    source : str, optional
        Name used in error messages.

    Returns
    -------
    ParseResult
        Records with any non-fatal warnings and errors.

    Raises
    ------
    ParseError
        If the content cannot be decoded, its format is unknown, or it
        yields errors and no records at all.
    """
    encoding = detect_encoding(data)
    try:
        content = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"{source}: failed to decode with {encoding}: {e}") from e

    lines = normalize_line_endings(content).split("\n")

    format_name = fmt or sniff_format(lines)
    parser = get_parser_for_format(format_name)
    if parser is None:
        raise ParseError(f"{source}: no parser available for format: {format_name}")

    result = parser(lines)
    if result.errors and not result.records:
        raise ParseError(f"{source}: " + "; ".join(result.errors))
    return result


def ingest_file(file_path: Path | str) -> ParseResult:
    """Read and parse a reference library file.

    The format comes from the file extension when it is a supported one,
    otherwise it is sniffed from the content.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        As for ``ingest_bytes``.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    file_bytes = file_path.read_bytes()
    fmt = SUPPORTED_EXTENSIONS.get(file_path.suffix.lower())
    return ingest_bytes(file_bytes, fmt=fmt, source=str(file_path))


def parse_bytes(data: bytes, fmt: str | None = None) -> list[dict[str, Any]]:
    """Parse an in-memory reference library into flat references."""
    return ingest_bytes(data, fmt=fmt).records


def parse_file(file_path: Path | str) -> list[dict[str, Any]]:
    """Parse a reference library file into flat references."""
    return ingest_file(file_path).records
