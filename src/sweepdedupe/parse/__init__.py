"""Reference library parsing.

Supported formats:
- RIS (.ris) - Research Information Systems format
- BibTeX (.bib) - BibTeX format
- JSON (.json) - array of reference objects
- JSON Lines (.jsonl) - one reference object per line

Main entry points:
- parse_file: Parse a library file into flat references
- parse_bytes: Parse an in-memory library
"""

from sweepdedupe.parse.base import ParseError, ParseResult, sniff_format
from sweepdedupe.parse.ingestion import ingest_bytes, ingest_file, parse_bytes, parse_file

__all__ = [
    "ParseError",
    "ParseResult",
    "ingest_bytes",
    "ingest_file",
    "parse_bytes",
    "parse_file",
    "sniff_format",
]
