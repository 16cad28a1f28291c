"""BibTeX format parser.

Entries: @<entrytype>{citekey, field = {value}, ...}
Special entries (@STRING, @PREAMBLE, @COMMENT) are skipped.
Reference: http://www.bibtex.org/Format/
"""

import re
from typing import Any

from sweepdedupe.parse.base import ParseResult, build_reference
from sweepdedupe.parse.tag_mappings import get_field, get_type


ENTRY_START_PATTERN = re.compile(r"^@(\w+)\s*\{\s*([^,]*)\s*,?\s*$", re.IGNORECASE)
AUTHOR_SEPARATOR = re.compile(r"\s+and\s+", re.IGNORECASE)
KEYWORD_SEPARATOR = re.compile(r"\s*[;,]\s*")
PAGE_SEPARATOR = re.compile(r"\s*-{1,3}\s*")


def parse_bibtex(lines: list[str]) -> ParseResult:
    """Parse BibTeX lines into flat references.

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

    i = 0
    while i < len(lines):
        line = lines[i].strip()

        if not line.startswith("@"):
            i += 1
            continue

        match = ENTRY_START_PATTERN.match(line)
        if not match:
            warnings.append(f"Line {i}: Malformed entry start: {line[:50]}")
            i += 1
            continue

        entry_type, citekey = match.groups()
        entry_type = entry_type.lower()
        citekey = citekey.strip()

        # Skip special entries
        if entry_type in ("string", "preamble", "comment"):
            closing_line = _find_closing_brace(lines, i)
            warnings.append(
                f"Line {i}: Skipping @{entry_type.upper()} entry (lines {i}-{closing_line})"
            )
            if closing_line == -1:
                break
            i = closing_line + 1
            continue

        closing_line = _find_closing_brace(lines, i)
        if closing_line == -1:
            errors.append(f"Line {i}: Unclosed entry @{entry_type}{{{citekey}}}")
            i += 1
            continue

        fields_data = _parse_fields(lines[i + 1 : closing_line])
        records.append(_build_record(entry_type, citekey, fields_data))

        i = closing_line + 1

    return ParseResult(records, warnings, errors)


def _find_closing_brace(lines: list[str], start_line: int) -> int:
    brace_depth = 0
    in_quotes = False
    escape_next = False

    for i in range(start_line, len(lines)):
        for char in lines[i]:
            if escape_next:
                escape_next = False
                continue

            if char == "\\":
                escape_next = True
                continue

            if char == '"':
                in_quotes = not in_quotes
            elif not in_quotes:
                if char == "{":
                    brace_depth += 1
                elif char == "}":
                    brace_depth -= 1
                    if brace_depth == 0:
                        return i

    return -1


def _parse_fields(field_lines: list[str]) -> list[tuple[str, str]]:
    fields: list[tuple[str, str]] = []
    content = "\n".join(field_lines)

    i = 0
    while i < len(content):
        # Skip whitespace
        while i < len(content) and content[i].isspace():
            i += 1
        if i >= len(content):
            break

        # Match field name pattern: word =
        field_match = re.match(r"(\w+)\s*=\s*", content[i:], re.IGNORECASE)
        if not field_match:
            i += 1
            continue

        field_name = field_match.group(1).lower()
        i += field_match.end()

        # Skip whitespace before value
        while i < len(content) and content[i] in " \t":
            i += 1
        if i >= len(content):
            break

        # Parse value based on delimiter
        if content[i] == "{":
            value, i = _parse_braced_value(content, i)
        elif content[i] == '"':
            value, i = _parse_quoted_value(content, i)
        else:
            value, i = _parse_bare_value(content, i)

        # Skip trailing comma
        while i < len(content) and content[i] in " \t\n":
            i += 1
        if i < len(content) and content[i] == ",":
            i += 1

        fields.append((field_name, _clean_value(value)))

    return fields


def _parse_braced_value(content: str, start: int) -> tuple[str, int]:
    brace_depth = 0
    value_chars: list[str] = []
    i = start

    while i < len(content):
        char = content[i]
        if char == "{":
            brace_depth += 1
            if brace_depth > 1:
                value_chars.append(char)
        elif char == "}":
            brace_depth -= 1
            if brace_depth == 0:
                return "".join(value_chars), i + 1
            value_chars.append(char)
        else:
            value_chars.append(char)
        i += 1

    return "".join(value_chars), i


def _parse_quoted_value(content: str, start: int) -> tuple[str, int]:
    i = start + 1  # skip opening quote
    value_chars: list[str] = []
    escape_next = False

    while i < len(content):
        char = content[i]
        if escape_next:
            value_chars.append(char)
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == '"':
            return "".join(value_chars), i + 1
        else:
            value_chars.append(char)
        i += 1

    return "".join(value_chars), i


def _parse_bare_value(content: str, start: int) -> tuple[str, int]:
    value_chars: list[str] = []
    i = start

    while i < len(content) and content[i] not in ",\n}":
        if content[i] == "#":
            break
        value_chars.append(content[i])
        i += 1

    return "".join(value_chars).strip(), i


def _clean_value(value: str) -> str:
    # Inner protective braces ({DNA}) and line wrapping carry no meaning here
    value = value.replace("{", "").replace("}", "")
    return " ".join(value.split())


def _build_record(
    entry_type: str,
    citekey: str,
    fields_data: list[tuple[str, str]],
) -> dict[str, Any]:
    fields: list[tuple[str, str]] = [("type", get_type("bibtex", entry_type))]
    if citekey:
        fields.append(("label", citekey))

    for field_name, value in fields_data:
        field = get_field("bibtex", field_name)
        if field is None:
            continue
        if field == "authors":
            fields.extend(("authors", name) for name in AUTHOR_SEPARATOR.split(value))
        elif field == "keywords":
            fields.extend(("keywords", keyword) for keyword in KEYWORD_SEPARATOR.split(value))
        elif field == "pages":
            fields.append(("pages", PAGE_SEPARATOR.sub("-", value)))
        else:
            fields.append((field, value))

    return build_reference(fields)
