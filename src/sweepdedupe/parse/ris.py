"""RIS format parser.

RIS specification: Two-letter tags, "TY  - " starts record, "ER  - " ends it.
Reference: https://refdb.sourceforge.net/manual-0.9.6/sect1-ris-format.html
"""

import re
from typing import Any

from sweepdedupe.parse.base import ParseResult, build_reference, join_pages
from sweepdedupe.parse.tag_mappings import get_field, get_type


TAG_PATTERN = re.compile(r"^([A-Z0-9]{2})  - ?(.*)$")


def parse_ris(lines: list[str]) -> ParseResult:
    """Parse RIS lines into flat references.

    Continuation lines (starting with whitespace) are appended to the
    previous tag's value. A record left open at end of file is kept with a
    warning.

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

    current_tags: list[tuple[str, str]] = []
    in_record = False

    for line_num, line in enumerate(lines):
        match = TAG_PATTERN.match(line)

        if match:
            tag, value = match.groups()

            if tag == "TY":
                if in_record:
                    warnings.append(
                        f"Line {line_num}: Found TY without closing ER for previous record"
                    )
                    records.append(_build_record(current_tags))
                in_record = True
                current_tags = [(tag, value)]

            elif tag == "ER":
                if not in_record:
                    warnings.append(f"Line {line_num}: Found ER without opening TY")
                else:
                    records.append(_build_record(current_tags))
                    in_record = False
                    current_tags = []

            elif in_record:
                current_tags.append((tag, value))

        elif in_record:
            if line and line[0].isspace() and current_tags:
                tag, value = current_tags[-1]
                current_tags[-1] = (tag, f"{value} {line.strip()}")
            elif line.strip():
                warnings.append(f"Line {line_num}: Unrecognized line in record: {line[:50]}")

    if in_record:
        warnings.append("End of file reached without closing ER tag")
        records.append(_build_record(current_tags))

    return ParseResult(records, warnings, errors)


def _build_record(tags: list[tuple[str, str]]) -> dict[str, Any]:
    fields: list[tuple[str, str]] = []
    start_page: str | None = None
    end_page: str | None = None

    for tag, value in tags:
        value = value.strip()
        if tag == "TY":
            fields.append(("type", get_type("ris", value)))
        elif tag == "SP":
            start_page = start_page or value
        elif tag == "EP":
            end_page = end_page or value
        elif tag in ("PY", "Y1"):
            # PY is often written as YYYY/MM/DD/other
            fields.append(("year", value.split("/")[0]))
        else:
            field = get_field("ris", tag)
            if field is not None:
                fields.append((field, value))

    reference = build_reference(fields)
    pages = join_pages(start_page, end_page)
    if pages:
        reference["pages"] = pages
    return reference
