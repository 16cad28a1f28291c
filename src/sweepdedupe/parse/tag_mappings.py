"""Tag to field mappings for the supported source formats.

Parsers emit references with a flat field layout shared by every format:
``type``, ``title``, ``authors`` (list), ``year``, ``date``, ``journal``,
``volume``, ``number``, ``pages``, ``doi``, ``urls`` (list), ``abstract``,
``isbn``, ``keywords`` (list), ``notes``, ``label``, ``recNumber`` and
``caption``. Adding a format requires only a new entry in TAG_MAPPINGS.
"""

# format -> source tag -> field. For single-value fields the first tag found in a record wins.
TAG_MAPPINGS: dict[str, dict[str, str]] = {
    "ris": {
        "TY": "type",
        "TI": "title",
        "T1": "title",
        "AU": "authors",
        "A1": "authors",
        "PY": "year",
        "Y1": "year",
        "DA": "date",
        "JF": "journal",
        "JO": "journal",
        "T2": "journal",
        "JA": "journal",
        "J2": "journal",
        "VL": "volume",
        "IS": "number",
        "DO": "doi",
        "UR": "urls",
        "L1": "urls",
        "L2": "urls",
        "AB": "abstract",
        "N2": "abstract",
        "SN": "isbn",
        "KW": "keywords",
        "N1": "notes",
        "LB": "label",
        "ID": "recNumber",
        "CA": "caption",
    },
    "bibtex": {
        "title": "title",
        "author": "authors",
        "year": "year",
        "date": "date",
        "journal": "journal",
        "journaltitle": "journal",
        "booktitle": "journal",
        "volume": "volume",
        "number": "number",
        "issue": "number",
        "pages": "pages",
        "doi": "doi",
        "url": "urls",
        "abstract": "abstract",
        "isbn": "isbn",
        "issn": "isbn",
        "keywords": "keywords",
        "note": "notes",
    },
}

# Reference types keyed by the source format's type code
TYPE_MAPPINGS: dict[str, dict[str, str]] = {
    "ris": {
        "JOUR": "journalArticle",
        "JFULL": "journalArticle",
        "ABST": "journalArticle",
        "BOOK": "book",
        "EBOOK": "book",
        "CHAP": "bookSection",
        "ECHAP": "bookSection",
        "CONF": "conferencePaper",
        "CPAPER": "conferencePaper",
        "THES": "thesis",
        "RPRT": "report",
        "ELEC": "web",
        "NEWS": "newspaperArticle",
        "PAT": "patent",
    },
    "bibtex": {
        "article": "journalArticle",
        "book": "book",
        "inbook": "bookSection",
        "incollection": "bookSection",
        "inproceedings": "conferencePaper",
        "conference": "conferencePaper",
        "phdthesis": "thesis",
        "mastersthesis": "thesis",
        "techreport": "report",
        "online": "web",
        "patent": "patent",
    },
}


def get_field(source_format: str, tag: str) -> str | None:
    """Get the reference field for a source tag.

    Parameters
    ----------
    source_format : str
        Source format ('ris' or 'bibtex').
    tag : str
        Tag name as found in the file.

    Returns
    -------
    str | None
        Field name, or None if the tag is not mapped.

    Raises
    ------
    ValueError
        If the format is not supported.
    """
    if source_format not in TAG_MAPPINGS:
        raise ValueError(
            f"Unsupported format for field mapping: {source_format!r}. "
            f"Supported formats: {sorted(TAG_MAPPINGS)}"
        )
    return TAG_MAPPINGS[source_format].get(tag)


def get_type(source_format: str, code: str) -> str:
    """Map a format-specific type code to a reference type (``unknown`` if unmapped)."""
    return TYPE_MAPPINGS.get(source_format, {}).get(code, "unknown")
