"""Author name mutators.

Rewrite free-text author strings into ``"F. Last"`` tokens so that the
same person written as ``Gates, B.``, ``Bill Gates`` or ``Gates BH``
compares equal.
"""

import re

from sweepdedupe.models import Reference

from ._helpers import upper_first
from .registry import register_mutator

ET_AL_RE = re.compile(r"^et\.?\s*al", re.IGNORECASE)
SEMICOLON_SPLIT_RE = re.compile(r"\s*;\s*")
COMMA_SPLIT_RE = re.compile(r"\s*,\s*")

# "Last, F." or "Last F" inside a semicolon separated list
LAST_FIRST_RE = re.compile(r"^(?P<last>[A-Z][a-z]+),?\s+(?P<first>[A-Z])")

# Tried in order, first match wins
_NAME_FORMATS = (
    re.compile(r"^(?P<first>[A-Z][a-z]+)\s+(?P<last>[A-Z][a-z]+)$"),  # First Last
    re.compile(r"^(?P<first>[A-Z])\.?\s+(?P<middle>.*?)\s*(?P<last>[A-Z][a-z]+)$"),  # F. Last
    re.compile(r"^(?P<first>[A-Z][a-z]+?)\s+(?P<middle>.*?)\s*(?P<last>[A-Z][a-z]+)$"),  # First Middle Last
    re.compile(r"^(?P<last>[A-Z][a-z]+)\s+(?P<middle>.*?)\s*(?P<first>[A-Z]\.?)"),  # Last F.
)

# "Last, F. M." including multi-word surnames such as "de Arruda"
_SINGLE_NAME_FORMATS = (
    re.compile(r"^(?P<last>[A-Za-z\s]+),+\s+(?P<first>[A-Z])"),
    *_NAME_FORMATS,
)


def _format_name(match: re.Match[str]) -> str:
    return match.group("first")[:1].upper() + ". " + upper_first(match.group("last"))


def _rewrite_name(name: str, formats: tuple[re.Pattern[str], ...]) -> str:
    for pattern in formats:
        match = pattern.match(name)
        if match:
            return _format_name(match)
    return name


def _drop_trailing_et_al(names: list[str]) -> list[str]:
    while names and ET_AL_RE.match(names[-1]):
        names.pop()
    return names


@register_mutator(
    "authorRewrite",
    title="Rewrite author names",
    description="Clean up a list of author names into one standard 'F. Last, F. Last' format",
)
def author_rewrite(value: str, record: Reference) -> str:
    """Rewrite a multi-author string.

    Semicolons separate ``Last, F.`` style names; otherwise names are
    comma separated. A trailing "et al." is dropped and names that match
    no known shape are kept as written.

    Examples
    --------
    >>> author_rewrite("Bill Gates, Steven Anthony Balmer", {})
    'B. Gates, S. Balmer'
    >>> author_rewrite("Gates, B. H.; Balmer S. F.", {})
    'B. Gates, S. Balmer'
    """
    if ";" in value:
        names = _drop_trailing_et_al(SEMICOLON_SPLIT_RE.split(value))
        rewritten = []
        for name in names:
            match = LAST_FIRST_RE.match(name)
            rewritten.append(_format_name(match) if match else name)
        return ", ".join(rewritten)

    names = _drop_trailing_et_al(COMMA_SPLIT_RE.split(value))
    return ", ".join(_rewrite_name(name, _NAME_FORMATS) for name in names)


@register_mutator(
    "authorRewriteSingle",
    title="Rewrite singular author name",
    description="Clean up a single author name into the standard 'F. Last' format",
)
def author_rewrite_single(value: str, record: Reference) -> str:
    """Rewrite one author name.

    Examples
    --------
    >>> author_rewrite_single("Gates, B. H. M", {})
    'B. Gates'
    >>> author_rewrite_single("de Arruda, L. H. F", {})
    'L. De Arruda'
    """
    return _rewrite_name(value, _SINGLE_NAME_FORMATS)
