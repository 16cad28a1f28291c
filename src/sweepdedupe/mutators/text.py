"""General-purpose text mutators."""

from sweepdedupe.models import Reference

from ._helpers import HTML_TAG_RE, NON_ALPHANUMERIC_RE, NON_DIGIT_RE, WHITESPACE_RE, deburr
from .registry import register_mutator

_OPENING_BRACKETS = "([{"
_CLOSING_BRACKETS = ")]}"


@register_mutator(
    "alphaNumericOnly",
    title="Alpha-Numeric only",
    description="Replace each run of punctuation with a single space, keeping letters, digits and whitespace",
)
def alpha_numeric_only(value: str, record: Reference) -> str:
    """Replace non-alphanumeric runs with a space.

    >>> alpha_numeric_only("one$two_three()", {})
    'one two three '
    """
    return NON_ALPHANUMERIC_RE.sub(" ", value)


@register_mutator(
    "noSpace",
    title="Remove whitespace",
    description="Remove all whitespace",
)
def no_space(value: str, record: Reference) -> str:
    return WHITESPACE_RE.sub("", value)


@register_mutator(
    "noCase",
    title="Case insensitive",
    description="Convert all upper-case characters to lower case",
)
def no_case(value: str, record: Reference) -> str:
    return value.lower()


@register_mutator(
    "deburr",
    title="Deburr",
    description=(
        "Convert Latin-1 supplement and Latin Extended-A letters to basic Latin "
        "and remove combining diacritical marks, e.g. ÕÑÎÔÑ becomes ONION"
    ),
)
def deburr_text(value: str, record: Reference) -> str:
    return deburr(value)


@register_mutator(
    "numericOnly",
    title="Numeric only",
    description="Remove all non-numeric characters",
)
def numeric_only(value: str, record: Reference) -> str:
    return NON_DIGIT_RE.sub("", value)


@register_mutator(
    "removeEnclosingBrackets",
    title="Remove enclosing brackets",
    description="Remove one layer of wrapping brackets or parenthesis, useful for translated titles",
)
def remove_enclosing_brackets(value: str, record: Reference) -> str:
    """Strip one bracket character from each end of the string.

    >>> remove_enclosing_brackets("(One)", {})
    'One'
    >>> remove_enclosing_brackets("[[Two]]", {})
    '[Two]'
    """
    if value and value[0] in _OPENING_BRACKETS:
        value = value[1:]
    if value and value[-1] in _CLOSING_BRACKETS:
        value = value[:-1]
    return value


@register_mutator(
    "stripHtmlTags",
    title="Remove HTML/XML tags",
    description="Remove anything that looks like an HTML or XML tag, e.g. CO<sup>2</sup> becomes CO2",
)
def strip_html_tags(value: str, record: Reference) -> str:
    return HTML_TAG_RE.sub("", value)
