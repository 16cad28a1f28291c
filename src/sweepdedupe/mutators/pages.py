"""Page range mutator."""

from sweepdedupe.models import Reference

from ._helpers import PAGE_RANGE_RE
from .registry import register_mutator


@register_mutator(
    "consistentPageNumbering",
    title="Consistent page numbering",
    description="Expand PubMed-style abbreviated page ranges, e.g. 244-58 becomes 244-258",
)
def consistent_page_numbering(value: str, record: Reference) -> str:
    """Normalize a page range to its long form.

    Parameters
    ----------
    value : str
        Raw page string, e.g. ``"244-58"``.
    record : Reference
        Unused.

    Returns
    -------
    str
        ``"<first>-<last>"`` with ``last`` padded from the leading digits of
        ``first``, ``"<first>"`` for a single page, or ``""`` when the value
        does not look like a page range.

    Examples
    --------
    >>> consistent_page_numbering("244-58", {})
    '244-258'
    >>> consistent_page_numbering("1", {})
    '1'
    >>> consistent_page_numbering("e1234", {})
    ''
    """
    match = PAGE_RANGE_RE.match(value)
    if not match:
        return ""

    first = match.group("first")
    last = match.group("last")
    if not last:
        return first

    offset = len(first) - len(last)
    prefix = first[:offset] if offset > 0 else ""
    return f"{first}-{prefix}{last}"
