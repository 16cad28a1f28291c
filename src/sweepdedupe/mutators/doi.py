"""DOI mutator."""

from sweepdedupe.models import Reference

from ._helpers import DOI_URL_RE, HTTP_PREFIX_RE, HTTPS_PREFIX_RE
from .registry import register_mutator

DOI_RESOLVER = "https://doi.org/"


@register_mutator(
    "doiRewrite",
    title="Rewrite DOIs",
    description=(
        "Tidy partial or mangled DOIs into full https://doi.org/ URLs, falling back "
        "to the first DOI-looking entry of the record's URL list"
    ),
)
def doi_rewrite(value: str, record: Reference) -> str:
    """Coerce a DOI field into a canonical resolver URL.

    Parameters
    ----------
    value : str
        DOI field value, possibly empty.
    record : Reference
        Full record; its ``urls`` list is searched when ``value`` is empty.

    Returns
    -------
    str
        ``https://doi.org/...`` URL, or an empty string if no DOI was found.

    Examples
    --------
    >>> doi_rewrite("10.1000/182", {})
    'https://doi.org/10.1000/182'
    >>> doi_rewrite("", {"urls": ["http://doi.org/10.1000/182"]})
    'https://doi.org/10.1000/182'
    """
    if value:
        if HTTPS_PREFIX_RE.match(value):
            return value
        if HTTP_PREFIX_RE.match(value):
            return HTTP_PREFIX_RE.sub("https://", value, count=1)
        return DOI_RESOLVER + value

    # Look in the URL list for a misfiled DOI
    urls = record.get("urls") or []
    if isinstance(urls, str):
        urls = [urls]
    for url in urls:
        if isinstance(url, str) and DOI_URL_RE.match(url):
            return HTTP_PREFIX_RE.sub("https://", url, count=1)
    return ""
