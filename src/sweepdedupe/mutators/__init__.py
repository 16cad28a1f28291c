"""Field mutators.

Named, pure, deterministic normalization functions applied to a field
before comparison. Importing this package registers the built-in catalog:

- alphaNumericOnly, noSpace, noCase, deburr, numericOnly,
  removeEnclosingBrackets, stripHtmlTags (text)
- doiRewrite (DOI)
- consistentPageNumbering (pages)
- authorRewrite, authorRewriteSingle (authors)
"""

from sweepdedupe.mutators import authors, doi, pages, text  # noqa: F401
from sweepdedupe.mutators.authors import author_rewrite, author_rewrite_single
from sweepdedupe.mutators.doi import doi_rewrite
from sweepdedupe.mutators.pages import consistent_page_numbering
from sweepdedupe.mutators.registry import (
    MUTATORS,
    Mutator,
    MutatorFn,
    apply_mutators,
    get_mutator,
    register_mutator,
)
from sweepdedupe.mutators.text import (
    alpha_numeric_only,
    deburr_text,
    no_case,
    no_space,
    numeric_only,
    remove_enclosing_brackets,
    strip_html_tags,
)

__all__ = [
    "MUTATORS",
    "Mutator",
    "MutatorFn",
    "alpha_numeric_only",
    "apply_mutators",
    "author_rewrite",
    "author_rewrite_single",
    "consistent_page_numbering",
    "deburr_text",
    "doi_rewrite",
    "get_mutator",
    "no_case",
    "no_space",
    "numeric_only",
    "register_mutator",
    "remove_enclosing_brackets",
    "strip_html_tags",
]
