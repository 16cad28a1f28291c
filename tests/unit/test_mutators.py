"""Tests for the mutator registry and built-in mutators."""

import pytest

from sweepdedupe.mutators import MUTATORS, apply_mutators, get_mutator, register_mutator


def _mutate(name: str, value: str, record: dict | None = None) -> str:
    """Run a single registered mutator."""
    return get_mutator(name)(value, record or {})


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_builtin_catalog_registered() -> None:
    """Test every built-in mutator is registered with a title and description."""
    expected = {
        "alphaNumericOnly",
        "noSpace",
        "noCase",
        "deburr",
        "numericOnly",
        "removeEnclosingBrackets",
        "stripHtmlTags",
        "doiRewrite",
        "consistentPageNumbering",
        "authorRewrite",
        "authorRewriteSingle",
    }

    assert expected <= set(MUTATORS)
    for name in expected:
        assert MUTATORS[name].name == name
        assert MUTATORS[name].title
        assert MUTATORS[name].description


@pytest.mark.unit
def test_get_mutator_unknown_raises() -> None:
    """Test unknown mutator names raise KeyError listing valid names."""
    with pytest.raises(KeyError, match="noCase"):
        get_mutator("doesNotExist")


@pytest.mark.unit
def test_register_custom_mutator() -> None:
    """Test decorator registers a new mutator and returns the function unchanged."""

    @register_mutator("testReverse", title="Reverse", description="Reverse the string")
    def reverse(value: str, record: dict) -> str:
        return value[::-1]

    try:
        assert reverse("abc", {}) == "cba"
        assert _mutate("testReverse", "abc") == "cba"
    finally:
        del MUTATORS["testReverse"]


@pytest.mark.unit
def test_apply_mutators_chain_left_to_right() -> None:
    """Test chains apply in order: case folding after punctuation removal."""
    value = apply_mutators(["alphaNumericOnly", "noCase", "noSpace"], "Hello, World!", {})

    assert value == "helloworld"


@pytest.mark.unit
def test_mutator_applies_element_wise_to_lists() -> None:
    """Test list values keep their shape."""
    value = get_mutator("noCase")(["Gates B", "Balmer S"], {})

    assert value == ["gates b", "balmer s"]


# ---------------------------------------------------------------------------
# Text mutators
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "value", "expected"),
    [
        ("alphaNumericOnly", "one$two_three()", "one two three "),
        ("noSpace", "Test \ttitle and there  is  spacing", "Testtitleandthereisspacing"),
        ("noCase", "Hello World", "hello world"),
        ("deburr", "ÕÑÎÔÑ", "ONION"),
        ("deburr", "Ærøskøbing", "Aeroskobing"),
        ("deburr", "Мой", "Мой"),
        ("deburr", "Crème", "Creme"),
        ("numericOnly", "one1two2three3", "123"),
        ("removeEnclosingBrackets", "(One)", "One"),
        ("removeEnclosingBrackets", "[[Two]]", "[Two]"),
        ("removeEnclosingBrackets", "", ""),
        ("stripHtmlTags", "CO<sup>2</sup>", "CO2"),
    ],
)
def test_text_mutators(name: str, value: str, expected: str) -> None:
    """Test text mutators on known inputs."""
    assert _mutate(name, value) == expected


# ---------------------------------------------------------------------------
# doiRewrite
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "record", "expected"),
    [
        ("https://doi.org/10.1000/182", {}, "https://doi.org/10.1000/182"),
        ("http://doi.org/10.1000/182", {}, "https://doi.org/10.1000/182"),
        ("10.1000/182", {}, "https://doi.org/10.1000/182"),
        ("", {"urls": ["https://doi.org/10.1000/182"]}, "https://doi.org/10.1000/182"),
        ("", {"urls": ["http://doi.org/10.1000/182"]}, "https://doi.org/10.1000/182"),
        ("", {"urls": ["https://example.com", "http://doi.org/10.1/x"]}, "https://doi.org/10.1/x"),
        ("", {"urls": ["https://example.com"]}, ""),
        ("", {}, ""),
    ],
)
def test_doi_rewrite(value: str, record: dict, expected: str) -> None:
    """Test DOI canonicalization and fallback to the URL list."""
    assert _mutate("doiRewrite", value, record) == expected


# ---------------------------------------------------------------------------
# consistentPageNumbering
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("244-58", "244-258"),
        ("244-258", "244-258"),
        ("244-8", "244-248"),
        ("1", "1"),
        ("", ""),
        ("445-59", "445-459"),
        ("445-459", "445-459"),
        ("12–19", "12-19"),
        ("e1234", ""),
    ],
)
def test_consistent_page_numbering(value: str, expected: str) -> None:
    """Test page range expansion, including Unicode dashes."""
    assert _mutate("consistentPageNumbering", value) == expected


# ---------------------------------------------------------------------------
# Author rewrites
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Bill Gates", "B. Gates"),
        ("William Henry Gates", "W. Gates"),
        ("Bill Gates, Steven Anthony Balmer", "B. Gates, S. Balmer"),
        ("B Gates, S Balmer", "B. Gates, S. Balmer"),
        ("Gates B., Balmer S.", "B. Gates, S. Balmer"),
        ("Gates B, Balmer S", "B. Gates, S. Balmer"),
        ("Gates BH, Balmer SF", "B. Gates, S. Balmer"),
        ("W H Gates, S F Balmer", "W. Gates, S. Balmer"),
        ("William Henry Gates, Steven F. Balmer", "W. Gates, S. Balmer"),
        ("Gates, B; Balmer S", "B. Gates, S. Balmer"),
        ("Gates, Bill; Balmer Steven", "B. Gates, S. Balmer"),
        ("Gates, B. H; Balmer S F.", "B. Gates, S. Balmer"),
        ("Gates, B. H.; Balmer S. F.", "B. Gates, S. Balmer"),
        ("Bill Gates, Steven Balmer, et al.", "B. Gates, S. Balmer"),
    ],
)
def test_author_rewrite(value: str, expected: str) -> None:
    """Test multi-author rewriting across name shapes."""
    assert _mutate("authorRewrite", value) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Bill Gates", "B. Gates"),
        ("William Henry Gates", "W. Gates"),
        ("B Gates", "B. Gates"),
        ("Gates B.", "B. Gates"),
        ("Gates B", "B. Gates"),
        ("Gates BH", "B. Gates"),
        ("W H Gates", "W. Gates"),
        ("Gates, B", "B. Gates"),
        ("Gates, Bill", "B. Gates"),
        ("Gates, B. H", "B. Gates"),
        ("Gates, B. H.", "B. Gates"),
        ("Gates, B. H. M", "B. Gates"),
        ("De Arruda, L. H. F", "L. De Arruda"),
        ("de Arruda, L. H. F", "L. De Arruda"),
    ],
)
def test_author_rewrite_single(value: str, expected: str) -> None:
    """Test single-author rewriting, including particle surnames."""
    assert _mutate("authorRewriteSingle", value) == expected


@pytest.mark.unit
def test_author_rewrite_keeps_unmatched_names() -> None:
    """Test names matching no known shape pass through unchanged."""
    assert _mutate("authorRewrite", "WHO Collaborators") == "WHO Collaborators"
