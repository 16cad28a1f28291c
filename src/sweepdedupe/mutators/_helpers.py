"""Compiled regex patterns and text helpers shared by the mutators."""

import re
import unicodedata

NON_ALPHANUMERIC_RE = re.compile(r"[^0-9A-Za-z\s]+")
WHITESPACE_RE = re.compile(r"\s+")
NON_DIGIT_RE = re.compile(r"[^0-9]+")
HTML_TAG_RE = re.compile(r"<[^>]+>")

HTTP_PREFIX_RE = re.compile(r"^http://")
HTTPS_PREFIX_RE = re.compile(r"^https://")
DOI_URL_RE = re.compile(r"^https?://doi\.org/")

# Unicode dash punctuation (category Pd)
_DASHES = (
    "\\-\u058a\u05be\u1400\u1806\u2010-\u2015\u2e17\u2e1a\u2e3a\u2e3b\u2e40"
    "\u301c\u3030\u30a0\ufe31\ufe32\ufe58\ufe63\uff0d"
)
PAGE_RANGE_RE = re.compile(rf"^(?P<first>[0-9]+)\s*(?:[{_DASHES}]+(?P<last>[0-9]+)\s*)?$")

# Combining diacritical mark blocks
COMBINING_MARKS_RE = re.compile("[\u0300-\u036f\ufe20-\ufe2f\u20d0-\u20ff]")

# Latin-1 Supplement and Latin Extended-A letters; other scripts are left composed
LATIN_ACCENTED_RE = re.compile("[\u00c0-\u017f]")

# Letters with no canonical decomposition to a base letter
_LIGATURES = {
    "Æ": "Ae",
    "æ": "ae",
    "Ð": "D",
    "ð": "d",
    "Ø": "O",
    "ø": "o",
    "Þ": "Th",
    "þ": "th",
    "ß": "ss",
    "Đ": "D",
    "đ": "d",
    "Ħ": "H",
    "ħ": "h",
    "ı": "i",
    "Ĳ": "IJ",
    "ĳ": "ij",
    "ĸ": "k",
    "Ŀ": "L",
    "ŀ": "l",
    "Ł": "L",
    "ł": "l",
    "ŉ": "'n",
    "Ŋ": "N",
    "ŋ": "n",
    "Œ": "Oe",
    "œ": "oe",
    "Ŧ": "T",
    "ŧ": "t",
    "ſ": "s",
}
_LIGATURE_TABLE = str.maketrans(_LIGATURES)


def strip_accents(text: str) -> str:
    """Remove diacritics from accented Latin letters for cross-locale matching.

    Only Latin-1 Supplement and Latin Extended-A letters are decomposed;
    precomposed letters of other scripts (``й``) are kept. Combining marks
    already present in the text are dropped.

    Parameters
    ----------
    text : str
        Input text with potential diacritics.

    Returns
    -------
    str
        Text with diacritical marks removed.
    """
    decomposed = LATIN_ACCENTED_RE.sub(lambda m: unicodedata.normalize("NFD", m.group()), text)
    return COMBINING_MARKS_RE.sub("", decomposed)


def deburr(text: str) -> str:
    """Map accented Latin letters to basic Latin and drop combining marks.

    Examples
    --------
    >>> deburr("ÕÑÎÔÑ")
    'ONION'
    >>> deburr("Ærøskøbing")
    'Aeroskobing'
    """
    return strip_accents(text.translate(_LIGATURE_TABLE))


def upper_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]
