"""Shared text normalization utilities.

This module provides the accent and quote handling used by the country
normalizer, the weighted edit distance and the data build scripts.
"""

import re
import unicodedata

# Stand-in for a bare combining mark once its accent has been stripped
COMBINING_PLACEHOLDER = "◌"


def strip_accents(s: str) -> str:
    """Remove combining diacritical marks.

    Applies canonical decomposition (NFD) and drops every combining mark,
    so precomposed letters lose their accents but keep their base letter.

    Args:
        s: Text to strip

    Returns:
        Text without combining marks

    Examples:
        >>> strip_accents("Côte d'Ivoire")
        "Cote d'Ivoire"

        >>> strip_accents("São Tomé")
        'Sao Tome'
    """
    if not s:
        return ""

    decomposed = unicodedata.normalize("NFD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_accents(s: str) -> str:
    """Strip accents character by character without changing the length.

    Each character is replaced by the first character of its accent-stripped
    form, and bare combining marks (which strip to nothing) all fold to the
    dotted circle placeholder. Characters that decompose to more than one base
    character fold to the first of them: U+0DDC and U+0DDD both strip to
    U+0DD9 U+0DCF and both fold to U+0DD9. Two characters fold to the same
    value whenever their substitution would be discounted by the weighted edit
    distance.

    Examples:
        >>> fold_accents("México")
        'Mexico'

        >>> len(fold_accents("Åland")) == len("Åland")
        True
    """
    if not s:
        return ""

    folded = []
    for ch in s:
        stripped = strip_accents(ch)
        if stripped:
            folded.append(stripped[0])
        else:
            folded.append(COMBINING_PLACEHOLDER)
    return "".join(folded)


def slugify_name(s: str) -> str:
    """Create URL/key-safe slug.

    Transformations:
      - Strip whitespace
      - Lowercase
      - Normalize Unicode (NFKD -> ASCII)
      - Replace spaces and underscores with hyphens
      - Remove all non-alphanumeric except hyphens
      - Collapse multiple hyphens to single hyphen
      - Strip leading/trailing hyphens

    Args:
        s: Text to slugify

    Returns:
        Slug suitable for URLs, keys, filenames

    Examples:
        >>> slugify_name("Côte d'Ivoire")
        'cote-divoire'

        >>> slugify_name("Bosnia and Herz.")
        'bosnia-and-herz'
    """
    if not s:
        return ""

    s = s.strip().lower()

    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")

    s = re.sub(r"[\s_]+", "-", s)
    s = re.sub(r"[^a-z0-9\-]", "", s)
    s = re.sub(r"-+", "-", s)

    return s.strip("-")


def normalize_quotes(s: str) -> str:
    """Normalize various quote types to standard ASCII quotes.

    Args:
        s: Text with Unicode quotes

    Returns:
        Text with normalized quotes

    Examples:
        >>> normalize_quotes("Côte d’Ivoire")
        "Côte d'Ivoire"

        >>> normalize_quotes("“smart quotes”")
        '"smart quotes"'
    """
    if not s:
        return s

    s = s.replace("‘", "'").replace("’", "'").replace("ʼ", "'")
    s = s.replace("“", '"').replace("”", '"')
    return s


__all__ = [
    "strip_accents",
    "fold_accents",
    "slugify_name",
    "normalize_quotes",
]
