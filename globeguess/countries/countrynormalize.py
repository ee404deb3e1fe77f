"""
Country Guess Normalization
---------------------------

Turns whatever a player typed into the form used for alias and name lookup:

  1. Strip leading/trailing whitespace
  2. Lowercase
  3. Normalize curly quotes/apostrophes to ASCII
  4. Replace "&" with "and"
  5. Rewrite a leading "st " as "st. " ("st lucia" -> "st. lucia")

Examples:
  >>> normalize_guess("  Trinidad & Tobago ")
  'trinidad and tobago'

  >>> normalize_guess("St Lucia")
  'st. lucia'

  >>> normalize_guess("Côte d’Ivoire")
  "côte d'ivoire"
"""

import re

from globeguess.utils.normalize import normalize_quotes


_LEADING_SAINT = re.compile(r"^st ")


def normalize_guess(raw: str) -> str:
    """Canonicalize raw player input for lookup.

    Total over any string; the empty string normalizes to itself and
    normalize_guess(normalize_guess(s)) == normalize_guess(s).

    Args:
        raw: Text as typed by the player

    Returns:
        Normalized guess
    """
    if not raw:
        return ""

    s = raw.strip().lower()
    s = normalize_quotes(s)
    s = s.replace("&", "and")
    return _LEADING_SAINT.sub("st. ", s)


__all__ = [
    "normalize_guess",
]
