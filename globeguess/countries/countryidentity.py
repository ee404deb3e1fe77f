"""
Country Entity Resolution
-------------------------

Exact lookup and "did you mean" suggestions over the reference countries.

Exact lookup compares a guess, case-insensitively, against every name a
country is known by (short, long, admin, abbreviation with and without
periods, short name with hyphens as spaces, "broken" name, sort name and
the active locale's display name). The first country that matches wins.

Suggestions are ranked by an accent-aware weighted edit distance:
  1. Build the target universe: alias spellings, then the locale's
     suggestion columns from every country
  2. Block with RapidFuzz Levenshtein over accent-folded text (a lower bound)
  3. Score survivors with the weighted distance and keep those <= threshold
  4. Stable sort by distance and drop repeated names

API:
  find_country(guess, candidates, locale='en-CA') -> Country | None
  suggest_countries(guess, countries, threshold=2, locale='en-CA') -> list[str]
  rank_candidates(guess, countries, threshold=2, locale='en-CA') -> list[MatchCandidate]
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, NamedTuple, Optional, Sequence

import pandas as pd

from globeguess.countries.countryaliases import AliasTable, load_aliases
from globeguess.countries.countrylocale import DEFAULT_LOCALE, get_locale_policy
from globeguess.utils.editdistance import block_candidates, weighted_distance


SUGGESTION_THRESHOLD = 2

# Column name -> Country attribute for the fixed name columns
BASE_COLUMNS = {
    "NAME": "name",
    "NAME_LONG": "name_long",
    "ABBREV": "abbrev",
    "ADMIN": "admin",
    "BRK_NAME": "brk_name",
    "NAME_SORT": "name_sort",
    "ISO_A2": "iso_a2",
}


@dataclass(frozen=True)
class Country:
    """One reference country and every name it goes by."""

    name: str
    name_long: str
    abbrev: str
    admin: str
    brk_name: str
    name_sort: str
    iso_a2: str = ""
    names: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    @classmethod
    def from_row(cls, row) -> "Country":
        """Build a Country from a table row (Series or dict).

        Columns named NAME_xx other than NAME_LONG/NAME_SORT are taken as
        localized display names.
        """
        values = {}
        names = {}
        for column, value in dict(row).items():
            text = "" if value is None or pd.isna(value) else str(value)
            if column in BASE_COLUMNS:
                values[BASE_COLUMNS[column]] = text
            elif column.startswith("NAME_") and text:
                names[column] = text
        return cls(names=names, **values)

    def column_value(self, column: str) -> Optional[str]:
        """Value of a name column, or None when empty or absent."""
        if column in BASE_COLUMNS:
            value = getattr(self, BASE_COLUMNS[column])
        else:
            value = self.names.get(column)
        return value or None

    def lookup_names(self, name_field: str) -> List[str]:
        """Lowercased names accepted as an exact guess for this country."""
        candidates = [
            self.name,
            self.name_long,
            self.admin,
            self.abbrev,
            self.abbrev.replace(".", ""),
            self.name.replace("-", " "),
            self.brk_name,
            self.name_sort,
        ]
        localized = self.names.get(name_field)
        if localized:
            candidates.append(localized)
        return [c.lower() for c in candidates if c]


class MatchCandidate(NamedTuple):
    """A suggestion target and its distance from the guess."""

    distance: float
    target: str


def find_country(
    guess: str,
    candidates: Iterable[Country],
    *,
    locale: str = DEFAULT_LOCALE,
) -> Optional[Country]:
    """Return the first candidate known by the given name.

    Args:
        guess: Canonical guess (normalized and alias-resolved)
        candidates: Countries to scan, in order
        locale: Locale whose display name also participates

    Returns:
        The matching Country, or None

    Raises:
        ConfigurationError: If the locale has no policy

    Examples:
        >>> find_country("ivory coast", countries).name
        "Côte d'Ivoire"

        >>> find_country("usa", countries).name
        'United States of America'
    """
    name_field = get_locale_policy(locale).name_field
    guess = guess.lower()

    for country in candidates:
        if guess in country.lookup_names(name_field):
            return country
    return None


def suggestion_targets(
    countries: Iterable[Country],
    aliases: AliasTable,
    *,
    locale: str = DEFAULT_LOCALE,
) -> List[str]:
    """Every name a suggestion may point at, in discovery order.

    Alias spellings come first, followed by the locale's suggestion columns
    for each country. Empty values are skipped.
    """
    fields = get_locale_policy(locale).suggestion_fields

    targets = aliases.alternatives()
    for country in countries:
        for column in fields:
            value = country.column_value(column)
            if value:
                targets.append(value)
    return targets


def rank_candidates(
    guess: str,
    countries: Sequence[Country],
    *,
    threshold: float = SUGGESTION_THRESHOLD,
    locale: str = DEFAULT_LOCALE,
    aliases: Optional[AliasTable] = None,
) -> List[MatchCandidate]:
    """Targets within threshold of the guess, closest first.

    Ties keep discovery order. Repeated targets are kept; see
    suggest_countries for the de-duplicated names.
    """
    if aliases is None:
        aliases = load_aliases()

    targets = suggestion_targets(countries, aliases, locale=locale)
    query = guess.lower()
    lowered = [t.lower() for t in targets]

    scored = []
    for index in block_candidates(query, lowered, threshold):
        distance = weighted_distance(query, lowered[index])
        if distance <= threshold:
            scored.append(MatchCandidate(distance, targets[index]))

    scored.sort(key=lambda m: m.distance)
    return scored


def suggest_countries(
    guess: str,
    countries: Sequence[Country],
    *,
    threshold: float = SUGGESTION_THRESHOLD,
    locale: str = DEFAULT_LOCALE,
    aliases: Optional[AliasTable] = None,
) -> List[str]:
    """Close names for a guess that matched nothing exactly.

    Args:
        guess: Canonical guess
        countries: Reference countries
        threshold: Maximum weighted edit distance (2 allows two typos or
                   four accent slips)
        locale: Locale selecting the suggestion columns
        aliases: Alias table; defaults to the packaged one

    Returns:
        Unique target names, sorted by non-decreasing distance

    Examples:
        >>> suggest_countries("frence", countries)[0]
        'France'
    """
    seen = set()
    suggestions = []
    for candidate in rank_candidates(
        guess, countries, threshold=threshold, locale=locale, aliases=aliases
    ):
        if candidate.target not in seen:
            seen.add(candidate.target)
            suggestions.append(candidate.target)
    return suggestions


__all__ = [
    "SUGGESTION_THRESHOLD",
    "Country",
    "MatchCandidate",
    "find_country",
    "suggestion_targets",
    "rank_candidates",
    "suggest_countries",
]
