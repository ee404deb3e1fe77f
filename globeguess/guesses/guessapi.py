"""Guess resolution API.

Classifies one raw guess against the reference countries and the caller's
list of already guessed countries:

  1. Normalize the raw text and substitute a known alias
  2. Already guessed?           -> ALREADY_GUESSED
  3. Exact match in the index?  -> RESOLVED (carries the Country)
  4. Close names within 2 edits -> NO_MATCH_WITH_SUGGESTIONS
  5. Otherwise                  -> NO_MATCH_NO_SUGGESTIONS

No outcome is an exception; only an unsupported locale raises
(ConfigurationError). Nothing here keeps state between calls: the guessed
list and the answer belong to the caller.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

from globeguess.countries.countryaliases import AliasTable, load_aliases
from globeguess.countries.countryapi import country_entities
from globeguess.countries.countryidentity import (
    SUGGESTION_THRESHOLD,
    Country,
    find_country,
    suggest_countries,
)
from globeguess.countries.countrylocale import DEFAULT_LOCALE
from globeguess.countries.countrynormalize import normalize_guess

logger = logging.getLogger(__name__)


class GuessOutcome(Enum):
    ALREADY_GUESSED = "already_guessed"
    RESOLVED = "resolved"
    NO_MATCH_WITH_SUGGESTIONS = "no_match_with_suggestions"
    NO_MATCH_NO_SUGGESTIONS = "no_match_no_suggestions"


@dataclass(frozen=True)
class GuessResult:
    """Outcome of resolving one guess.

    Attributes:
        outcome: Which of the four outcomes applies
        query: Canonical text that was looked up (normalized, alias-resolved)
        country: The resolved Country (RESOLVED only)
        suggestions: Close names, closest first (NO_MATCH_WITH_SUGGESTIONS only)
    """

    outcome: GuessOutcome
    query: str
    country: Optional[Country] = None
    suggestions: Tuple[str, ...] = ()

    @property
    def resolved(self) -> bool:
        return self.outcome is GuessOutcome.RESOLVED


class GuessTurn(NamedTuple):
    """A resolved guess together with whether it hit the answer."""

    result: GuessResult
    won: bool


def resolve_guess(
    raw: str,
    already_guessed: Sequence[Country],
    countries: Optional[Sequence[Country]] = None,
    *,
    locale: str = DEFAULT_LOCALE,
    aliases: Optional[AliasTable] = None,
    threshold: float = SUGGESTION_THRESHOLD,
) -> GuessResult:
    """Classify a raw guess.

    Args:
        raw: Text as typed by the player
        already_guessed: Countries accepted earlier in this game
        countries: Reference countries; defaults to the packaged table
        locale: Active locale (selects the localized name and suggestion columns)
        aliases: Alias table; defaults to the packaged one
        threshold: Maximum weighted edit distance for suggestions. Default 2.

    Returns:
        GuessResult

    Raises:
        ConfigurationError: If the locale is not supported

    Examples:
        >>> resolve_guess("FRANCE", []).country.name
        'France'

        >>> resolve_guess("frence", []).suggestions[0]
        'France'
    """
    if countries is None:
        countries = country_entities()
    if aliases is None:
        aliases = load_aliases()

    canonical = aliases.resolve(normalize_guess(raw))

    if find_country(canonical, already_guessed, locale=locale) is not None:
        logger.debug("Guess %r already made", canonical)
        return GuessResult(GuessOutcome.ALREADY_GUESSED, canonical)

    country = find_country(canonical, countries, locale=locale)
    if country is not None:
        logger.debug("Guess %r resolved to %s", canonical, country.name)
        return GuessResult(GuessOutcome.RESOLVED, canonical, country=country)

    suggestions = suggest_countries(
        canonical, countries, threshold=threshold, locale=locale, aliases=aliases
    )
    logger.debug("Guess %r unmatched, %d suggestions", canonical, len(suggestions))
    if suggestions:
        return GuessResult(
            GuessOutcome.NO_MATCH_WITH_SUGGESTIONS, canonical, suggestions=tuple(suggestions)
        )
    return GuessResult(GuessOutcome.NO_MATCH_NO_SUGGESTIONS, canonical)


def is_answer(country: Optional[Country], answer: Country) -> bool:
    """True when the guessed country is the answer (compared by short name)."""
    return country is not None and country.name == answer.name


def check_guess(
    raw: str,
    already_guessed: Sequence[Country],
    answer: Country,
    countries: Optional[Sequence[Country]] = None,
    *,
    locale: str = DEFAULT_LOCALE,
) -> GuessTurn:
    """Resolve a guess and compare it with the answer passed by the caller.

    Examples:
        >>> france = country_identifier("france")
        >>> check_guess("France", [], answer=france).won
        True
    """
    result = resolve_guess(raw, already_guessed, countries, locale=locale)
    return GuessTurn(result, is_answer(result.country, answer))


__all__ = [
    "GuessOutcome",
    "GuessResult",
    "GuessTurn",
    "resolve_guess",
    "is_answer",
    "check_guess",
]
