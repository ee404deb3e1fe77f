"""Country name normalization, aliases, lookup and suggestions."""

from globeguess.countries.countryapi import (
    load_countries,
    country_entities,
    country_identifier,
    match_country,
    list_countries,
)
from globeguess.countries.countryaliases import (
    AliasPair,
    AliasTable,
    load_aliases,
    resolve_alias,
)
from globeguess.countries.countryidentity import (
    SUGGESTION_THRESHOLD,
    Country,
    MatchCandidate,
    find_country,
    rank_candidates,
    suggest_countries,
)
from globeguess.countries.countrylocale import (
    DEFAULT_LOCALE,
    ConfigurationError,
    get_locale_policy,
    supported_locales,
)
from globeguess.countries.countrynormalize import normalize_guess

__all__ = [
    "load_countries",
    "country_entities",
    "country_identifier",
    "match_country",
    "list_countries",
    "AliasPair",
    "AliasTable",
    "load_aliases",
    "resolve_alias",
    "SUGGESTION_THRESHOLD",
    "Country",
    "MatchCandidate",
    "find_country",
    "rank_candidates",
    "suggest_countries",
    "DEFAULT_LOCALE",
    "ConfigurationError",
    "get_locale_policy",
    "supported_locales",
    "normalize_guess",
]
