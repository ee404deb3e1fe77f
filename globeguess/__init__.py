"""globeguess - country name resolution for geography guessing games

Public API for turning a player's free-text guess into a reference country,
or into a short list of "did you mean" names.

Usage:
    from globeguess import resolve_guess, country_identifier, match_country

    # Classify a guess against what the player already tried
    result = resolve_guess("ivory coast", already_guessed=[])
    result.outcome        # GuessOutcome.RESOLVED
    result.country.name   # "Côte d'Ivoire"

    # Near misses come back as suggestions
    resolve_guess("frence", []).suggestions[0]  # "France"

    # Localized names
    country_identifier("Allemagne", locale="fr-FR").iso_a2  # 'DE'
"""

__version__ = "0.1.0"

# ============================================================================
# Guess Resolution API
# ============================================================================

from .guesses.guessapi import (
    GuessOutcome,     # Four outcomes of a guess
    GuessResult,      # Outcome plus resolved country or suggestions
    GuessTurn,        # GuessResult plus whether it hit the answer
    resolve_guess,    # Primary API - classify a raw guess
    is_answer,        # Compare a country with the answer
    check_guess,      # resolve_guess + is_answer
)

# ============================================================================
# Country Resolution API
# ============================================================================

from .countries.countryapi import (
    country_identifier,  # Resolve a name to a Country (exact, no fuzzy)
    match_country,       # Top-K suggestion targets with distances
    list_countries,      # List/filter reference countries
    load_countries,      # Load countries table
    country_entities,    # Countries as Country records
)

from .countries.countryidentity import (
    Country,
    find_country,
    suggest_countries,
)

from .countries.countrylocale import (
    DEFAULT_LOCALE,
    ConfigurationError,
    supported_locales,
)

from .countries.countrynormalize import normalize_guess

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "resolve_guess",       # Classify a raw guess
    "country_identifier",  # Resolve country name -> Country

    # ========================================================================
    # Guess Resolution
    # ========================================================================
    "GuessOutcome",
    "GuessResult",
    "GuessTurn",
    "is_answer",
    "check_guess",

    # ========================================================================
    # Country Resolution
    # ========================================================================
    "match_country",
    "list_countries",
    "load_countries",
    "country_entities",
    "Country",
    "find_country",
    "suggest_countries",
    "normalize_guess",

    # ========================================================================
    # Locales
    # ========================================================================
    "DEFAULT_LOCALE",
    "ConfigurationError",
    "supported_locales",
]
