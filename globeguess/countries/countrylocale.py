"""Per-locale name field policy.

Each supported locale names the localized column used for exact lookup and
the columns whose values make up the "did you mean" suggestion universe.
Adding a locale means adding one LOCALE_POLICIES entry.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


DEFAULT_LOCALE = "en-CA"

# Columns offered as suggestions for the English locale. ABBREV is left out
# so two-letter abbreviations don't crowd short guesses.
ENGLISH_SUGGESTION_FIELDS = ("NAME", "NAME_LONG", "ADMIN", "BRK_NAME", "NAME_SORT")


class ConfigurationError(ValueError):
    """Raised when a locale has no name field policy."""


@dataclass(frozen=True)
class LocalePolicy:
    """Which columns a locale uses for lookup and for suggestions."""

    name_field: str
    suggestion_fields: Tuple[str, ...]


# TODO: confirm with product whether non-English locales should also get the
# English alternate-name columns as suggestions.
LOCALE_POLICIES: Dict[str, LocalePolicy] = {
    "en-CA": LocalePolicy("NAME_EN", ENGLISH_SUGGESTION_FIELDS),
    "fr-FR": LocalePolicy("NAME_FR", ("NAME_FR",)),
    "de-DE": LocalePolicy("NAME_DE", ("NAME_DE",)),
    "es-MX": LocalePolicy("NAME_ES", ("NAME_ES",)),
    "it-IT": LocalePolicy("NAME_IT", ("NAME_IT",)),
    "pt-BR": LocalePolicy("NAME_PT", ("NAME_PT",)),
}


def get_locale_policy(locale: str) -> LocalePolicy:
    """Return the policy for a locale identifier.

    Raises:
        ConfigurationError: If the locale has no policy at all
    """
    try:
        return LOCALE_POLICIES[locale]
    except KeyError:
        raise ConfigurationError(
            f"No name field configured for locale {locale!r}. "
            f"Supported locales: {', '.join(supported_locales())}"
        ) from None


def supported_locales() -> List[str]:
    """List locale identifiers with a policy."""
    return list(LOCALE_POLICIES)


def localized_name_fields() -> List[str]:
    """Distinct localized name columns across all locales, in policy order."""
    fields = []
    for policy in LOCALE_POLICIES.values():
        if policy.name_field not in fields:
            fields.append(policy.name_field)
    return fields


__all__ = [
    "DEFAULT_LOCALE",
    "ENGLISH_SUGGESTION_FIELDS",
    "ConfigurationError",
    "LocalePolicy",
    "LOCALE_POLICIES",
    "get_locale_policy",
    "supported_locales",
    "localized_name_fields",
]
