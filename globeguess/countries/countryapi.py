"""Country entity resolution API.

Public API for resolving free-text country guesses against the reference
countries. Guesses are normalized, alias-substituted, then looked up by
every name a country goes by; near misses can be ranked for review.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from globeguess.countries.countryaliases import load_aliases, resolve_alias
from globeguess.countries.countryidentity import (
    SUGGESTION_THRESHOLD,
    Country,
    find_country,
    rank_candidates,
)
from globeguess.countries.countrylocale import DEFAULT_LOCALE
from globeguess.countries.countrynormalize import normalize_guess
from globeguess.utils.build_utils import load_yaml_file
from globeguess.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)

logger = logging.getLogger(__name__)

COUNTRIES_PATH_ENV = "GLOBEGUESS_COUNTRIES_PATH"


@lru_cache(maxsize=1)
def load_countries(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load the reference countries table into memory.

    Uses LRU cache to load the countries DataFrame once and reuse it.

    Lookup order when path is None:
      1. $GLOBEGUESS_COUNTRIES_PATH (parquet or csv)
      2. globeguess/countries/data/countries.parquet
      3. globeguess/countries/data/countries.yaml, compiled in memory

    Args:
        path: Optional path to a countries.parquet or countries.csv file

    Returns:
        DataFrame in source order, all columns strings:
          - country_key: Slug of the short name (e.g., "cote-divoire")
          - NAME, NAME_LONG, ADMIN, BRK_NAME, NAME_SORT: Name variants
          - ABBREV: Abbreviation (e.g., "U.S.A.")
          - ISO_A2: ISO 3166-1 alpha-2 code
          - NAME_EN, NAME_FR, ...: Localized display names ("" when unknown)

    Examples:
        >>> df = load_countries()
        >>> df[['NAME', 'ISO_A2', 'NAME_FR']].head()
    """
    if path is not None:
        return load_parquet_or_csv(Path(path))

    found_path = find_data_file(
        module_file=__file__,
        subdirectory="countries",
        filenames=["countries.parquet"],
        module_local_data=True,
        env_var=COUNTRIES_PATH_ENV,
    )
    if found_path is not None:
        return load_parquet_or_csv(found_path)

    yaml_path = Path(__file__).parent / "data" / "countries.yaml"
    if not yaml_path.exists():
        error_msg = format_not_found_error(
            subdirectory="countries",
            searched_locations=[
                (f"${COUNTRIES_PATH_ENV}", Path("<unset>")),
                ("Module-local data", yaml_path.parent),
            ],
            fix_instructions=[
                f"Set {COUNTRIES_PATH_ENV} to a countries.parquet file.",
                "Run globeguess/countries/data/build_countries.py to generate it.",
            ],
        )
        raise FileNotFoundError(error_msg)

    # Deferred: the build module imports this package's identity layer
    from globeguess.countries.data.build_countries import compile_countries

    logger.debug("countries.parquet not built, compiling %s", yaml_path)
    data = load_yaml_file(yaml_path) or {}
    return compile_countries(data.get("countries", []))


@lru_cache(maxsize=4)
def country_entities(path: Optional[Union[str, Path]] = None) -> Tuple[Country, ...]:
    """Reference countries as immutable Country records, in table order."""
    df = load_countries(path)
    return tuple(Country.from_row(row) for _, row in df.iterrows())


def country_identifier(
    name: str,
    *,
    locale: str = DEFAULT_LOCALE,
) -> Optional[Country]:
    """Resolve a free-text country name to a reference Country.

    Resolution strategy:
      1. Normalize (trim, lowercase, "&" -> "and", "st " -> "st. ")
      2. Substitute known alternate spellings (burma -> myanmar)
      3. Exact lookup over every name variant and the locale's display name

    Args:
        name: Country name as typed (e.g., "Ivory Coast", "st lucia", "USA")
        locale: Locale whose display names are also accepted

    Returns:
        Matching Country, or None if no name matches exactly

    Raises:
        ConfigurationError: If the locale is not supported

    Examples:
        >>> country_identifier("Ivory Coast").name
        "Côte d'Ivoire"

        >>> country_identifier("Allemagne", locale="fr-FR").iso_a2
        'DE'

        >>> country_identifier("Frence") is None
        True
    """
    canonical = resolve_alias(normalize_guess(name))
    return find_country(canonical, country_entities(), locale=locale)


def match_country(
    name: str,
    *,
    k: int = 5,
    threshold: float = SUGGESTION_THRESHOLD,
    locale: str = DEFAULT_LOCALE,
) -> List[dict]:
    """Top-K suggestion targets + weighted distances (for review UIs).

    Args:
        name: Country name as typed
        k: Number of candidates to return. Default 5.
        threshold: Maximum weighted edit distance. Default 2.
        locale: Locale selecting the suggestion columns

    Returns:
        List of dicts with 'target' and 'distance', closest first,
        one entry per distinct target

    Examples:
        >>> match_country("frence", k=3)[0]
        {'target': 'France', 'distance': 1.0}
    """
    canonical = resolve_alias(normalize_guess(name))
    ranked = rank_candidates(
        canonical,
        country_entities(),
        threshold=threshold,
        locale=locale,
        aliases=load_aliases(),
    )

    results = []
    seen = set()
    for candidate in ranked:
        if candidate.target in seen:
            continue
        seen.add(candidate.target)
        results.append({"target": candidate.target, "distance": float(candidate.distance)})
        if len(results) >= k:
            break
    return results


def list_countries(iso_a2: Optional[str] = None) -> pd.DataFrame:
    """List reference countries, optionally filtered by ISO alpha-2 code.

    Examples:
        >>> list_countries()[['NAME', 'ISO_A2']]
        >>> list_countries(iso_a2="fr")['NAME'].tolist()
        ['France']
    """
    df = load_countries()
    if iso_a2 is not None:
        df = df[df["ISO_A2"] == iso_a2.strip().upper()]
    return df.reset_index(drop=True)


__all__ = [
    "COUNTRIES_PATH_ENV",
    "load_countries",
    "country_entities",
    "country_identifier",
    "match_country",
    "list_countries",
]
