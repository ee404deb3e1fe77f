#!/usr/bin/env python3
"""
Build countries.parquet from countries.yaml.

This script:
1. Loads countries.yaml (and aliases.yaml for validation)
2. Fills name columns that default to the short name
3. Expands localized names into NAME_XX columns
4. Writes countries.parquet with all columns as strings, in source order
5. Generates validation report for duplicates, ISO codes and dangling aliases

The loader falls back to compiling countries.yaml in memory with the same
row builder when countries.parquet has not been built.
"""

import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

from globeguess.countries.countryidentity import Country, find_country
from globeguess.countries.countrylocale import localized_name_fields
from globeguess.utils.build_framework import (
    BuildConfig,
    build_entity_database,
    entities_to_frame,
    validate_duplicate_keys,
    validate_required_fields,
)
from globeguess.utils.build_utils import expand_localized_names
from globeguess.utils.normalize import slugify_name


# Name columns that fall back to NAME when the YAML entry omits them
DEFAULTED_COLUMNS = {
    "NAME_LONG": "name_long",
    "ADMIN": "admin",
    "BRK_NAME": "brk_name",
    "NAME_SORT": "name_sort",
}

REQUIRED_COLUMNS = ["NAME", "NAME_LONG", "ABBREV", "ADMIN", "BRK_NAME", "NAME_SORT", "ISO_A2"]

# User-assigned codes that pycountry does not know about
USER_ASSIGNED_CODES = {"XK"}


def process_country(entry: dict) -> dict:
    """Convert one countries.yaml entry into a table row."""
    name = str(entry.get("name") or "").strip()

    row = {
        "country_key": slugify_name(name),
        "NAME": name,
        "ABBREV": str(entry.get("abbrev") or "").strip(),
        "ISO_A2": str(entry.get("iso_a2") or "").strip().upper(),
    }
    for column, key in DEFAULTED_COLUMNS.items():
        row[column] = str(entry.get(key) or name).strip()

    names = dict(entry.get("names") or {})
    names.setdefault("en", name)
    row.update(expand_localized_names(names, localized_name_fields()))

    return row


def compile_countries(entries: Iterable[dict]) -> pd.DataFrame:
    """Build the countries DataFrame from YAML entries, keeping their order."""
    return entities_to_frame(entries, process_country)


def validate_iso_codes(df: pd.DataFrame) -> List[str]:
    """Report ISO_A2 values that are not ISO 3166-1 alpha-2 codes."""
    unknown = [
        row["NAME"]
        for _, row in df.iterrows()
        if row["ISO_A2"] not in USER_ASSIGNED_CODES
        and pycountry.countries.get(alpha_2=row["ISO_A2"]) is None
    ]
    if unknown:
        return [f"Unknown ISO_A2 codes for countries: {unknown}"]
    return []


def validate_aliases(df: pd.DataFrame, aliases: Optional[List[dict]]) -> List[str]:
    """Report aliases whose canonical name matches no country."""
    if not aliases:
        return []

    countries = [Country.from_row(row) for _, row in df.iterrows()]
    dangling = [
        alias["alternative"]
        for alias in aliases
        if find_country(str(alias["real"]), countries) is None
    ]
    if dangling:
        return [f"Aliases pointing at no country: {dangling}"]
    return []


def validate_data(df: pd.DataFrame, aliases: Optional[List[dict]] = None) -> List[str]:
    """
    Validate the data and return list of issues found.
    """
    issues = []
    issues.extend(validate_required_fields(df, REQUIRED_COLUMNS, name_field="NAME"))
    issues.extend(validate_duplicate_keys(df, "NAME", name_field="NAME"))
    issues.extend(validate_duplicate_keys(df, "country_key", name_field="NAME"))
    issues.extend(validate_iso_codes(df))
    issues.extend(validate_aliases(df, aliases))
    return issues


def shared_abbreviations(df: pd.DataFrame) -> Dict[str, List[str]]:
    """Abbreviations used by more than one country, mapped to their names.

    Lookup takes the first country in table order, so the later ones can
    only be reached by another name.
    """
    filled = df[df["ABBREV"] != ""]
    shared = filled[filled.duplicated(subset=["ABBREV"], keep=False)]
    return {abbrev: group["NAME"].tolist() for abbrev, group in shared.groupby("ABBREV", sort=False)}


def generate_summary(df: pd.DataFrame, aliases: Optional[List[dict]] = None) -> None:
    """Print localized name coverage and shared abbreviations."""
    print("\nLocalized name coverage:")
    for column in localized_name_fields():
        filled = (df[column] != "").sum() if column in df.columns else 0
        print(f"  {column}: {filled}/{len(df)}")

    for abbrev, names in shared_abbreviations(df).items():
        print(f"\nShared abbreviation {abbrev}: {names} (first one wins)")

    if aliases:
        print(f"\nAliases checked: {len(aliases)}")


def main():
    """Main build process."""
    data_dir = Path(__file__).parent

    config = BuildConfig(
        input_yaml=data_dir / "countries.yaml",
        output_parquet=data_dir / "countries.parquet",
        process_entity=process_country,
        validate_data=validate_data,
        generate_summary=generate_summary,
        entity_plural="countries",
        yaml_key="countries",
        aux_yaml=data_dir / "aliases.yaml",
        aux_yaml_key="aliases",
    )
    return build_entity_database(config)


if __name__ == "__main__":
    sys.exit(main())
