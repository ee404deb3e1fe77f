#!/usr/bin/env python3
"""
Refresh country names from a Natural Earth admin-0 GeoJSON.

Downloads the GeoJSON, pulls the name attributes of every feature and writes
them as countries.yaml entries. Curated localized names are not preserved,
so review the diff before committing the regenerated file.

Data source: https://www.naturalearthdata.com/ (public domain)

Usage:
    python -m globeguess.countries.data.fetch_natural_earth --output countries.new.yaml
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import requests
import yaml

logger = logging.getLogger(__name__)


NATURAL_EARTH_URL = (
    "https://raw.githubusercontent.com/nvkelso/natural-earth-vector/"
    "master/geojson/ne_50m_admin_0_countries.geojson"
)

LANGUAGES = ("en", "fr", "de", "es", "it", "pt")

# YAML key -> Natural Earth property, for the columns that default to NAME
OPTIONAL_NAME_PROPERTIES = {
    "name_long": "NAME_LONG",
    "admin": "ADMIN",
    "brk_name": "BRK_NAME",
    "name_sort": "NAME_SORT",
}


def fetch_natural_earth_features(url: str = NATURAL_EARTH_URL, timeout: int = 60) -> List[dict]:
    """Download a Natural Earth GeoJSON and return its features.

    Raises:
        requests.HTTPError: If the download fails
    """
    logger.debug("Fetching Natural Earth features from %s", url)
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    features = response.json().get("features", [])
    logger.debug("Fetched %d features", len(features))
    return features


def _iso_a2(props: dict) -> str:
    # ISO_A2 is "-99" for disputed or user-assigned entries; ISO_A2_EH fills most gaps
    for key in ("ISO_A2", "ISO_A2_EH"):
        value = str(props.get(key) or "").strip()
        if value and value != "-99":
            return value
    return ""


def feature_to_entry(feature: dict, languages: Iterable[str] = LANGUAGES) -> Optional[Dict]:
    """Convert one GeoJSON feature into a countries.yaml entry.

    Name columns equal to NAME are omitted, since the loader defaults them.
    Returns None for features without a NAME.
    """
    props = feature.get("properties") or {}
    name = str(props.get("NAME") or "").strip()
    if not name:
        return None

    entry = {"name": name}
    for key, prop in OPTIONAL_NAME_PROPERTIES.items():
        value = str(props.get(prop) or "").strip()
        if value and value != name:
            entry[key] = value

    entry["abbrev"] = str(props.get("ABBREV") or "").strip()
    entry["iso_a2"] = _iso_a2(props)

    names = {}
    for lang in languages:
        value = str(props.get(f"NAME_{lang.upper()}") or "").strip()
        if value and not (lang == "en" and value == name):
            names[lang] = value
    if names:
        entry["names"] = names

    return entry


def features_to_entries(features: Iterable[dict], languages: Iterable[str] = LANGUAGES) -> List[Dict]:
    """Convert features to entries sorted by name."""
    languages = tuple(languages)
    entries = [feature_to_entry(f, languages) for f in features]
    entries = [e for e in entries if e is not None]
    return sorted(entries, key=lambda e: e["name"].lower())


def write_entries(entries: List[Dict], output: Path) -> None:
    """Write entries in countries.yaml layout."""
    document = {
        "version": "1.0",
        "source": "Natural Earth admin-0 country names (public domain)",
        "countries": entries,
    }
    with open(output, "w", encoding="utf-8") as f:
        yaml.safe_dump(document, f, allow_unicode=True, sort_keys=False)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Regenerate countries.yaml from Natural Earth")
    parser.add_argument("--url", default=NATURAL_EARTH_URL, help="Natural Earth admin-0 GeoJSON URL")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).parent / "countries.natural_earth.yaml",
        help="Where to write the generated YAML",
    )
    args = parser.parse_args(argv)

    print(f"Downloading {args.url}")
    features = fetch_natural_earth_features(args.url)
    entries = features_to_entries(features)

    print(f"Writing {len(entries)} countries to {args.output}")
    write_entries(entries, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
