"""Alternate country names.

The reference table only carries current names. Players type former names
("burma", "swaziland"), colloquial ones ("holland") and plain English forms
of names the table stores in the local language ("ivory coast"). The alias
table maps each such spelling, already normalized, to the canonical name
used for lookup.

Source data lives in countries/data/aliases.yaml:

    aliases:
      - alternative: burma
        real: myanmar
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from globeguess.utils.build_utils import load_yaml_file
from globeguess.utils.dataloader import find_data_file, format_not_found_error


@dataclass(frozen=True)
class AliasPair:
    """One alternate spelling and the canonical name it stands for."""

    alternative: str
    real: str


class AliasTable:
    """Ordered, read-only alias lookup.

    When two pairs share an alternative, the first one wins.
    """

    def __init__(self, pairs: Iterable[AliasPair]):
        self._pairs: Tuple[AliasPair, ...] = tuple(pairs)
        self._lookup: Dict[str, str] = {}
        for pair in self._pairs:
            self._lookup.setdefault(pair.alternative, pair.real)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "AliasTable":
        """Build from dicts with 'alternative' and 'real' keys."""
        return cls(
            AliasPair(str(r["alternative"]), str(r["real"]))
            for r in records
        )

    @property
    def pairs(self) -> Tuple[AliasPair, ...]:
        return self._pairs

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)

    def resolve(self, normalized: str) -> str:
        """Return the canonical name for an alias, or the input unchanged."""
        return self._lookup.get(normalized, normalized)

    def alternatives(self) -> List[str]:
        """All alternative spellings in table order (duplicates kept)."""
        return [pair.alternative for pair in self._pairs]


@lru_cache(maxsize=1)
def load_aliases(path: Optional[Union[str, Path]] = None) -> AliasTable:
    """Load aliases.yaml into an AliasTable.

    Uses LRU cache so the table is read once per process.

    Args:
        path: Optional path to an aliases YAML file. If None, uses
              globeguess/countries/data/aliases.yaml

    Returns:
        AliasTable in file order
    """
    if path is None:
        found_path = find_data_file(
            module_file=__file__,
            subdirectory="countries",
            filenames=["aliases.yaml"],
            module_local_data=True,
        )

        if found_path is None:
            error_msg = format_not_found_error(
                subdirectory="aliases",
                searched_locations=[
                    ("Module-local data", Path(__file__).parent / "data"),
                ],
                fix_instructions=[
                    "Reinstall globeguess so package data is included.",
                ],
            )
            raise FileNotFoundError(error_msg)

        path = found_path

    data = load_yaml_file(Path(path)) or {}
    return AliasTable.from_records(data.get("aliases", []))


def resolve_alias(normalized: str, aliases: Optional[AliasTable] = None) -> str:
    """Substitute a known alternate spelling with its canonical name.

    Matching is exact and case-sensitive on already normalized text.

    Examples:
        >>> resolve_alias("burma")
        'myanmar'

        >>> resolve_alias("france")
        'france'
    """
    if aliases is None:
        aliases = load_aliases()
    return aliases.resolve(normalized)


__all__ = [
    "AliasPair",
    "AliasTable",
    "load_aliases",
    "resolve_alias",
]
