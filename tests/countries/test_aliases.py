"""Test suite for the alternate country name table."""

import pytest
from globeguess.countries.countryaliases import (
    AliasPair,
    AliasTable,
    load_aliases,
    resolve_alias,
)
from globeguess.countries.countrynormalize import normalize_guess


class TestAliasTable:
    """Test AliasTable lookup semantics"""

    def test_resolve_known(self, small_aliases):
        assert small_aliases.resolve("ivory coast") == "côte d'ivoire"

    def test_resolve_unknown_passthrough(self, small_aliases):
        assert small_aliases.resolve("france") == "france"
        assert small_aliases.resolve("") == ""

    def test_case_sensitive(self, small_aliases):
        """Lookup runs on normalized text, so case must already be folded"""
        assert small_aliases.resolve("Ivory Coast") == "Ivory Coast"

    def test_first_pair_wins(self):
        table = AliasTable([
            AliasPair("holland", "netherlands"),
            AliasPair("holland", "france"),
        ])
        assert table.resolve("holland") == "netherlands"
        assert len(table) == 2

    def test_alternatives_in_order(self):
        table = AliasTable([
            AliasPair("burma", "myanmar"),
            AliasPair("holland", "netherlands"),
            AliasPair("burma", "thailand"),
        ])
        assert table.alternatives() == ["burma", "holland", "burma"]

    def test_from_records(self):
        table = AliasTable.from_records([{"alternative": "siam", "real": "thailand"}])
        assert table.pairs == (AliasPair("siam", "thailand"),)
        assert list(table) == [AliasPair("siam", "thailand")]

    def test_empty(self, no_aliases):
        assert len(no_aliases) == 0
        assert no_aliases.alternatives() == []
        assert no_aliases.resolve("burma") == "burma"

    def test_pairs_are_immutable(self):
        pair = AliasPair("burma", "myanmar")
        with pytest.raises(AttributeError):
            pair.real = "thailand"


class TestPackagedAliases:
    """Test the shipped aliases.yaml"""

    def test_load(self, aliases):
        assert len(aliases) > 20

    def test_cached(self):
        assert load_aliases() is load_aliases()

    def test_former_names(self):
        assert resolve_alias("burma") == "myanmar"
        assert resolve_alias("swaziland") == "eswatini"
        assert resolve_alias("zaire") == "democratic republic of the congo"

    def test_english_forms(self):
        assert resolve_alias("ivory coast") == "côte d'ivoire"
        assert resolve_alias("cape verde") == "cabo verde"

    def test_passthrough(self):
        assert resolve_alias("france") == "france"

    def test_alternatives_are_normalized(self, aliases):
        """Every alternative is reachable from typed input"""
        for pair in aliases:
            assert normalize_guess(pair.alternative) == pair.alternative, pair

    def test_load_custom_path(self, tmp_path):
        path = tmp_path / "aliases.yaml"
        path.write_text(
            "aliases:\n  - {alternative: siam, real: thailand}\n",
            encoding="utf-8",
        )
        table = load_aliases(path)
        assert table.resolve("siam") == "thailand"
        assert table.resolve("burma") == "burma"
