"""Tests for shared utilities."""

import pytest
from pathlib import Path
import pandas as pd

from globeguess.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)
from globeguess.utils.normalize import (
    COMBINING_PLACEHOLDER,
    strip_accents,
    fold_accents,
    slugify_name,
    normalize_quotes,
)
from globeguess.utils.editdistance import (
    substitution_cost,
    weighted_distance,
    distance_lower_bound,
    block_candidates,
)
from globeguess.utils.build_utils import load_yaml_file, expand_localized_names


ACCENT_PAIRS = [
    ("café", "cafe"),
    ("méxico", "mexico"),
    ("côte d'ivoire", "cote d'ivoire"),
    ("são tomé", "sao tome"),
    ("perú", "peru"),
    ("åland", "aland"),
    ("türkiye", "turkey"),
    ("curaçao", "curacao"),
]


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_module_local_data(self):
        """Aliases ship in countries/data/"""
        from globeguess.countries import countryaliases
        path = find_data_file(
            module_file=countryaliases.__file__,
            subdirectory="countries",
            filenames=["aliases.yaml"],
            module_local_data=True,
        )
        assert path is not None
        assert path.exists()
        assert path.name == "aliases.yaml"

    def test_find_nonexistent_file(self):
        """Test that None is returned when file not found"""
        from globeguess.countries import countryaliases
        path = find_data_file(
            module_file=countryaliases.__file__,
            subdirectory="nonexistent",
            filenames=["missing.parquet"],
            module_local_data=True,
        )
        assert path is None

    def test_priority_order(self, tmp_path):
        """First filename that exists wins"""
        data_dir = tmp_path / "pkg" / "data"
        data_dir.mkdir(parents=True)
        (data_dir / "table.csv").write_text("NAME\nFrance\n")
        (data_dir / "table.parquet").write_text("")

        path = find_data_file(
            module_file=str(tmp_path / "pkg" / "module.py"),
            subdirectory="countries",
            filenames=["table.parquet", "table.csv"],
            module_local_data=True,
        )
        assert path.name == "table.parquet"

    def test_env_var_override(self, tmp_path, monkeypatch):
        """An environment variable pointing at a file takes precedence"""
        override = tmp_path / "override.csv"
        override.write_text("NAME\nFrance\n")
        monkeypatch.setenv("GLOBEGUESS_TEST_PATH", str(override))

        path = find_data_file(
            module_file=str(tmp_path / "pkg" / "module.py"),
            subdirectory="countries",
            filenames=["table.parquet"],
            module_local_data=True,
            env_var="GLOBEGUESS_TEST_PATH",
        )
        assert path == override

    def test_env_var_missing_file_falls_through(self, tmp_path, monkeypatch):
        """A dangling override is ignored"""
        monkeypatch.setenv("GLOBEGUESS_TEST_PATH", str(tmp_path / "nope.parquet"))

        path = find_data_file(
            module_file=str(tmp_path / "pkg" / "module.py"),
            subdirectory="countries",
            filenames=["table.parquet"],
            module_local_data=True,
            env_var="GLOBEGUESS_TEST_PATH",
        )
        assert path is None


class TestLoadParquetOrCsv:
    """Test data loading utility"""

    def test_load_parquet(self, tmp_path):
        """Test loading parquet file"""
        df = pd.DataFrame({"NAME": ["France", "Peru"], "ISO_A2": ["FR", "PE"]})
        path = tmp_path / "countries.parquet"
        df.to_parquet(path, index=False)

        loaded = load_parquet_or_csv(path)
        assert loaded["NAME"].tolist() == ["France", "Peru"]

    def test_load_csv_keeps_empty_strings(self, tmp_path):
        """Empty CSV cells load as empty strings, not NaN"""
        path = tmp_path / "countries.csv"
        path.write_text("NAME,NAME_FR\nNamibia,\n", encoding="utf-8")

        loaded = load_parquet_or_csv(path)
        assert loaded.loc[0, "NAME"] == "Namibia"
        assert loaded.loc[0, "NAME_FR"] == ""

    def test_unsupported_format(self, tmp_path):
        """Test that unsupported formats raise ValueError"""
        path = tmp_path / "countries.txt"
        path.write_text("France")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_parquet_or_csv(path)


class TestFormatNotFoundError:
    """Test error message formatting"""

    def test_format_error_message(self):
        msg = format_not_found_error(
            subdirectory="countries",
            searched_locations=[
                ("Module-local data", Path("/pkg/countries/data")),
                ("Package data", Path("/pkg/data/countries")),
            ],
            fix_instructions=["Run build_countries.py"],
        )
        assert "No countries data found" in msg
        assert "1. Module-local data: /pkg/countries/data" in msg
        assert "2. Package data" in msg
        assert "Run build_countries.py" in msg


class TestAccents:
    """Test accent stripping and folding"""

    def test_strip_accents(self):
        assert strip_accents("Côte d'Ivoire") == "Cote d'Ivoire"
        assert strip_accents("São Tomé") == "Sao Tome"
        assert strip_accents("Åland") == "Aland"
        assert strip_accents("") == ""

    def test_strip_accents_keeps_unaccented(self):
        assert strip_accents("Peru") == "Peru"
        assert strip_accents("日本") == "日本"

    def test_fold_preserves_length(self):
        for word in ["Côte d'Ivoire", "São Tomé", "Curaçao", "Ελλάδα", "e\u0301"]:
            assert len(fold_accents(word)) == len(word)

    def test_fold_matches_strip_for_precomposed(self):
        assert fold_accents("méxico") == "mexico"
        assert fold_accents("curaçao") == "curacao"

    def test_fold_bare_combining_mark(self):
        """A lone combining mark folds to the placeholder instead of vanishing"""
        assert fold_accents("e\u0301") == "e" + COMBINING_PLACEHOLDER
        assert fold_accents("\u0301") == COMBINING_PLACEHOLDER

    def test_fold_multi_character_decomposition(self):
        """Characters stripping to the same several base characters fold alike"""
        assert fold_accents("\u0ddc") == fold_accents("\u0ddd") == "\u0dd9"


class TestSlugifyName:
    def test_basic(self):
        assert slugify_name("France") == "france"
        assert slugify_name("Bosnia and Herz.") == "bosnia-and-herz"

    def test_accents_and_apostrophes(self):
        assert slugify_name("Côte d'Ivoire") == "cote-divoire"
        assert slugify_name("São Tomé and Principe") == "sao-tome-and-principe"

    def test_empty(self):
        assert slugify_name("") == ""


class TestNormalizeQuotes:
    def test_curly_apostrophe(self):
        assert normalize_quotes("Côte d’Ivoire") == "Côte d'Ivoire"
        assert normalize_quotes("Côte dʼIvoire") == "Côte d'Ivoire"

    def test_curly_double_quotes(self):
        assert normalize_quotes("“Congo”") == '"Congo"'

    def test_empty(self):
        assert normalize_quotes("") == ""


class TestSubstitutionCost:
    def test_costs(self):
        assert substitution_cost("e", "e") == 0
        assert substitution_cost("é", "e") == 0.5
        assert substitution_cost("e", "é") == 0.5
        assert substitution_cost("é", "è") == 0.5
        assert substitution_cost("a", "e") == 1


class TestWeightedDistance:
    def test_identity(self):
        for word in ["", "a", "france", "côte d'ivoire", "日本"]:
            assert weighted_distance(word, word) == 0

    def test_single_accent_substitution(self):
        assert weighted_distance("café", "cafe") == 0.5

    def test_single_insertion(self):
        assert weighted_distance("canada", "canadaa") == 1

    def test_empty_strings(self):
        assert weighted_distance("", "peru") == 4
        assert weighted_distance("peru", "") == 4

    def test_mixed_edits(self):
        # é->e (0.5) plus one insertion
        assert weighted_distance("pérou", "perous") == 1.5
        assert weighted_distance("frence", "france") == 1

    def test_case_sensitive(self):
        """Callers lowercase first; the distance itself is exact"""
        assert weighted_distance("France", "france") == 1

    def test_symmetric(self):
        for a, b in ACCENT_PAIRS + [("frence", "france"), ("peru", "pérou")]:
            assert weighted_distance(a, b) == weighted_distance(b, a)

    def test_custom_costs(self):
        assert weighted_distance("peru", "perus", insert_cost=2) == 2
        assert weighted_distance("perus", "peru", remove_cost=3) == 3


class TestLowerBound:
    def test_never_exceeds_weighted(self):
        pairs = ACCENT_PAIRS + [
            ("frence", "france"),
            ("xxzzyy123", "peru"),
            ("e\u0301", "è"),
            ("e\u0301", "e"),
            ("", "chad"),
        ]
        for a, b in pairs:
            assert distance_lower_bound(a, b) <= weighted_distance(a, b)

    def test_accents_are_free(self):
        assert distance_lower_bound("perú", "peru") == 0

    def test_multi_character_decompositions(self):
        """Sinhala U+0DDC and U+0DDD differ only by a combining mark"""
        guess, target = "\u0ddd" * 3, "\u0ddc" * 3
        assert weighted_distance(guess, target) == 1.5
        assert distance_lower_bound(guess, target) <= weighted_distance(guess, target)


class TestBlockCandidates:
    def test_keeps_close_choices_in_order(self):
        choices = ["france", "peru", "greece"]
        assert block_candidates("frence", choices, 2) == [0, 2]

    def test_keeps_accent_variants_at_zero(self):
        """Accent-only differences survive even a zero threshold"""
        assert block_candidates("perou", ["pérou", "peru"], 0) == [0]

    def test_keeps_multi_character_accent_variants(self):
        assert block_candidates("\u0ddd" * 3, ["\u0ddc" * 3], 2) == [0]

    def test_no_choices(self):
        assert block_candidates("peru", [], 2) == []

    def test_negative_threshold(self):
        assert block_candidates("peru", ["peru"], -1) == []


class TestBuildUtils:
    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("version: '1.0'\ncountries:\n  - name: Peru\n", encoding="utf-8")
        data = load_yaml_file(path)
        assert data["countries"] == [{"name": "Peru"}]

    def test_load_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "missing.yaml")

    def test_expand_localized_names(self):
        result = expand_localized_names({"fr": "Allemagne", "de": "Deutschland"}, ["NAME_EN", "NAME_FR"])
        assert result == {"NAME_EN": "", "NAME_FR": "Allemagne", "NAME_DE": "Deutschland"}

    def test_expand_localized_names_none(self):
        assert expand_localized_names(None, ["NAME_EN"]) == {"NAME_EN": ""}
