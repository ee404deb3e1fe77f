"""Shared test fixtures for globeguess tests."""

import pytest

from globeguess.countries.countryaliases import AliasPair, AliasTable
from globeguess.countries.countryidentity import Country


def _make_country(name, *, name_long=None, abbrev="", admin=None, brk_name=None,
                 name_sort=None, iso_a2="", **localized):
    """Build a Country with the name columns defaulting to the short name.

    Localized names are passed as keyword arguments, e.g. NAME_FR="Pérou".
    """
    return Country(
        name=name,
        name_long=name_long or name,
        abbrev=abbrev,
        admin=admin or name,
        brk_name=brk_name or name,
        name_sort=name_sort or name,
        iso_a2=iso_a2,
        names=localized,
    )


@pytest.fixture
def small_countries():
    """A handful of countries covering every lookup column.

    Saint Lucia deliberately has no French name.
    """
    return [
        _make_country("France", abbrev="Fr.", iso_a2="FR",
                      NAME_EN="France", NAME_FR="France", NAME_DE="Frankreich"),
        _make_country("Côte d'Ivoire", abbrev="I.C.", admin="Ivory Coast", iso_a2="CI",
                      NAME_EN="Ivory Coast", NAME_FR="Côte d'Ivoire"),
        _make_country("Saint Lucia", abbrev="S.L.", name_sort="St. Lucia", iso_a2="LC",
                      NAME_EN="Saint Lucia"),
        _make_country("Guinea-Bissau", abbrev="GnB.", iso_a2="GW",
                      NAME_EN="Guinea-Bissau", NAME_FR="Guinée-Bissau"),
        _make_country("Peru", abbrev="Peru", iso_a2="PE",
                      NAME_EN="Peru", NAME_FR="Pérou"),
        _make_country("Bosnia and Herz.", name_long="Bosnia and Herzegovina", abbrev="B.H.",
                      admin="Bosnia and Herzegovina", iso_a2="BA",
                      NAME_EN="Bosnia and Herzegovina"),
    ]


@pytest.fixture
def small_aliases():
    """Alias table for small_countries."""
    return AliasTable([
        AliasPair("ivory coast", "côte d'ivoire"),
        AliasPair("bosnia", "bosnia and herzegovina"),
        AliasPair("lucia", "saint lucia"),
    ])


@pytest.fixture
def no_aliases():
    """Empty alias table, so suggestions come from country names only."""
    return AliasTable([])


@pytest.fixture(scope="session")
def countries():
    """Packaged reference countries."""
    from globeguess.countries.countryapi import country_entities
    return country_entities()


@pytest.fixture(scope="session")
def aliases():
    """Packaged alias table."""
    from globeguess.countries.countryaliases import load_aliases
    return load_aliases()


@pytest.fixture
def make_country():
    """Factory for ad hoc Country records."""
    return _make_country
