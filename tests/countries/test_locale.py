"""Test suite for per-locale name field policies."""

import pytest
from globeguess.countries.countrylocale import (
    DEFAULT_LOCALE,
    ENGLISH_SUGGESTION_FIELDS,
    LOCALE_POLICIES,
    ConfigurationError,
    get_locale_policy,
    localized_name_fields,
    supported_locales,
)


def test_default_locale_supported():
    assert DEFAULT_LOCALE in supported_locales()


def test_english_policy():
    policy = get_locale_policy("en-CA")
    assert policy.name_field == "NAME_EN"
    assert policy.suggestion_fields == ENGLISH_SUGGESTION_FIELDS
    assert "ABBREV" not in policy.suggestion_fields


@pytest.mark.parametrize("locale,field", [
    ("fr-FR", "NAME_FR"),
    ("de-DE", "NAME_DE"),
    ("es-MX", "NAME_ES"),
    ("it-IT", "NAME_IT"),
    ("pt-BR", "NAME_PT"),
])
def test_localized_policies(locale, field):
    """Other locales suggest from their own display name only"""
    policy = get_locale_policy(locale)
    assert policy.name_field == field
    assert policy.suggestion_fields == (field,)


def test_unknown_locale():
    with pytest.raises(ConfigurationError, match="xx-XX"):
        get_locale_policy("xx-XX")


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_locale_ids_are_case_sensitive():
    with pytest.raises(ConfigurationError):
        get_locale_policy("EN-CA")


def test_supported_locales():
    assert supported_locales() == list(LOCALE_POLICIES)
    assert len(supported_locales()) == 6


def test_localized_name_fields():
    assert localized_name_fields() == [
        "NAME_EN", "NAME_FR", "NAME_DE", "NAME_ES", "NAME_IT", "NAME_PT",
    ]
