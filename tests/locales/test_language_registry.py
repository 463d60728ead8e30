"""Language registry construction and factory fallback."""

from __future__ import annotations

import logging

import pytest

from arc42docs.errors import ConfigurationError, NotFoundError
from arc42docs.locales import (
    CatalogLanguage,
    LanguageCatalog,
    LanguageFactory,
    LanguageRegistry,
    build_language_registry,
)

BUNDLED_CODES = ["EN", "DE", "CZ", "ES", "FR", "IT", "NL", "PT", "RU", "UKR", "ZH"]


def _catalog(code: str) -> LanguageCatalog:
    return LanguageCatalog(code=code, name=f"Lang {code}", native_name=code, titles={}, descriptions={})


def test_bundled_languages_are_registered_in_order() -> None:
    registry = build_language_registry()
    assert registry.available_codes()[: len(BUNDLED_CODES)] == BUNDLED_CODES


@pytest.mark.parametrize("code", ["de", "DE", " De "])
def test_lookup_normalizes_codes(code: str) -> None:
    registry = build_language_registry()
    assert registry.get(code).code == "DE"


def test_register_overwrites_existing_code() -> None:
    registry = build_language_registry(["EN", "DE"])
    replacement = CatalogLanguage(_catalog("de"))

    registry.register(replacement)

    assert registry.size == 2
    assert registry.get("DE") is replacement


def test_get_all_returns_a_copy() -> None:
    registry = build_language_registry(["EN"])
    registry.get_all().append(CatalogLanguage(_catalog("XX")))
    assert registry.size == 1
    assert len(registry.get_all()) == 1


def test_enabled_subset_and_unknown_request() -> None:
    assert build_language_registry(["en", "fr"]).available_codes() == ["EN", "FR"]
    with pytest.raises(ValueError, match="XX"):
        build_language_registry(["EN", "XX"])


def test_create_raises_for_unknown_code() -> None:
    factory = LanguageFactory(build_language_registry())
    with pytest.raises(NotFoundError, match='Language code "XX" is not registered'):
        factory.create("xx")


@pytest.mark.parametrize("code", ["XX", "", "  ", None, 7])
def test_fallback_is_deterministic(code: object) -> None:
    factory = LanguageFactory(build_language_registry())
    assert factory.create_with_fallback(code) is factory.create_with_fallback(code)
    assert factory.create_with_fallback(code).code == "EN"


def test_fallback_warns_for_unknown_codes(caplog: pytest.LogCaptureFixture) -> None:
    factory = LanguageFactory(build_language_registry())

    with caplog.at_level(logging.WARNING, logger="arc42docs"):
        strategy = factory.create_with_fallback("klingon")

    assert strategy.code == "EN"
    assert "Language 'klingon' is not registered. Falling back to EN" in caplog.text


def test_fallback_without_default_raises_configuration_error() -> None:
    registry = LanguageRegistry()
    registry.register(CatalogLanguage(_catalog("DE")))
    factory = LanguageFactory(registry)

    with pytest.raises(ConfigurationError):
        factory.create_with_fallback("XX")


def test_is_supported_rejects_non_strings() -> None:
    factory = LanguageFactory(build_language_registry())
    assert factory.is_supported("ukr")
    assert not factory.is_supported(None)
    assert not factory.is_supported(3)


def test_info_exposes_display_names() -> None:
    strategy = build_language_registry().get("ZH")
    info = strategy.info()
    assert (info.code, info.name, info.native_name) == ("ZH", "Chinese", "中文")
