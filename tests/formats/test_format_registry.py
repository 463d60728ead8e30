"""Output format registry, factory fallback, and detection helpers."""

from __future__ import annotations

import logging

import pytest

from arc42docs.errors import ConfigurationError, NotFoundError
from arc42docs.formats import (
    MarkdownFormat,
    OutputFormatFactory,
    OutputFormatRegistry,
    build_format_registry,
    detect_format_from_extension,
    detect_format_from_filename,
    normalize_format_code,
    resolve_format_alias,
)


@pytest.mark.parametrize("code", ["markdown", "MARKDOWN", "  Markdown  "])
def test_registry_lookup_ignores_case_and_whitespace(code: str) -> None:
    registry = build_format_registry()
    assert registry.get(code).code == "markdown"


def test_registering_same_code_overwrites() -> None:
    registry = build_format_registry()
    replacement = MarkdownFormat()

    registry.register(replacement)

    assert registry.size == 2
    assert registry.get("markdown") is replacement


def test_get_all_returns_a_copy() -> None:
    registry = build_format_registry()
    strategies = registry.get_all()
    strategies.clear()

    assert len(registry.get_all()) == 2
    assert registry.size == 2


def test_get_or_raise_lists_available_formats() -> None:
    registry = build_format_registry()
    with pytest.raises(NotFoundError, match="Available formats: markdown, asciidoc"):
        registry.get_or_raise("docx")


def test_factory_resolves_aliases() -> None:
    factory = OutputFormatFactory(build_format_registry())

    assert factory.create("md").code == "markdown"
    assert factory.create("ADOC").code == "asciidoc"
    assert factory.is_supported("asciidoctor")
    assert not factory.is_supported("docx")
    assert factory.resolve_alias("mkd") == "markdown"


@pytest.mark.parametrize("code", ["docx", "", "   ", None, 42])
def test_fallback_returns_default_for_any_unknown_input(code: object) -> None:
    factory = OutputFormatFactory(build_format_registry())

    first = factory.create_with_fallback(code)  # type: ignore[arg-type]
    second = factory.create_with_fallback(code)  # type: ignore[arg-type]

    assert first is second
    assert first.code == "asciidoc"


def test_fallback_logs_a_warning_for_unknown_codes(caplog: pytest.LogCaptureFixture) -> None:
    factory = OutputFormatFactory(build_format_registry())

    with caplog.at_level(logging.WARNING, logger="arc42docs"):
        factory.create_with_fallback("docx")

    assert "Unknown output format 'docx'" in caplog.text


def test_fallback_without_default_raises_configuration_error() -> None:
    registry = OutputFormatRegistry()
    registry.register(MarkdownFormat())
    factory = OutputFormatFactory(registry)

    with pytest.raises(ConfigurationError):
        factory.create_with_fallback("docx")


def test_alias_normalization() -> None:
    assert normalize_format_code("MD") == normalize_format_code("md") == "markdown"
    assert normalize_format_code("ADOC") == normalize_format_code("adoc") == "asciidoc"
    assert normalize_format_code("docx") == "docx"
    assert resolve_format_alias("docx") is None


def test_extension_detection() -> None:
    assert detect_format_from_extension(".MD") == "markdown"
    assert detect_format_from_extension("adoc") == "asciidoc"
    assert detect_format_from_extension(".asc") == "asciidoc"
    assert detect_format_from_extension(".txt") is None
    assert detect_format_from_extension(".") is None


def test_filename_detection() -> None:
    assert detect_format_from_filename("a.b.adoc") == "asciidoc"
    assert detect_format_from_filename("docs/README.md") == "markdown"
    assert detect_format_from_filename("README") is None
    assert detect_format_from_filename(".gitignore") is None


def test_clear_and_alias_listing() -> None:
    registry = build_format_registry()
    factory = OutputFormatFactory(registry)

    assert "asciidoctor" in factory.all_aliases()
    assert registry.clear() is registry
    assert registry.size == 0
    assert registry.get_default() is None
