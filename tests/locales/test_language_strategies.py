"""Rendering of templates, guides, READMEs, and stubs by catalog languages."""

from __future__ import annotations

import pytest

from arc42docs.constants import ARC42_SECTIONS
from arc42docs.formats import AsciiDocFormat, MarkdownFormat
from arc42docs.locales import LanguageRegistry, build_language_registry
from arc42docs.locales.base import tidy
from arc42docs.locales.catalogs import BUILTIN_CATALOGS, FALLBACK_CATALOG


@pytest.fixture(scope="module")
def registry() -> LanguageRegistry:
    return build_language_registry()


def test_english_template_in_markdown(registry: LanguageRegistry) -> None:
    text = registry.get("EN").template("01_introduction_and_goals", MarkdownFormat())

    assert text.startswith("# 1. Introduction and Goals\n")
    assert "<!-- Requirements overview, quality goals, and stakeholders -->" in text
    assert "## Requirements Overview" in text
    assert "**Purpose:**" in text
    assert "[Introduction and Goals](https://docs.arc42.org/section-1/)" in text
    assert text.endswith("\n") and not text.endswith("\n\n")


def test_english_template_in_asciidoc(registry: LanguageRegistry) -> None:
    text = registry.get("EN").template("12_glossary", AsciiDocFormat())

    assert text.startswith("= 12. Glossary\n")
    assert "// Important domain and technical terms" in text
    assert "link:https://docs.arc42.org/section-12/[Glossary]" in text


def test_german_template_uses_german_guidance(registry: LanguageRegistry) -> None:
    text = registry.get("DE").template("01_introduction_and_goals", MarkdownFormat())

    assert text.startswith("# 1. Einführung und Ziele\n")
    assert "## Qualitätsziele" in text
    assert "**Zweck:**" in text
    assert "Weitere Informationen:" in text


def test_french_template_uses_french_guidance(registry: LanguageRegistry) -> None:
    text = registry.get("FR").template("01_introduction_and_goals", MarkdownFormat())

    assert text.startswith("# 1. Introduction et Objectifs\n")
    assert "## Aperçu des spécifications" in text
    assert "## Objectifs de Qualité" in text
    assert "**Objectif:**" in text
    assert "Informations complémentaires:" in text
    assert "Requirements Overview" not in text


@pytest.mark.parametrize(
    ("code", "heading"),
    [
        ("ES", "## Metas de Calidad"),
        ("IT", "## Obiettivi di Qualità"),
        ("NL", "## Kwaliteitsdoelen"),
        ("PT", "## Objetivos de Qualidade"),
        ("CZ", "## Cíle kvality"),
        ("ZH", "## 质量目标"),
    ],
)
def test_localized_guidance_headings(registry: LanguageRegistry, code: str, heading: str) -> None:
    text = registry.get(code).template("01_introduction_and_goals", MarkdownFormat())

    assert heading in text
    assert "## Quality Goals" not in text


@pytest.mark.parametrize("code", ["DE", "CZ", "ES", "FR", "IT", "NL", "PT", "ZH"])
def test_localized_catalogs_are_complete(code: str) -> None:
    catalogs = {catalog.code: catalog for catalog in BUILTIN_CATALOGS}
    catalog = catalogs[code]

    assert set(catalog.guidance) == set(ARC42_SECTIONS)
    for section in ARC42_SECTIONS:
        assert len(catalog.guidance[section]) == len(FALLBACK_CATALOG.guidance[section])
    assert set(catalog.phrases) == set(FALLBACK_CATALOG.phrases)


def test_languages_without_guidance_reuse_english_blocks(registry: LanguageRegistry) -> None:
    russian = registry.get("RU")
    text = russian.template("01_introduction_and_goals", MarkdownFormat())

    assert text.startswith("# 1. Введение и цели\n")
    assert "## Requirements Overview" in text
    assert "**Назначение:**" in text


@pytest.mark.parametrize("code", ["EN", "DE", "CZ", "ES", "FR", "IT", "NL", "PT", "RU", "UKR", "ZH"])
def test_every_language_renders_every_section(registry: LanguageRegistry, code: str) -> None:
    strategy = registry.get(code)
    for section in ARC42_SECTIONS:
        assert strategy.section_title(section)
        assert strategy.section_description(section)
        assert strategy.template(section, AsciiDocFormat()).startswith("= ")
    assert strategy.workflow_guide(MarkdownFormat()).startswith("# ")
    assert strategy.readme_content("Demo", AsciiDocFormat()).startswith("= ")


def test_workflow_guide_lists_languages_and_paths(registry: LanguageRegistry) -> None:
    english = registry.get("EN")
    infos = [strategy.info() for strategy in registry.get_all()]

    guide = english.workflow_guide(MarkdownFormat(), infos)

    assert guide.startswith("# arc42 Architecture Documentation Workflow Guide\n")
    assert "| DE | German | Deutsch |" in guide
    assert "`sections/01_introduction_and_goals.md`" in guide
    assert "`arc42docs status` - Check documentation status" in guide
    assert "arc42 9.0-EN (July 2025)" in guide


def test_workflow_guide_without_languages_omits_table(registry: LanguageRegistry) -> None:
    guide = registry.get("EN").workflow_guide(AsciiDocFormat())
    assert "Available Languages" not in guide
    assert "sections/05_building_block_view.adoc" in guide


def test_readme_with_and_without_project_name(registry: LanguageRegistry) -> None:
    english = registry.get("EN")

    named = english.readme_content("Shop", MarkdownFormat())
    generic = english.readme_content(None, MarkdownFormat())

    assert named.startswith("# Shop - Architecture Documentation\n")
    assert "`arc42-documentation.md` - Main combined documentation" in named
    assert "**Introduction and Goals** - Requirements overview" in named
    assert generic.startswith("# Architecture Documentation\n")


def test_document_links_every_section(registry: LanguageRegistry) -> None:
    text = registry.get("DE").document_content(
        "Shop", AsciiDocFormat(), version="1.0.0", date="2025-01-31"
    )

    assert text.startswith("= Shop - Architekturdokumentation\n")
    assert "*Version:* 1.0.0" in text
    assert "link:sections/12_glossary.adoc[Glossar]" in text
    assert "Deutsch (DE)" in text


def test_stub_content(registry: LanguageRegistry) -> None:
    stub = registry.get("DE").stub_content("12_glossary", MarkdownFormat())
    assert stub == "# Glossar\n\n<!-- Wichtige fachliche und technische Begriffe -->\n"


def test_phrase_formats_and_falls_back(registry: LanguageRegistry) -> None:
    french = registry.get("FR")

    assert french.phrase("readme_title", project="X") == "X - Documentation d'Architecture"
    assert french.phrase("guide_tool_descriptions")["init"]
    with pytest.raises(KeyError):
        french.phrase("no_such_phrase")


def test_tidy_collapses_blank_lines() -> None:
    assert tidy("a  \n\n\n\nb\n\n") == "a\n\nb\n"
