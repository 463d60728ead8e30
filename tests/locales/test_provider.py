"""Localized template provider: explicit requests, fallbacks, and workspace config."""

from __future__ import annotations

import pytest

from arc42docs.errors import ValidationError
from arc42docs.locales import LanguageFactory, build_language_registry
from arc42docs.locales.provider import LocalizedTemplateProvider
from tests._fixtures.workspace_builder import WorkspaceBuilder


@pytest.fixture
def provider() -> LocalizedTemplateProvider:
    return LocalizedTemplateProvider(LanguageFactory(build_language_registry()))


def test_defaults_are_english_asciidoc(provider: LocalizedTemplateProvider) -> None:
    assert provider.language().code == "EN"
    assert provider.output_format().code == "asciidoc"
    assert provider.get_template("08_concepts").startswith("= 8. Cross-cutting Concepts\n")


def test_template_by_language_and_alias(provider: LocalizedTemplateProvider) -> None:
    text = provider.get_template("06_runtime_view", "de", "md")
    assert text.startswith("# 6. Laufzeitsicht\n")


def test_unknown_section_is_rejected(provider: LocalizedTemplateProvider) -> None:
    with pytest.raises(ValidationError, match="Unknown section"):
        provider.get_template("13_appendix")


def test_section_metadata_reports_resolved_language(provider: LocalizedTemplateProvider) -> None:
    metadata = provider.get_section_metadata("11_technical_risks", "xx")

    assert metadata.language_code == "EN"
    assert metadata.title == "Risks and Technical Debt"


def test_require_language_and_format(provider: LocalizedTemplateProvider) -> None:
    assert provider.require_language(None).code == "EN"
    assert provider.require_language("ukr").code == "UKR"
    assert provider.require_format("ADOC").code == "asciidoc"
    with pytest.raises(ValidationError, match='Language code "XX" is not supported'):
        provider.require_language("XX")
    with pytest.raises(ValidationError, match='Output format "docx" is not supported'):
        provider.require_format("docx")


def test_available_languages(provider: LocalizedTemplateProvider) -> None:
    codes = [info.code for info in provider.get_available_languages()]
    assert codes[:2] == ["EN", "DE"]
    assert "ZH" in codes


def test_readme_and_guide_helpers(provider: LocalizedTemplateProvider) -> None:
    assert provider.get_readme_content("Shop", "FR", "markdown").startswith(
        "# Shop - Documentation d'Architecture"
    )
    assert "| FR | French | Français |" in provider.get_workflow_guide("EN", "markdown")


def test_config_values_are_read_and_normalized(
    provider: LocalizedTemplateProvider, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config(
        """
        projectName: Shop
        format: MD
        language: " de "
        """
    )

    assert provider.read_language_from_config(workspace_builder.root) == "DE"
    assert provider.read_format_from_config(workspace_builder.root) == "markdown"
    assert provider.resolve_workspace_language(workspace_builder.root).code == "DE"
    assert provider.resolve_workspace_format(workspace_builder.root).code == "markdown"


@pytest.mark.parametrize(
    "content",
    [
        "language: [unclosed",
        "- just\n- a list\n",
        "language: {nested: true}\n",
        "language: 2024-13-45\n",
        "\tlanguage: DE\n",
        "",
    ],
)
def test_malformed_config_is_tolerated(
    provider: LocalizedTemplateProvider, workspace_builder: WorkspaceBuilder, content: str
) -> None:
    (workspace_builder.root).mkdir(parents=True)
    (workspace_builder.root / "config.yaml").write_text(content, encoding="utf-8")

    assert provider.read_language_from_config(workspace_builder.root) is None
    assert provider.resolve_workspace_language(workspace_builder.root).code == "EN"


def test_missing_config_resolves_defaults(
    provider: LocalizedTemplateProvider, workspace_builder: WorkspaceBuilder
) -> None:
    assert provider.read_language_from_config(workspace_builder.root) is None
    assert provider.read_format_from_config(workspace_builder.root) is None
    assert provider.resolve_workspace_format(workspace_builder.root).code == "asciidoc"


def test_unknown_config_language_falls_back(
    provider: LocalizedTemplateProvider, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("language: XX\nformat: docx\n")

    assert provider.read_language_from_config(workspace_builder.root) == "XX"
    assert provider.read_format_from_config(workspace_builder.root) is None
    assert provider.resolve_workspace_language(workspace_builder.root).code == "EN"


def test_template_with_config_prefers_overrides(
    provider: LocalizedTemplateProvider, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("language: DE\nformat: markdown\n")
    root = workspace_builder.root

    assert provider.get_template_with_config("12_glossary", root).startswith("# 12. Glossar")
    assert provider.get_template_with_config("12_glossary", root, "EN").startswith("# 12. Glossary")
    assert provider.get_template_with_config("12_glossary", root, None, "adoc").startswith(
        "= 12. Glossar"
    )
