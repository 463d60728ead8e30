"""Reading and writing section files."""

from __future__ import annotations

import pytest

from arc42docs.errors import NotFoundError, ValidationError
from arc42docs.locales import LanguageFactory, build_language_registry
from arc42docs.locales.provider import LocalizedTemplateProvider
from arc42docs.workspace import SectionAccessor, count_words, read_section_text
from tests._fixtures.workspace_builder import WorkspaceBuilder


@pytest.fixture
def accessor() -> SectionAccessor:
    return SectionAccessor(LocalizedTemplateProvider(LanguageFactory(build_language_registry())))


def test_read_returns_content_and_metadata(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    path = workspace_builder.section("04_solution_strategy", "Use event sourcing.", ".md")

    content = accessor.read("04_solution_strategy", workspace_builder.root)

    assert content.content == "Use event sourcing."
    assert content.format == "markdown"
    assert content.path == path
    assert content.word_count == 3
    assert content.size == len("Use event sourcing.")
    assert content.last_modified.endswith("+00:00")


def test_read_missing_section(accessor: SectionAccessor, workspace_builder: WorkspaceBuilder) -> None:
    with pytest.raises(NotFoundError, match="Section file not found: 06_runtime_view"):
        accessor.read("06_runtime_view", workspace_builder.root)


def test_read_recognizes_alternate_extensions(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.section("12_glossary", "Term", ".markdown")

    assert accessor.read("12_glossary", workspace_builder.root).format == "markdown"


def test_configured_format_wins_when_both_files_exist(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("format: markdown\n")
    workspace_builder.section("12_glossary", "adoc text", ".adoc")
    workspace_builder.section("12_glossary", "md text", ".md")

    assert accessor.read("12_glossary", workspace_builder.root).content == "md text"


def test_write_new_section_uses_config_format(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("format: md\n")

    result = accessor.write("03_context_and_scope", "Context", "replace", workspace_builder.root)

    assert result.path == workspace_builder.root / "sections" / "03_context_and_scope.md"
    assert result.format == "markdown"
    assert result.path.read_text(encoding="utf-8") == "Context"


def test_write_new_section_defaults_to_asciidoc(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.root.mkdir(parents=True)

    result = accessor.write("03_context_and_scope", "Context", "replace", workspace_builder.root)

    assert result.path.name == "03_context_and_scope.adoc"


def test_write_keeps_existing_file_format(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("format: asciidoc\n")
    existing = workspace_builder.section("07_deployment_view", "old", ".md")

    result = accessor.write("07_deployment_view", "new", "replace", workspace_builder.root)

    assert result.path == existing
    assert existing.read_text(encoding="utf-8") == "new"


def test_append_joins_with_blank_line(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    path = workspace_builder.section("09_architecture_decisions", "ADR 1")

    result = accessor.write("09_architecture_decisions", "ADR 2", "APPEND", workspace_builder.root)

    assert path.read_text(encoding="utf-8") == "ADR 1\n\nADR 2"
    assert result.mode == "append"
    assert result.word_count == 4


def test_append_to_missing_file_creates_it(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.root.mkdir(parents=True)

    result = accessor.write("09_architecture_decisions", "ADR 1", "append", workspace_builder.root)

    assert result.path.read_text(encoding="utf-8") == "ADR 1"


def test_unknown_mode_is_rejected(accessor: SectionAccessor, workspace_builder: WorkspaceBuilder) -> None:
    with pytest.raises(ValidationError, match="Unknown write mode"):
        accessor.write("12_glossary", "x", "prepend", workspace_builder.root)


def test_count_words() -> None:
    assert count_words("") == 0
    assert count_words("  one\ttwo\nthree  ") == 3


def test_resolve_format_precedence(accessor: SectionAccessor, workspace_builder: WorkspaceBuilder) -> None:
    workspace_builder.root.mkdir(parents=True)
    assert accessor.resolve_format("01_introduction_and_goals", workspace_builder.root).code == "asciidoc"

    workspace_builder.config("format: markdown\n")
    assert accessor.resolve_format("01_introduction_and_goals", workspace_builder.root).code == "markdown"

    workspace_builder.section("01_introduction_and_goals", "text", ".asc")
    assert accessor.resolve_format("01_introduction_and_goals", workspace_builder.root).code == "asciidoc"


def test_read_replaces_undecodable_bytes(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    path = workspace_builder.section("02_architecture_constraints", "", ".md")
    path.write_bytes("Café naïve".encode("latin-1"))

    content = accessor.read("02_architecture_constraints", workspace_builder.root)

    assert content.content == read_section_text(path) == "Caf\ufffd na\ufffdve"
    assert content.word_count == 2


def test_append_to_non_utf8_section(
    accessor: SectionAccessor, workspace_builder: WorkspaceBuilder
) -> None:
    path = workspace_builder.section("12_glossary", "", ".md")
    path.write_bytes("Caf\xe9".encode("latin-1"))

    accessor.write("12_glossary", "Menu", "append", workspace_builder.root)

    assert path.read_text(encoding="utf-8") == "Caf\ufffd\n\nMenu"
