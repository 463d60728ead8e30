"""Workspace initialization on disk."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from arc42docs.constants import ARC42_REFERENCE, ARC42_SECTIONS
from arc42docs.errors import AlreadyInitializedError, ValidationError
from arc42docs.locales import LanguageFactory, build_language_registry
from arc42docs.locales.provider import LocalizedTemplateProvider
from arc42docs.workspace import WorkspaceInitializer


@pytest.fixture
def initializer() -> WorkspaceInitializer:
    return WorkspaceInitializer(LocalizedTemplateProvider(LanguageFactory(build_language_registry())))


def test_markdown_workspace_layout(initializer: WorkspaceInitializer, tmp_path: Path) -> None:
    root = tmp_path / "arc42-docs"

    result = initializer.initialize("Shop", root, output_format="markdown")

    assert (root / "README.md").is_file()
    assert (root / "arc42-documentation.md").is_file()
    assert (root / "images").is_dir()
    for section in ARC42_SECTIONS:
        assert (root / "sections" / f"{section}.md").is_file()
    config_text = (root / "config.yaml").read_text(encoding="utf-8")
    assert "format: markdown" in config_text
    assert result.format == "markdown"
    assert result.language == "EN"
    assert result.sections_created == 12


def test_default_workspace_is_asciidoc(initializer: WorkspaceInitializer, tmp_path: Path) -> None:
    root = tmp_path / "arc42-docs"

    initializer.initialize("Shop", root)

    assert (root / "README.adoc").is_file()
    assert (root / "sections" / "01_introduction_and_goals.adoc").is_file()
    assert not list((root / "sections").glob("*.md"))
    assert "format: asciidoc" in (root / "config.yaml").read_text(encoding="utf-8")


def test_config_records_project_and_template_reference(
    initializer: WorkspaceInitializer, tmp_path: Path
) -> None:
    root = tmp_path / "arc42-docs"

    result = initializer.initialize("  Shop: Backend  ", root, language="de")
    config = yaml.safe_load((root / "config.yaml").read_text(encoding="utf-8"))

    assert config["projectName"] == "Shop: Backend"
    assert config["language"] == "DE"
    assert config["version"] == "1.0.0"
    assert config["arc42_template_version"] == ARC42_REFERENCE["version"]
    assert config["arc42_template_commit"] == ARC42_REFERENCE["commit"]
    assert result.config["projectName"] == "Shop: Backend"


def test_german_stub_headings(initializer: WorkspaceInitializer, tmp_path: Path) -> None:
    root = tmp_path / "arc42-docs"

    initializer.initialize("Shop", root, language="DE", output_format="md")

    stub = (root / "sections" / "01_introduction_and_goals.md").read_text(encoding="utf-8")
    assert stub.startswith("# Einführung und Ziele\n")
    readme = (root / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# Shop - Architekturdokumentation\n")


def test_existing_workspace_requires_force(initializer: WorkspaceInitializer, tmp_path: Path) -> None:
    root = tmp_path / "arc42-docs"
    initializer.initialize("Shop", root)
    custom = root / "sections" / "01_introduction_and_goals.adoc"
    custom.write_text("custom", encoding="utf-8")

    with pytest.raises(AlreadyInitializedError, match="Use force=true"):
        initializer.initialize("Shop", root)
    assert custom.read_text(encoding="utf-8") == "custom"

    initializer.initialize("Shop", root, force=True)
    assert custom.read_text(encoding="utf-8") != "custom"


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"language": "XX"}, 'Language code "XX" is not supported'),
        ({"output_format": "docx"}, 'Output format "docx" is not supported'),
    ],
)
def test_invalid_choices_leave_nothing_behind(
    initializer: WorkspaceInitializer, tmp_path: Path, kwargs: dict, message: str
) -> None:
    root = tmp_path / "arc42-docs"

    with pytest.raises(ValidationError, match=message):
        initializer.initialize("Shop", root, **kwargs)
    assert not root.exists()


def test_project_name_is_required(initializer: WorkspaceInitializer, tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="Project name is required"):
        initializer.initialize("   ", tmp_path / "arc42-docs")
