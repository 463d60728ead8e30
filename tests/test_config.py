"""Tests for arc42docs.config."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from arc42docs.config import (
    ConfigError,
    ToolSettings,
    WorkspaceConfig,
    build_workspace_config,
    load_workspace_config,
    read_workspace_config,
    render_workspace_config,
)


def test_load_workspace_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_workspace_config(tmp_path)

    assert isinstance(config, WorkspaceConfig)
    assert config.project_name is None
    assert config.language is None
    assert config.format is None


def test_load_workspace_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text(
        """
# arc42 Documentation Configuration
projectName: "Shop: Backend"
version: 1.0.0
created: 2025-01-31T10:00:00+00:00
format: markdown
language: DE

arc42_template_version: 9.0-EN
arc42_template_date: July 2025
arc42_template_commit: b29e08928644af7ae49f51d729d14313db0d934c
""",
        encoding="utf-8",
    )

    config = load_workspace_config(tmp_path)

    assert config.project_name == "Shop: Backend"
    assert config.version == "1.0.0"
    assert config.created.startswith("2025-01-31T10:00:00")
    assert config.format == "markdown"
    assert config.language == "DE"
    assert config.template_version == "9.0-EN"
    assert config.template_date == "July 2025"
    assert config.template_commit == "b29e08928644af7ae49f51d729d14313db0d934c"


def test_load_workspace_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_workspace_config(tmp_path)


def test_read_workspace_config_swallows_parse_errors(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("language: [DE\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_workspace_config(tmp_path)
    assert read_workspace_config(tmp_path) is None
    assert read_workspace_config(tmp_path / "missing") is None


def test_non_scalar_values_are_ignored(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text(
        "language: [DE]\nformat: true\nversion: 2\n", encoding="utf-8"
    )

    config = load_workspace_config(tmp_path)

    assert config.language is None
    assert config.format is None
    assert config.version == "2"


def test_rendered_config_round_trips_through_yaml() -> None:
    config = build_workspace_config(
        "Shop: #1",
        language="DE",
        output_format="markdown",
        version="1.0.0",
        created="2025-01-31T10:00:00+00:00",
    )

    text = render_workspace_config(config)
    loaded = yaml.safe_load(text)

    assert text.startswith("# arc42 Documentation Configuration\n")
    assert "# arc42 Template Reference" in text
    assert "format: markdown\n" in text
    assert loaded["projectName"] == "Shop: #1"
    assert loaded["created"] == "2025-01-31T10:00:00+00:00"
    assert loaded["version"] == "1.0.0"
    assert loaded["language"] == "DE"
    assert loaded["arc42_template_date"] == "July 2025"


def test_tool_settings_from_env(tmp_path: Path) -> None:
    settings = ToolSettings.from_env(
        environ={"ARC42_PROJECT_PATH": str(tmp_path), "ARC42_WORKSPACE_DIR": "docs"}
    )

    assert settings.project_path == tmp_path.resolve()
    assert settings.workspace_root == tmp_path.resolve() / "docs"


def test_tool_settings_explicit_path_wins(tmp_path: Path) -> None:
    settings = ToolSettings.from_env(tmp_path / "a", environ={"ARC42_PROJECT_PATH": "/elsewhere"})

    assert settings.project_path == (tmp_path / "a").resolve()
    assert settings.workspace_root.name == "arc42-docs"


def test_tool_settings_resolve_target_folder(tmp_path: Path) -> None:
    settings = ToolSettings(project_path=tmp_path / "default")

    assert settings.resolve() == (tmp_path / "default", tmp_path / "default" / "arc42-docs")
    assert settings.resolve(tmp_path / "other") == (tmp_path / "other", tmp_path / "other" / "arc42-docs")
