"""Configuration loading for arc42 workspaces (config.yaml) and runtime settings."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .constants import ARC42_REFERENCE, CONFIG_FILENAME, DEFAULT_WORKSPACE_DIR


class ConfigError(RuntimeError):
    """Raised when config.yaml cannot be parsed."""


@dataclass
class WorkspaceConfig:
    """Represents the settings persisted in a workspace's config.yaml."""

    project_name: Optional[str] = None
    version: Optional[str] = None
    created: Optional[str] = None
    format: Optional[str] = None
    language: Optional[str] = None
    template_version: Optional[str] = None
    template_date: Optional[str] = None
    template_commit: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "projectName": self.project_name,
            "version": self.version,
            "created": self.created,
            "format": self.format,
            "language": self.language,
            "arc42_template_version": self.template_version,
            "arc42_template_date": self.template_date,
            "arc42_template_commit": self.template_commit,
        }


@dataclass
class ToolSettings:
    """Runtime settings that locate the default workspace."""

    project_path: Path
    workspace_dir: str = DEFAULT_WORKSPACE_DIR

    @property
    def workspace_root(self) -> Path:
        return self.project_path / self.workspace_dir

    def resolve(self, target_folder: str | Path | None = None) -> tuple[Path, Path]:
        """Return ``(project_path, workspace_root)`` honoring an optional target folder."""
        if target_folder:
            project = Path(target_folder).expanduser()
            return project, project / self.workspace_dir
        return self.project_path, self.workspace_root

    @classmethod
    def from_env(
        cls,
        project_path: str | Path | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> "ToolSettings":
        env = os.environ if environ is None else environ
        raw_path = project_path or env.get("ARC42_PROJECT_PATH") or "."
        workspace_dir = env.get("ARC42_WORKSPACE_DIR") or DEFAULT_WORKSPACE_DIR
        return cls(
            project_path=Path(raw_path).expanduser().resolve(),
            workspace_dir=workspace_dir,
        )


def load_workspace_config(workspace_root: Path) -> WorkspaceConfig:
    """Load config.yaml from ``workspace_root``; missing files yield an empty config."""
    config_file = workspace_root / CONFIG_FILENAME
    if not config_file.exists():
        return WorkspaceConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    return WorkspaceConfig(
        project_name=_as_str(data.get("projectName")),
        version=_as_str(data.get("version")),
        created=_as_str(data.get("created")),
        format=_as_str(data.get("format")),
        language=_as_str(data.get("language")),
        template_version=_as_str(data.get("arc42_template_version")),
        template_date=_as_str(data.get("arc42_template_date")),
        template_commit=_as_str(data.get("arc42_template_commit")),
    )


def read_workspace_config(workspace_root: Path) -> Optional[WorkspaceConfig]:
    """Return the workspace config, or None when it is missing or unusable."""
    if not (workspace_root / CONFIG_FILENAME).is_file():
        return None
    try:
        return load_workspace_config(workspace_root)
    except (ConfigError, OSError, UnicodeDecodeError):
        return None


def build_workspace_config(
    project_name: str,
    *,
    language: str,
    output_format: str,
    version: str,
    created: str | None = None,
) -> WorkspaceConfig:
    """Assemble the config written at init time, stamped with template provenance."""
    timestamp = created or datetime.now().astimezone().isoformat(timespec="seconds")
    return WorkspaceConfig(
        project_name=project_name,
        version=version,
        created=timestamp,
        format=output_format,
        language=language,
        template_version=ARC42_REFERENCE["version"],
        template_date=ARC42_REFERENCE["date"],
        template_commit=ARC42_REFERENCE["commit"],
    )


def render_workspace_config(config: WorkspaceConfig) -> str:
    """Serialise ``config`` into the line-oriented config.yaml layout."""
    values = config.to_dict()
    lines = ["# arc42 Documentation Configuration"]
    for key in ("projectName", "version", "created", "format", "language"):
        lines.append(f"{key}: {_yaml_scalar(values[key])}")
    lines.extend(
        [
            "",
            "# arc42 Template Reference",
            "# This documents which version of the arc42 template this documentation is based on.",
            f"# Source: {ARC42_REFERENCE['source']}",
        ]
    )
    for key in ("arc42_template_version", "arc42_template_date", "arc42_template_commit"):
        lines.append(f"{key}: {_yaml_scalar(values[key])}")
    return "\n".join(lines) + "\n"


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as exc:
        # ValueError covers implicit scalars such as impossible dates.
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _yaml_scalar(value: Optional[str]) -> str:
    if value is None:
        return "null"
    if "\n" not in value and "#" not in value:
        try:
            if yaml.safe_load(value) == value:
                return value
        except yaml.YAMLError:
            pass
    # JSON strings are valid double-quoted YAML scalars.
    return json.dumps(value, ensure_ascii=False)


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


__all__ = [
    "ConfigError",
    "ToolSettings",
    "WorkspaceConfig",
    "build_workspace_config",
    "load_workspace_config",
    "read_workspace_config",
    "render_workspace_config",
]
