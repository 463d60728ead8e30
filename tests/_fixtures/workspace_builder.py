"""Helper utilities for constructing temporary arc42 workspaces in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Optional

from arc42docs.config import ToolSettings
from arc42docs.constants import CONFIG_FILENAME, DEFAULT_WORKSPACE_DIR, SECTIONS_DIR


class WorkspaceBuilder:
    """Utility for writing config and section files into a throwaway workspace."""

    def __init__(self, tmp_path: Path) -> None:
        self.project = tmp_path / "project"
        self.project.mkdir()
        self.root = self.project / DEFAULT_WORKSPACE_DIR

    def config(self, text: str) -> Path:
        """Write raw ``config.yaml`` text into the workspace."""
        path = self.root / CONFIG_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return path

    def section(self, section: str, content: str, extension: str = ".adoc") -> Path:
        """Write ``content`` to ``sections/<section><extension>``."""
        path = self.root / SECTIONS_DIR / f"{section}{extension}"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def settings(self, workspace_dir: Optional[str] = None) -> ToolSettings:
        """Return tool settings pointing at this builder's project directory."""
        return ToolSettings(
            project_path=self.project,
            workspace_dir=workspace_dir or DEFAULT_WORKSPACE_DIR,
        )

    @staticmethod
    def words(count: int) -> str:
        """Return ``count`` whitespace-separated words."""
        return " ".join(f"word{index}" for index in range(count))


__all__ = ["WorkspaceBuilder"]
