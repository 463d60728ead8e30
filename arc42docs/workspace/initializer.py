"""Creates a new arc42 documentation workspace on disk."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from ..config import build_workspace_config, render_workspace_config
from ..constants import (
    ARC42_SECTIONS,
    CONFIG_FILENAME,
    DOCUMENT_BASENAME,
    DOCUMENT_VERSION,
    IMAGES_DIR,
    SECTIONS_DIR,
)
from ..errors import AlreadyInitializedError, ValidationError
from ..locales.provider import LocalizedTemplateProvider
from ..logging import get_logger
from ..models import InitResult


class WorkspaceInitializer:
    """Writes config.yaml, README, the combined document, and the twelve section stubs."""

    def __init__(self, provider: LocalizedTemplateProvider) -> None:
        self.provider = provider
        self.logger = get_logger("workspace.initializer")

    def initialize(
        self,
        project_name: str,
        workspace_root: Path,
        language: Optional[str] = None,
        output_format: Optional[str] = None,
        force: bool = False,
    ) -> InitResult:
        if not isinstance(project_name, str) or not project_name.strip():
            raise ValidationError("Project name is required")
        project_name = project_name.strip()

        if workspace_root.exists() and not force:
            raise AlreadyInitializedError(
                f"Workspace already exists at {workspace_root}. Use force=true to re-initialize."
            )

        strategy = self.provider.require_language(language)
        fmt = self.provider.require_format(output_format)

        workspace_root.mkdir(parents=True, exist_ok=True)
        sections_dir = workspace_root / SECTIONS_DIR
        sections_dir.mkdir(exist_ok=True)
        (workspace_root / IMAGES_DIR).mkdir(exist_ok=True)

        config = build_workspace_config(
            project_name,
            language=strategy.code,
            output_format=fmt.code,
            version=DOCUMENT_VERSION,
        )
        _write(workspace_root / CONFIG_FILENAME, render_workspace_config(config))
        _write(
            workspace_root / fmt.readme_filename(),
            strategy.readme_content(project_name, fmt),
        )
        _write(
            workspace_root / fmt.document_filename(DOCUMENT_BASENAME),
            strategy.document_content(
                project_name,
                fmt,
                version=DOCUMENT_VERSION,
                date=date.today().isoformat(),
            ),
        )
        for section in ARC42_SECTIONS:
            _write(sections_dir / fmt.section_filename(section), strategy.stub_content(section, fmt))

        self.logger.info(
            "Initialized arc42 workspace at %s (%s, %s)", workspace_root, strategy.code, fmt.code
        )
        return InitResult(
            workspace_root=workspace_root,
            project_name=project_name,
            language=strategy.code,
            format=fmt.code,
            sections_created=len(ARC42_SECTIONS),
            config=config.to_dict(),
        )


def _write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


__all__ = ["WorkspaceInitializer"]
