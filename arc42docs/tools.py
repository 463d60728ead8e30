"""Operation surface for arc42 workspaces: init, status, section access, templates, guide."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .config import ToolSettings, read_workspace_config
from .constants import ARC42_REFERENCE, coerce_section
from .errors import Arc42Error, NotInitializedError, ValidationError
from .formats import (
    OutputFormat,
    OutputFormatFactory,
    OutputFormatRegistry,
    build_format_registry,
)
from .locales import LanguageFactory, LanguageRegistry, LanguageStrategy, build_language_registry
from .locales.provider import LocalizedTemplateProvider
from .logging import get_logger
from .models import SectionStatus
from .workspace import SectionAccessor, StatusCalculator, WorkspaceInitializer

logger = get_logger("tools")


@dataclass
class ToolResponse:
    """Uniform result of an operation; ``error`` names the failure class when unsuccessful."""

    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    next_steps: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        if self.next_steps:
            payload["nextSteps"] = list(self.next_steps)
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass
class Toolkit:
    """Registries, factories, and workspace services built once per process."""

    language_registry: LanguageRegistry
    format_registry: OutputFormatRegistry
    language_factory: LanguageFactory
    format_factory: OutputFormatFactory
    provider: LocalizedTemplateProvider
    accessor: SectionAccessor
    initializer: WorkspaceInitializer
    status_calculator: StatusCalculator


def build_toolkit(languages: List[str] | None = None) -> Toolkit:
    """Wire the default registries and services together."""
    language_registry = build_language_registry(languages)
    format_registry = build_format_registry()
    language_factory = LanguageFactory(language_registry)
    format_factory = OutputFormatFactory(format_registry)
    provider = LocalizedTemplateProvider(language_factory, format_factory)
    accessor = SectionAccessor(provider)
    return Toolkit(
        language_registry=language_registry,
        format_registry=format_registry,
        language_factory=language_factory,
        format_factory=format_factory,
        provider=provider,
        accessor=accessor,
        initializer=WorkspaceInitializer(provider),
        status_calculator=StatusCalculator(provider, accessor),
    )


class Arc42Tools:
    """Executes operations against the workspace located by ``settings``.

    Every public method returns a ``ToolResponse``; domain and I/O failures
    become ``success=False`` responses instead of propagating.
    """

    def __init__(self, toolkit: Toolkit, settings: ToolSettings) -> None:
        self.toolkit = toolkit
        self.settings = settings

    @property
    def provider(self) -> LocalizedTemplateProvider:
        return self.toolkit.provider

    def workflow_guide(
        self, language: Optional[str] = None, output_format: Optional[str] = None
    ) -> ToolResponse:
        def _run() -> ToolResponse:
            strategy = self.provider.language(language)
            fmt = self.provider.output_format(output_format)
            guide = self.provider.get_workflow_guide(strategy.code, fmt.code)
            return ToolResponse(
                success=True,
                message="arc42 workflow guide loaded",
                data={
                    "guide": guide,
                    "language": strategy.code,
                    "format": fmt.code,
                    "workspaceRoot": str(self.settings.workspace_root),
                },
                next_steps=[
                    "Initialize a workspace with: arc42docs init <project name>",
                    "Check documentation status with: arc42docs status",
                    "Generate a section template with: arc42docs template <section>",
                ],
            )

        return self._guard("load the workflow guide", _run)

    def init(
        self,
        project_name: str,
        force: bool = False,
        target_folder: Optional[str] = None,
        language: Optional[str] = None,
        output_format: Optional[str] = None,
    ) -> ToolResponse:
        def _run() -> ToolResponse:
            _, workspace_root = self.settings.resolve(target_folder)
            result = self.toolkit.initializer.initialize(
                project_name,
                workspace_root,
                language=language,
                output_format=output_format,
                force=force,
            )
            return ToolResponse(
                success=True,
                message=f"arc42 workspace initialized successfully for project: {result.project_name}",
                data={
                    "workspaceRoot": str(result.workspace_root),
                    "projectName": result.project_name,
                    "language": result.language,
                    "format": result.format,
                    "sectionsCreated": result.sections_created,
                    "config": result.config,
                },
                next_steps=[
                    "Check workspace status with: arc42docs status",
                    "Generate section templates with: arc42docs template <section>",
                    "Start with section 1: Introduction and Goals",
                    "Read the workflow guide if needed: arc42docs guide",
                ],
            )

        return self._guard("initialize workspace", _run)

    def status(self, target_folder: Optional[str] = None) -> ToolResponse:
        def _run() -> ToolResponse:
            project_path, workspace_root = self.settings.resolve(target_folder)
            self._require_workspace(workspace_root)
            config = read_workspace_config(workspace_root)
            strategy = self.provider.resolve_workspace_language(workspace_root)
            fmt = self.provider.resolve_workspace_format(workspace_root)
            report = self.toolkit.status_calculator.calculate(workspace_root)
            return ToolResponse(
                success=True,
                message=f"Documentation status: {report.summary}",
                data={
                    "projectPath": str(project_path),
                    "workspaceRoot": str(workspace_root),
                    "projectName": config.project_name if config else None,
                    "initialized": True,
                    "language": _language_payload(strategy),
                    "availableLanguages": [
                        {"code": info.code, "name": info.name, "nativeName": info.native_name}
                        for info in self.provider.get_available_languages()
                    ],
                    "format": _format_payload(fmt),
                    "arc42TemplateReference": dict(ARC42_REFERENCE),
                    "sections": {status.section: _section_payload(status) for status in report.sections},
                    "overallCompleteness": report.overall_completeness,
                    "lastModified": report.last_modified,
                    "sectionsWithContent": report.sections_with_content,
                    "summary": report.summary,
                },
                next_steps=report.next_steps,
            )

        return self._guard("check status", _run)

    def get_section(self, section: str, target_folder: Optional[str] = None) -> ToolResponse:
        def _run() -> ToolResponse:
            _, workspace_root = self.settings.resolve(target_folder)
            section_id = coerce_section(section)
            self._require_workspace(workspace_root)
            content = self.toolkit.accessor.read(section_id, workspace_root)
            title = self._workspace_title(section_id, workspace_root)
            return ToolResponse(
                success=True,
                message=f"Section {title} retrieved successfully",
                data={
                    "section": section_id,
                    "sectionTitle": title,
                    "content": content.content,
                    "format": content.format,
                    "metadata": {
                        "path": str(content.path),
                        "lastModified": content.last_modified,
                        "wordCount": content.word_count,
                        "size": content.size,
                    },
                },
                next_steps=[
                    "Modify this content with: arc42docs update",
                    "Check status with: arc42docs status",
                    "Generate a template for this section with: arc42docs template",
                ],
            )

        return self._guard("retrieve section", _run)

    def update_section(
        self,
        section: str,
        content: str,
        mode: str = "replace",
        target_folder: Optional[str] = None,
    ) -> ToolResponse:
        def _run() -> ToolResponse:
            _, workspace_root = self.settings.resolve(target_folder)
            section_id = coerce_section(section)
            if not isinstance(content, str) or not content:
                raise ValidationError("Section and content are required")
            self._require_workspace(workspace_root)
            result = self.toolkit.accessor.write(section_id, content, mode, workspace_root)
            title = self._workspace_title(section_id, workspace_root)
            return ToolResponse(
                success=True,
                message=f"Section {title} updated successfully",
                data={
                    "section": result.section,
                    "sectionTitle": title,
                    "path": str(result.path),
                    "format": result.format,
                    "wordCount": result.word_count,
                    "mode": result.mode,
                },
                next_steps=[
                    "Check progress with: arc42docs status",
                    "Continue with the next section if needed",
                    "Review the updated content",
                ],
            )

        return self._guard("update section", _run)

    def generate_template(
        self,
        section: str,
        language: Optional[str] = None,
        output_format: Optional[str] = None,
    ) -> ToolResponse:
        def _run() -> ToolResponse:
            section_id = coerce_section(section)
            strategy = self.provider.require_language(language)
            fmt = self.provider.require_format(output_format)
            content = strategy.template(section_id, fmt)
            metadata = self.provider.get_section_metadata(section_id, strategy.code)
            return ToolResponse(
                success=True,
                message=f"Template for {metadata.title} generated",
                data={
                    "section": section_id,
                    "format": fmt.code,
                    "formatName": fmt.name,
                    "fileExtension": fmt.file_extension,
                    "content": content,
                    "metadata": {
                        "title": metadata.title,
                        "description": metadata.description,
                        "languageCode": metadata.language_code,
                    },
                },
                next_steps=[
                    "Review the template structure and guidance",
                    "Create content based on the template",
                    "Save your content with: arc42docs update",
                    "Check status with: arc42docs status",
                ],
            )

        return self._guard("generate template", _run)

    def _workspace_title(self, section: str, workspace_root: Path) -> str:
        language = self.provider.read_language_from_config(workspace_root)
        return self.provider.get_section_metadata(section, language).title

    @staticmethod
    def _require_workspace(workspace_root: Path) -> None:
        if not workspace_root.is_dir():
            raise NotInitializedError("arc42 workspace not initialized. Run arc42docs init first.")

    @staticmethod
    def _guard(action: str, run: Callable[[], ToolResponse]) -> ToolResponse:
        try:
            return run()
        except Arc42Error as exc:
            logger.debug("Failed to %s: %s", action, exc)
            return ToolResponse(success=False, message=str(exc), error=type(exc).__name__)
        except OSError as exc:
            logger.error("Failed to %s: %s", action, exc)
            return ToolResponse(
                success=False, message=f"Failed to {action}: {exc}", error=type(exc).__name__
            )
        except Exception as exc:
            logger.exception("Unexpected failure while trying to %s", action)
            return ToolResponse(
                success=False, message=f"Failed to {action}: {exc}", error=type(exc).__name__
            )


def _language_payload(strategy: LanguageStrategy) -> Dict[str, str]:
    return {"code": strategy.code, "name": strategy.name, "nativeName": strategy.native_name}


def _format_payload(fmt: OutputFormat) -> Dict[str, str]:
    return {"code": fmt.code, "name": fmt.name, "extension": fmt.file_extension}


def _section_payload(status: SectionStatus) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "exists": status.exists,
        "wordCount": status.word_count,
        "completeness": status.completeness,
        "metadata": {
            "title": status.metadata.title,
            "description": status.metadata.description,
        },
    }
    if status.exists:
        payload.update(
            {
                "path": str(status.path),
                "lastModified": status.last_modified,
                "format": status.format,
            }
        )
    return payload


__all__ = ["Arc42Tools", "ToolResponse", "Toolkit", "build_toolkit"]
