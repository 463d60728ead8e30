"""Localized template provider: combines language and format resolution with workspace config."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..config import read_workspace_config
from ..constants import coerce_section
from ..errors import ValidationError
from ..formats import OutputFormat, OutputFormatFactory, build_format_registry, resolve_format_alias
from ..models import LanguageInfo, SectionMetadata
from .base import LanguageStrategy
from .registry import LanguageFactory


class LocalizedTemplateProvider:
    """Answers "content X in language L and format F" and "which language does workspace W use".

    Missing or unknown languages and formats resolve to the defaults (English,
    AsciiDoc); reading a workspace's ``config.yaml`` never raises.
    """

    def __init__(
        self,
        language_factory: LanguageFactory,
        format_factory: OutputFormatFactory | None = None,
    ) -> None:
        self.language_factory = language_factory
        self.format_factory = format_factory or OutputFormatFactory(build_format_registry())

    def language(self, code: Optional[str] = None) -> LanguageStrategy:
        return self.language_factory.create_with_fallback(code)

    def output_format(self, code: Optional[str] = None) -> OutputFormat:
        return self.format_factory.create_with_fallback(code)

    def require_language(self, code: Optional[str]) -> LanguageStrategy:
        """Resolve an explicitly requested language; None selects the default."""
        factory = self.language_factory
        if code is None:
            return factory.get_default()
        if not factory.is_supported(code):
            available = ", ".join(factory.available_codes()) or "none"
            raise ValidationError(
                f'Language code "{code}" is not supported. Available languages: {available}'
            )
        return factory.create(code)

    def require_format(self, code: Optional[str]) -> OutputFormat:
        """Resolve an explicitly requested format or alias; None selects the default."""
        factory = self.format_factory
        if code is None:
            return factory.get_default()
        canonical = resolve_format_alias(code) if isinstance(code, str) else None
        if canonical is None or not factory.is_supported(canonical):
            raise ValidationError(
                f'Output format "{code}" is not supported. '
                f"Available formats: {', '.join(factory.available_codes())}. "
                f"Aliases: {', '.join(factory.all_aliases())}"
            )
        return factory.create(canonical)

    def get_template(
        self,
        section: str,
        language: Optional[str] = None,
        output_format: Optional[str] = None,
    ) -> str:
        section = coerce_section(section)
        return self.language(language).template(section, self.output_format(output_format))

    def get_section_metadata(self, section: str, language: Optional[str] = None) -> SectionMetadata:
        section = coerce_section(section)
        strategy = self.language(language)
        return SectionMetadata(
            section=section,
            title=strategy.section_title(section),
            description=strategy.section_description(section),
            language_code=strategy.code,
        )

    def get_workflow_guide(
        self, language: Optional[str] = None, output_format: Optional[str] = None
    ) -> str:
        return self.language(language).workflow_guide(
            self.output_format(output_format), self.get_available_languages()
        )

    def get_readme_content(
        self,
        project_name: Optional[str] = None,
        language: Optional[str] = None,
        output_format: Optional[str] = None,
    ) -> str:
        return self.language(language).readme_content(project_name, self.output_format(output_format))

    def get_available_languages(self) -> List[LanguageInfo]:
        return [strategy.info() for strategy in self.language_factory.registry.get_all()]

    def read_language_from_config(self, workspace_root: Path) -> Optional[str]:
        config = read_workspace_config(workspace_root)
        if config is None or not config.language or not config.language.strip():
            return None
        return config.language.strip().upper()

    def read_format_from_config(self, workspace_root: Path) -> Optional[str]:
        config = read_workspace_config(workspace_root)
        if config is None or not config.format:
            return None
        return resolve_format_alias(config.format)

    def resolve_workspace_language(self, workspace_root: Path) -> LanguageStrategy:
        return self.language(self.read_language_from_config(workspace_root))

    def resolve_workspace_format(self, workspace_root: Path) -> OutputFormat:
        return self.output_format(self.read_format_from_config(workspace_root))

    def get_template_with_config(
        self,
        section: str,
        workspace_root: Path,
        language_override: Optional[str] = None,
        output_format: Optional[str] = None,
    ) -> str:
        language = language_override or self.read_language_from_config(workspace_root)
        fmt = output_format or self.read_format_from_config(workspace_root)
        return self.get_template(section, language, fmt)

    def is_supported(self, code: Optional[str]) -> bool:
        return self.language_factory.is_supported(code)


__all__ = ["LocalizedTemplateProvider"]
