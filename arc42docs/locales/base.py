"""Language strategy contract and the catalog-backed implementation."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..constants import (
    ARC42_REFERENCE,
    ARC42_SECTIONS,
    CONFIG_FILENAME,
    DEFAULT_WORKSPACE_DIR,
    DOCUMENT_BASENAME,
    IMAGES_DIR,
    SECTION_METADATA,
    SECTIONS_DIR,
)
from ..formats.base import OutputFormat
from ..models import LanguageInfo

_TEMPLATES_DIR = Path(__file__).with_name("templates")
_BLANK_RUN = re.compile(r"\n{3,}")

_RESOURCE_LINKS: Tuple[Tuple[str, str], ...] = (
    ("arc42 Website", "https://arc42.org/"),
    ("arc42 Documentation", "https://docs.arc42.org/"),
    ("arc42 Examples", "https://arc42.org/examples"),
)

TableSpec = Tuple[Sequence[str], Sequence[Sequence[str]]]


@dataclass(frozen=True)
class Guidance:
    """One guidance block of a section template: heading, purpose, and prompts."""

    heading: str
    purpose: str
    prompts: Sequence[str] = ()
    table: Optional[TableSpec] = None


@dataclass
class LanguageCatalog:
    """Static localized text for one language."""

    code: str
    name: str
    native_name: str
    titles: Mapping[str, str]
    descriptions: Mapping[str, str]
    guidance: Mapping[str, Sequence[Guidance]] = field(default_factory=dict)
    phrases: Mapping[str, Any] = field(default_factory=dict)


class LanguageStrategy(ABC):
    """Contract for languages that produce localized arc42 content."""

    code: str
    name: str
    native_name: str

    @abstractmethod
    def section_title(self, section: str) -> str:
        """Return the localized title of ``section``."""

    @abstractmethod
    def section_description(self, section: str) -> str:
        """Return the localized description of ``section``."""

    @abstractmethod
    def template(self, section: str, output_format: OutputFormat) -> str:
        """Return the full guidance template for ``section``."""

    @abstractmethod
    def workflow_guide(
        self, output_format: OutputFormat, languages: Sequence[LanguageInfo] = ()
    ) -> str:
        """Return the workflow guide, listing ``languages`` when given."""

    @abstractmethod
    def readme_content(self, project_name: Optional[str], output_format: OutputFormat) -> str:
        """Return README content for the workspace."""

    @abstractmethod
    def document_content(
        self, project_name: str, output_format: OutputFormat, *, version: str, date: str
    ) -> str:
        """Return the combined document that links every section file."""

    @abstractmethod
    def stub_content(self, section: str, output_format: OutputFormat) -> str:
        """Return the placeholder written for ``section`` at initialization."""

    @abstractmethod
    def phrase(self, key: str, **values: Any) -> Any:
        """Return a localized UI phrase, formatted with ``values`` when it is a string."""

    def info(self) -> LanguageInfo:
        return LanguageInfo(code=self.code, name=self.name, native_name=self.native_name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r})"


class CatalogLanguage(LanguageStrategy):
    """Language strategy backed by a ``LanguageCatalog`` and the shared Jinja2 templates.

    Entries missing from the catalog (guidance blocks, phrases) are taken from
    the fallback catalog, which is English for every bundled language.
    """

    def __init__(
        self,
        catalog: LanguageCatalog,
        *,
        fallback: Optional[LanguageCatalog] = None,
        environment: Optional[Environment] = None,
    ) -> None:
        self.catalog = catalog
        self.fallback = fallback
        self.code = catalog.code
        self.name = catalog.name
        self.native_name = catalog.native_name
        self._env = environment or template_environment()

    def section_title(self, section: str) -> str:
        return self._lookup("titles", section) or SECTION_METADATA[section].title

    def section_description(self, section: str) -> str:
        return self._lookup("descriptions", section) or SECTION_METADATA[section].description

    def template(self, section: str, output_format: OutputFormat) -> str:
        info = SECTION_METADATA[section]
        return self._render(
            "section.j2",
            fmt=output_format,
            number=info.order,
            title=self.section_title(section),
            description=self.section_description(section),
            guidance=self._guidance(section),
        )

    def workflow_guide(
        self, output_format: OutputFormat, languages: Sequence[LanguageInfo] = ()
    ) -> str:
        sections = [
            {
                "number": SECTION_METADATA[section].order,
                "title": self.section_title(section),
                "description": self.section_description(section),
                "topics": [block.heading for block in self._guidance(section)],
                "path": f"{SECTIONS_DIR}/{output_format.section_filename(section)}",
            }
            for section in ARC42_SECTIONS
        ]
        tools = [
            f"{output_format.inline_code(f'arc42docs {command}')} - {text}"
            for command, text in self.phrase("guide_tool_descriptions").items()
        ]
        return self._render(
            "workflow_guide.j2",
            fmt=output_format,
            sections=sections,
            languages=[[info.code, info.name, info.native_name] for info in languages],
            tools=tools,
            tree=_workspace_tree(output_format),
            resources=_resources(output_format),
        )

    def readme_content(self, project_name: Optional[str], output_format: OutputFormat) -> str:
        if project_name:
            title = self.phrase("readme_title", project=project_name)
            intro = self.phrase("readme_intro", project=project_name)
        else:
            title = self.phrase("readme_title_generic")
            intro = self.phrase("readme_intro_generic")
        section_items = [
            f"{output_format.bold(self.section_title(section))} - {self.section_description(section)}"
            for section in ARC42_SECTIONS
        ]
        structure = [
            f"{output_format.inline_code(SECTIONS_DIR + '/')} - {self.phrase('structure_sections')}",
            f"{output_format.inline_code(IMAGES_DIR + '/')} - {self.phrase('structure_images')}",
            f"{output_format.inline_code(output_format.document_filename(DOCUMENT_BASENAME))}"
            f" - {self.phrase('structure_document')}",
            f"{output_format.inline_code(CONFIG_FILENAME)} - {self.phrase('structure_config')}",
        ]
        return self._render(
            "readme.j2",
            fmt=output_format,
            title=title,
            intro=intro,
            structure=structure,
            section_items=section_items,
            resources=_resources(output_format),
        )

    def document_content(
        self, project_name: str, output_format: OutputFormat, *, version: str, date: str
    ) -> str:
        toc = [
            output_format.link(
                self.section_title(section),
                f"{SECTIONS_DIR}/{output_format.section_filename(section)}",
            )
            for section in ARC42_SECTIONS
        ]
        return self._render(
            "document.j2",
            fmt=output_format,
            title=self.phrase("readme_title", project=project_name),
            intro=self.phrase("document_intro", project=project_name),
            version=version,
            date=date,
            language=f"{self.native_name} ({self.code})",
            toc=toc,
        )

    def stub_content(self, section: str, output_format: OutputFormat) -> str:
        return self._render(
            "stub.j2",
            fmt=output_format,
            title=self.section_title(section),
            description=self.section_description(section),
        )

    def phrase(self, key: str, **values: Any) -> Any:
        value = self.catalog.phrases.get(key)
        if value is None and self.fallback is not None:
            value = self.fallback.phrases.get(key)
        if value is None:
            raise KeyError(f"Phrase {key!r} is not defined for language {self.code}")
        if isinstance(value, str) and values:
            return value.format(**values)
        return value

    def _phrases(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = dict(self.fallback.phrases) if self.fallback else {}
        merged.update(self.catalog.phrases)
        return merged

    def _guidance(self, section: str) -> Sequence[Guidance]:
        blocks = self.catalog.guidance.get(section)
        if blocks is None and self.fallback is not None:
            blocks = self.fallback.guidance.get(section)
        return blocks or ()

    def _lookup(self, attribute: str, section: str) -> Optional[str]:
        value = getattr(self.catalog, attribute).get(section)
        if value is None and self.fallback is not None:
            value = getattr(self.fallback, attribute).get(section)
        return value

    def _render(self, template_name: str, **context: Any) -> str:
        template = self._env.get_template(template_name)
        rendered = template.render(
            phrases=self._phrases(),
            reference=ARC42_REFERENCE,
            **context,
        )
        return tidy(rendered)


def _workspace_tree(output_format: OutputFormat) -> str:
    lines = [
        f"{DEFAULT_WORKSPACE_DIR}/",
        f"├── {CONFIG_FILENAME}",
        f"├── {output_format.readme_filename()}",
        f"├── {output_format.document_filename(DOCUMENT_BASENAME)}",
        f"├── {IMAGES_DIR}/",
        f"└── {SECTIONS_DIR}/",
    ]
    for index, section in enumerate(ARC42_SECTIONS):
        branch = "└──" if index == len(ARC42_SECTIONS) - 1 else "├──"
        lines.append(f"    {branch} {output_format.section_filename(section)}")
    return "\n".join(lines)


def _resources(output_format: OutputFormat) -> list[str]:
    return [output_format.link(text, url) for text, url in _RESOURCE_LINKS]


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    """Return the shared Jinja2 environment for the bundled templates."""
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def tidy(text: str) -> str:
    """Collapse runs of blank lines and end the text with exactly one newline."""
    normalized = text.replace("\r\n", "\n")
    lines = [line.rstrip() for line in normalized.split("\n")]
    collapsed = _BLANK_RUN.sub("\n\n", "\n".join(lines))
    return collapsed.strip("\n") + "\n"


__all__ = [
    "CatalogLanguage",
    "Guidance",
    "LanguageCatalog",
    "LanguageStrategy",
    "template_environment",
    "tidy",
]
