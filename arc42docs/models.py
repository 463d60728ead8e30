"""Core data models shared across arc42docs components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class SectionInfo:
    """Immutable default metadata for one of the twelve arc42 sections."""

    name: str
    title: str
    description: str
    order: int


@dataclass(frozen=True)
class LanguageInfo:
    """Display information for a registered language."""

    code: str
    name: str
    native_name: str


@dataclass
class SectionMetadata:
    """Localized title and description for a section."""

    section: str
    title: str
    description: str
    language_code: str


@dataclass
class SectionContent:
    """Content of a section file as read from disk."""

    section: str
    content: str
    format: str
    path: Path
    last_modified: str
    word_count: int
    size: int


@dataclass
class SectionWriteResult:
    """Outcome of writing a section file."""

    section: str
    format: str
    path: Path
    word_count: int
    mode: str


@dataclass
class SectionStatus:
    """Status of a single section file inside a workspace."""

    section: str
    exists: bool
    word_count: int
    completeness: int
    metadata: SectionMetadata
    path: Optional[Path] = None
    format: Optional[str] = None
    last_modified: Optional[str] = None


@dataclass
class StatusReport:
    """Aggregated completeness report for a workspace."""

    sections: List[SectionStatus]
    overall_completeness: int
    last_modified: Optional[str]
    sections_with_content: int
    summary: str
    next_steps: List[str] = field(default_factory=list)


@dataclass
class InitResult:
    """Result of a workspace initialization."""

    workspace_root: Path
    project_name: str
    language: str
    format: str
    sections_created: int
    config: Dict[str, Any] = field(default_factory=dict)
