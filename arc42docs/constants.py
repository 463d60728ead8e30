"""Shared constants for arc42 sections, defaults, and template provenance."""

from __future__ import annotations

from typing import Any

from .errors import ValidationError
from .models import SectionInfo

ARC42_SECTIONS: tuple[str, ...] = (
    "01_introduction_and_goals",
    "02_architecture_constraints",
    "03_context_and_scope",
    "04_solution_strategy",
    "05_building_block_view",
    "06_runtime_view",
    "07_deployment_view",
    "08_concepts",
    "09_architecture_decisions",
    "10_quality_requirements",
    "11_technical_risks",
    "12_glossary",
)

_DEFAULT_TITLES: dict[str, str] = {
    "01_introduction_and_goals": "Introduction and Goals",
    "02_architecture_constraints": "Architecture Constraints",
    "03_context_and_scope": "Context and Scope",
    "04_solution_strategy": "Solution Strategy",
    "05_building_block_view": "Building Block View",
    "06_runtime_view": "Runtime View",
    "07_deployment_view": "Deployment View",
    "08_concepts": "Cross-cutting Concepts",
    "09_architecture_decisions": "Architecture Decisions",
    "10_quality_requirements": "Quality Requirements",
    "11_technical_risks": "Risks and Technical Debt",
    "12_glossary": "Glossary",
}

_DEFAULT_DESCRIPTIONS: dict[str, str] = {
    "01_introduction_and_goals": "Requirements overview, quality goals, and stakeholders",
    "02_architecture_constraints": "Technical and organizational constraints",
    "03_context_and_scope": "Business and technical context, external interfaces",
    "04_solution_strategy": "Fundamental solution decisions and strategies",
    "05_building_block_view": "Static decomposition of the system",
    "06_runtime_view": "Dynamic behavior and key scenarios",
    "07_deployment_view": "Infrastructure and deployment",
    "08_concepts": "Overall, principal regulations and solution approaches",
    "09_architecture_decisions": "Important, expensive, critical, or risky decisions",
    "10_quality_requirements": "Quality tree and quality scenarios",
    "11_technical_risks": "Known problems, risks, and technical debt",
    "12_glossary": "Important domain and technical terms",
}

SECTION_METADATA: dict[str, SectionInfo] = {
    name: SectionInfo(
        name=name,
        title=_DEFAULT_TITLES[name],
        description=_DEFAULT_DESCRIPTIONS[name],
        order=index,
    )
    for index, name in enumerate(ARC42_SECTIONS, start=1)
}

DEFAULT_LANGUAGE = "EN"
DEFAULT_FORMAT = "asciidoc"
DEFAULT_WORKSPACE_DIR = "arc42-docs"
CONFIG_FILENAME = "config.yaml"
SECTIONS_DIR = "sections"
IMAGES_DIR = "images"
DOCUMENT_BASENAME = "arc42-documentation"
DOCUMENT_VERSION = "1.0.0"

# A section counts as "having content" once it is past half of the completeness scale.
CONTENT_THRESHOLD = 50

ARC42_REFERENCE: dict[str, str] = {
    "version": "9.0-EN",
    "date": "July 2025",
    "commit": "b29e08928644af7ae49f51d729d14313db0d934c",
    "source": "https://github.com/arc42/arc42-template",
}


def coerce_section(value: Any) -> str:
    """Return the section id for ``value`` or raise ``ValidationError``."""
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in SECTION_METADATA:
            return candidate
    valid = ", ".join(ARC42_SECTIONS)
    raise ValidationError(f"Unknown section {value!r}. Valid sections: {valid}")


__all__ = [
    "ARC42_REFERENCE",
    "ARC42_SECTIONS",
    "CONFIG_FILENAME",
    "CONTENT_THRESHOLD",
    "DEFAULT_FORMAT",
    "DEFAULT_LANGUAGE",
    "DEFAULT_WORKSPACE_DIR",
    "DOCUMENT_BASENAME",
    "DOCUMENT_VERSION",
    "IMAGES_DIR",
    "SECTION_METADATA",
    "SECTIONS_DIR",
    "coerce_section",
]
