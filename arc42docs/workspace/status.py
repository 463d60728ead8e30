"""Completeness report for an arc42 workspace."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional

from ..constants import ARC42_SECTIONS, CONTENT_THRESHOLD, SECTION_METADATA
from ..locales.provider import LocalizedTemplateProvider
from ..models import SectionStatus, StatusReport
from .accessor import SectionAccessor, count_words, mtime_iso, read_section_text

# A section reaches full completeness at this many words.
FULL_SECTION_WORDS = 100
_MAX_SUGGESTIONS = 3


class StatusCalculator:
    """Scores every section file and aggregates the results."""

    def __init__(self, provider: LocalizedTemplateProvider, accessor: SectionAccessor) -> None:
        self.provider = provider
        self.accessor = accessor

    def calculate(self, workspace_root: Path) -> StatusReport:
        language = self.provider.resolve_workspace_language(workspace_root)
        statuses: List[SectionStatus] = []
        latest: Optional[float] = None
        latest_path: Optional[Path] = None

        for section in ARC42_SECTIONS:
            metadata = self.provider.get_section_metadata(section, language.code)
            located = self.accessor.locate(section, workspace_root)
            if located is None:
                statuses.append(
                    SectionStatus(
                        section=section,
                        exists=False,
                        word_count=0,
                        completeness=0,
                        metadata=metadata,
                    )
                )
                continue

            path, fmt = located
            words = count_words(read_section_text(path))
            mtime = path.stat().st_mtime
            if latest is None or mtime > latest:
                latest, latest_path = mtime, path
            statuses.append(
                SectionStatus(
                    section=section,
                    exists=True,
                    word_count=words,
                    completeness=completeness_for(words),
                    metadata=metadata,
                    path=path,
                    format=fmt.code,
                    last_modified=mtime_iso(path),
                )
            )

        with_content = sum(1 for status in statuses if status.completeness > CONTENT_THRESHOLD)
        return StatusReport(
            sections=statuses,
            overall_completeness=overall_completeness(status.completeness for status in statuses),
            last_modified=mtime_iso(latest_path) if latest_path is not None else None,
            sections_with_content=with_content,
            summary=f"{with_content}/{len(ARC42_SECTIONS)} sections have content",
            next_steps=self._next_steps(statuses, with_content),
        )

    def _next_steps(self, statuses: List[SectionStatus], with_content: int) -> List[str]:
        if with_content == 0:
            first = statuses[0].metadata.title
            return [
                f"Start with section 1: {first}",
                "Generate a template with: arc42docs template 01_introduction_and_goals",
                "Add content with: arc42docs update 01_introduction_and_goals",
            ]
        pending = [status for status in statuses if status.completeness < 100]
        if not pending:
            return ["All sections have content. Review and refine the documentation"]
        pending.sort(key=lambda status: (status.completeness, SECTION_METADATA[status.section].order))
        steps = [
            f"Continue with section {SECTION_METADATA[status.section].order}: "
            f"{status.metadata.title} ({status.completeness}% complete)"
            for status in pending[:_MAX_SUGGESTIONS]
        ]
        steps.append("Generate templates for sparse sections with: arc42docs template <section>")
        return steps


def completeness_for(word_count: int) -> int:
    """Completeness percentage, capped at 100."""
    return max(0, min(100, word_count * 100 // FULL_SECTION_WORDS))


def overall_completeness(values) -> int:
    """Mean of the per-section values, rounded half up."""
    items = list(values)
    if not items:
        return 0
    return int(math.floor(sum(items) / len(items) + 0.5))


__all__ = ["FULL_SECTION_WORDS", "StatusCalculator", "completeness_for", "overall_completeness"]
