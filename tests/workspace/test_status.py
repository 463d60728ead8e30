"""Completeness scoring and status aggregation."""

from __future__ import annotations

import os
import time

import pytest

from arc42docs.constants import ARC42_SECTIONS
from arc42docs.locales import LanguageFactory, build_language_registry
from arc42docs.locales.provider import LocalizedTemplateProvider
from arc42docs.workspace import SectionAccessor, StatusCalculator
from arc42docs.workspace.accessor import mtime_iso
from arc42docs.workspace.status import completeness_for, overall_completeness
from tests._fixtures.workspace_builder import WorkspaceBuilder


@pytest.fixture
def calculator() -> StatusCalculator:
    provider = LocalizedTemplateProvider(LanguageFactory(build_language_registry()))
    return StatusCalculator(provider, SectionAccessor(provider))


def _by_section(report):
    return {status.section: status for status in report.sections}


def test_five_words_score_five(calculator: StatusCalculator, workspace_builder: WorkspaceBuilder) -> None:
    workspace_builder.section("02_architecture_constraints", "one two three four five")

    status = _by_section(calculator.calculate(workspace_builder.root))["02_architecture_constraints"]

    assert status.exists
    assert status.word_count == 5
    assert status.completeness == 5
    assert status.format == "asciidoc"


def test_completeness_is_capped(calculator: StatusCalculator, workspace_builder: WorkspaceBuilder) -> None:
    workspace_builder.section("05_building_block_view", WorkspaceBuilder.words(150), ".md")

    report = calculator.calculate(workspace_builder.root)
    status = _by_section(report)["05_building_block_view"]

    assert status.word_count == 150
    assert status.completeness == 100
    assert report.overall_completeness == 8
    assert report.sections_with_content == 1
    assert report.summary == "1/12 sections have content"


def test_missing_sections_count_as_zero(
    calculator: StatusCalculator, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.root.mkdir(parents=True)

    report = calculator.calculate(workspace_builder.root)

    assert all(not status.exists for status in report.sections)
    assert report.overall_completeness == 0
    assert report.last_modified is None
    assert report.sections_with_content == 0
    assert report.next_steps[0] == "Start with section 1: Introduction and Goals"


def test_section_titles_follow_workspace_language(
    calculator: StatusCalculator, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("language: DE\n")

    report = calculator.calculate(workspace_builder.root)

    assert report.sections[0].metadata.title == "Einführung und Ziele"
    assert report.sections[0].metadata.language_code == "DE"
    assert report.next_steps[0] == "Start with section 1: Einführung und Ziele"


def test_next_steps_name_the_sparsest_sections(
    calculator: StatusCalculator, workspace_builder: WorkspaceBuilder
) -> None:
    for section in (
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
    ):
        workspace_builder.section(section, WorkspaceBuilder.words(120))
    workspace_builder.section("11_technical_risks", WorkspaceBuilder.words(60))
    workspace_builder.section("12_glossary", WorkspaceBuilder.words(10))

    report = calculator.calculate(workspace_builder.root)

    assert report.sections_with_content == 11
    assert report.next_steps[:2] == [
        "Continue with section 12: Glossary (10% complete)",
        "Continue with section 11: Risks and Technical Debt (60% complete)",
    ]
    assert report.next_steps[-1].startswith("Generate templates for sparse sections")
    assert report.last_modified is not None


def test_complete_workspace(calculator: StatusCalculator, workspace_builder: WorkspaceBuilder) -> None:
    for section in ARC42_SECTIONS:
        workspace_builder.section(section, WorkspaceBuilder.words(100))

    report = calculator.calculate(workspace_builder.root)

    assert report.overall_completeness == 100
    assert report.summary == "12/12 sections have content"
    assert report.next_steps == ["All sections have content. Review and refine the documentation"]


@pytest.mark.parametrize("words", [0, 1, 5, 50, 99, 100, 101, 150, 10_000])
def test_completeness_equals_capped_word_count(words: int) -> None:
    assert completeness_for(words) == min(100, words)


def test_completeness_is_monotonic() -> None:
    values = [completeness_for(words) for words in range(0, 250)]
    assert values == sorted(values)


def test_overall_completeness_rounds_half_up() -> None:
    assert overall_completeness([50, 51]) == 51
    assert overall_completeness([1, 2]) == 2
    assert overall_completeness([0, 0, 1]) == 0
    assert overall_completeness([]) == 0


def test_last_modified_is_newest_section(
    calculator: StatusCalculator, workspace_builder: WorkspaceBuilder
) -> None:
    older = workspace_builder.section("01_introduction_and_goals", "goals")
    newer = workspace_builder.section("08_concepts", "concepts")
    past, future = time.time() - 3600, time.time() + 3600
    os.utime(older, (past, past))
    os.utime(newer, (future, future))

    report = calculator.calculate(workspace_builder.root)

    assert report.last_modified == mtime_iso(newer)
    assert report.last_modified != mtime_iso(older)
    assert _by_section(report)["08_concepts"].last_modified == mtime_iso(newer)
