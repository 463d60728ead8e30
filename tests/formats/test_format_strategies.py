"""Rendering primitives of the Markdown and AsciiDoc strategies."""

from __future__ import annotations

import pytest

from arc42docs.formats import AsciiDocFormat, MarkdownFormat


@pytest.fixture
def markdown() -> MarkdownFormat:
    return MarkdownFormat()


@pytest.fixture
def asciidoc() -> AsciiDocFormat:
    return AsciiDocFormat()


def test_markdown_primitives(markdown: MarkdownFormat) -> None:
    assert markdown.heading("Title", 2) == "## Title"
    assert markdown.bold("x") == "**x**"
    assert markdown.italic("x") == "*x*"
    assert markdown.inline_code("cmd") == "`cmd`"
    assert markdown.link("arc42", "https://arc42.org") == "[arc42](https://arc42.org)"
    assert markdown.image("diagram", "images/c.png") == "![diagram](images/c.png)"
    assert markdown.code_block("print()", "python") == "```python\nprint()\n```"
    assert markdown.code_block("ls") == "```\nls\n```"
    assert markdown.unordered_list(["a", "b"]) == "- a\n- b"
    assert markdown.ordered_list(["a", "b"]) == "1. a\n2. b"
    assert markdown.blockquote("one\ntwo") == "> one\n> two"
    assert markdown.horizontal_rule() == "---"
    assert markdown.anchor("intro") == ""
    assert markdown.comment("hidden") == "<!-- hidden -->"


def test_asciidoc_primitives(asciidoc: AsciiDocFormat) -> None:
    assert asciidoc.heading("Title", 2) == "== Title"
    assert asciidoc.bold("x") == "*x*"
    assert asciidoc.italic("x") == "_x_"
    assert asciidoc.link("arc42", "https://arc42.org") == "link:https://arc42.org[arc42]"
    assert asciidoc.image("diagram", "images/c.png") == "image::images/c.png[diagram]"
    assert asciidoc.code_block("ls", "bash") == "[source,bash]\n----\nls\n----"
    assert asciidoc.unordered_list(["a", "b"]) == "* a\n* b"
    assert asciidoc.ordered_list(["a", "b"]) == ". a\n. b"
    assert asciidoc.blockquote("quote") == "[quote]\n____\nquote\n____"
    assert asciidoc.horizontal_rule() == "'''"
    assert asciidoc.anchor("intro") == "[[intro]]"
    assert asciidoc.comment("hidden") == "// hidden"


@pytest.mark.parametrize("level, expected", [(0, "# T"), (1, "# T"), (6, "###### T"), (9, "###### T")])
def test_heading_level_is_clamped(markdown: MarkdownFormat, level: int, expected: str) -> None:
    assert markdown.heading("T", level) == expected


def test_tables(markdown: MarkdownFormat, asciidoc: AsciiDocFormat) -> None:
    headers = ["Role", "Contact"]
    rows = [["Owner", "alice@example.com"]]

    assert markdown.table(headers, rows) == (
        "| Role | Contact |\n| --- | --- |\n| Owner | alice@example.com |"
    )
    assert asciidoc.table(headers, rows) == (
        '[cols="1,1", options="header"]\n|===\n| Role | Contact\n\n| Owner | alice@example.com\n|==='
    )
    assert markdown.table([], rows) == ""
    assert asciidoc.table([], rows) == ""


def test_filename_conventions(markdown: MarkdownFormat, asciidoc: AsciiDocFormat) -> None:
    assert markdown.section_filename("12_glossary") == "12_glossary.md"
    assert markdown.readme_filename() == "README.md"
    assert markdown.document_filename("arc42-documentation") == "arc42-documentation.md"
    assert asciidoc.section_filename("12_glossary") == "12_glossary.adoc"
    assert asciidoc.readme_filename() == "README.adoc"
