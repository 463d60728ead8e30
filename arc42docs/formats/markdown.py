"""GitHub Flavored Markdown output format."""

from __future__ import annotations

from typing import Sequence

from .base import OutputFormat


class MarkdownFormat(OutputFormat):
    """Renders primitives as GitHub Flavored Markdown."""

    code = "markdown"
    name = "Markdown"
    file_extension = ".md"

    @property
    def heading_marker(self) -> str:
        return "#"

    def bold(self, text: str) -> str:
        return f"**{text}**"

    def italic(self, text: str) -> str:
        return f"*{text}*"

    def code_block(self, code: str, language: str | None = None) -> str:
        return f"```{language or ''}\n{code}\n```"

    def unordered_list(self, items: Sequence[str]) -> str:
        return "\n".join(f"- {item}" for item in items)

    def ordered_list(self, items: Sequence[str]) -> str:
        return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))

    def link(self, text: str, url: str) -> str:
        return f"[{text}]({url})"

    def image(self, alt: str, url: str) -> str:
        return f"![{alt}]({url})"

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        if not headers:
            return ""
        lines = [
            "| " + " | ".join(headers) + " |",
            "| " + " | ".join("---" for _ in headers) + " |",
        ]
        lines.extend("| " + " | ".join(row) + " |" for row in rows)
        return "\n".join(lines)

    def blockquote(self, text: str) -> str:
        return "\n".join(f"> {line}" for line in text.split("\n"))

    def horizontal_rule(self) -> str:
        return "---"

    def anchor(self, anchor_id: str) -> str:
        # Markdown derives anchors from headings.
        return ""

    def comment(self, text: str) -> str:
        return f"<!-- {text} -->"


__all__ = ["MarkdownFormat"]
