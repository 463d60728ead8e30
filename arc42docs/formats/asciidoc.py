"""Asciidoctor-compatible AsciiDoc output format (the default)."""

from __future__ import annotations

from typing import Sequence

from .base import OutputFormat


class AsciiDocFormat(OutputFormat):
    """Renders primitives as AsciiDoc."""

    code = "asciidoc"
    name = "AsciiDoc"
    file_extension = ".adoc"

    @property
    def heading_marker(self) -> str:
        return "="

    def bold(self, text: str) -> str:
        return f"*{text}*"

    def italic(self, text: str) -> str:
        return f"_{text}_"

    def code_block(self, code: str, language: str | None = None) -> str:
        attribute = f"[source,{language}]" if language else "[source]"
        return f"{attribute}\n----\n{code}\n----"

    def unordered_list(self, items: Sequence[str]) -> str:
        return "\n".join(f"* {item}" for item in items)

    def ordered_list(self, items: Sequence[str]) -> str:
        # AsciiDoc numbers "." items itself.
        return "\n".join(f". {item}" for item in items)

    def link(self, text: str, url: str) -> str:
        return f"link:{url}[{text}]"

    def image(self, alt: str, url: str) -> str:
        return f"image::{url}[{alt}]"

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        if not headers:
            return ""
        cols = ",".join("1" for _ in headers)
        lines = [f'[cols="{cols}", options="header"]', "|==="]
        lines.append(" ".join(f"| {header}" for header in headers))
        for row in rows:
            lines.append("")
            lines.append(" ".join(f"| {cell}" for cell in row))
        lines.append("|===")
        return "\n".join(lines)

    def blockquote(self, text: str) -> str:
        return f"[quote]\n____\n{text}\n____"

    def horizontal_rule(self) -> str:
        return "'''"

    def anchor(self, anchor_id: str) -> str:
        return f"[[{anchor_id}]]"

    def comment(self, text: str) -> str:
        return f"// {text}"


__all__ = ["AsciiDocFormat"]
