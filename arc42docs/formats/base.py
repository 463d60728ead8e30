"""Base class and code normalization for output format strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

SUPPORTED_FORMAT_CODES: tuple[str, ...] = ("markdown", "asciidoc")

FORMAT_ALIASES: dict[str, str] = {
    "md": "markdown",
    "markdown": "markdown",
    "mdown": "markdown",
    "mkd": "markdown",
    "adoc": "asciidoc",
    "asciidoc": "asciidoc",
    "ascii": "asciidoc",
    "asciidoctor": "asciidoc",
    "asc": "asciidoc",
}


def normalize_format_code(code: str) -> str:
    """Resolve aliases case-insensitively; unrecognized input is returned unchanged."""
    return FORMAT_ALIASES.get(code.strip().lower(), code)


def resolve_format_alias(code: str) -> Optional[str]:
    """Return the canonical format for ``code`` or None when it is not recognized."""
    return FORMAT_ALIASES.get(code.strip().lower())


class OutputFormat(ABC):
    """Contract for format strategies that render text primitives and filenames."""

    code: str
    name: str
    file_extension: str

    def heading(self, text: str, level: int) -> str:
        clamped = max(1, min(6, level))
        return f"{self.heading_marker * clamped} {text}"

    @property
    @abstractmethod
    def heading_marker(self) -> str:
        """Character repeated once per heading level."""

    @abstractmethod
    def bold(self, text: str) -> str:
        """Return ``text`` rendered bold."""

    @abstractmethod
    def italic(self, text: str) -> str:
        """Return ``text`` rendered italic."""

    @abstractmethod
    def code_block(self, code: str, language: str | None = None) -> str:
        """Return a fenced source block."""

    def inline_code(self, text: str) -> str:
        return f"`{text}`"

    @abstractmethod
    def unordered_list(self, items: Sequence[str]) -> str:
        """Return a bulleted list."""

    @abstractmethod
    def ordered_list(self, items: Sequence[str]) -> str:
        """Return a numbered list."""

    @abstractmethod
    def link(self, text: str, url: str) -> str:
        """Return a hyperlink."""

    @abstractmethod
    def image(self, alt: str, url: str) -> str:
        """Return an image reference."""

    @abstractmethod
    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        """Return a table; empty headers produce an empty string."""

    @abstractmethod
    def blockquote(self, text: str) -> str:
        """Return a quote block."""

    @abstractmethod
    def horizontal_rule(self) -> str:
        """Return a thematic break."""

    @abstractmethod
    def anchor(self, anchor_id: str) -> str:
        """Return an explicit anchor, or an empty string when headings imply one."""

    @abstractmethod
    def comment(self, text: str) -> str:
        """Return a single-line comment invisible in rendered output."""

    def readme_filename(self) -> str:
        return f"README{self.file_extension}"

    def section_filename(self, section: str) -> str:
        return f"{section}{self.file_extension}"

    def document_filename(self, basename: str) -> str:
        return f"{basename}{self.file_extension}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r})"


__all__ = [
    "FORMAT_ALIASES",
    "OutputFormat",
    "SUPPORTED_FORMAT_CODES",
    "normalize_format_code",
    "resolve_format_alias",
]
