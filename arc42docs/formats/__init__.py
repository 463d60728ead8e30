"""Output format strategies, registry construction, and format detection helpers."""

from __future__ import annotations

from pathlib import PurePath
from typing import Optional

from .asciidoc import AsciiDocFormat
from .base import (
    FORMAT_ALIASES,
    OutputFormat,
    SUPPORTED_FORMAT_CODES,
    normalize_format_code,
    resolve_format_alias,
)
from .markdown import MarkdownFormat
from .registry import OutputFormatFactory, OutputFormatRegistry

_EXTENSION_FORMATS: dict[str, str] = {
    "md": "markdown",
    "markdown": "markdown",
    "adoc": "asciidoc",
    "asciidoc": "asciidoc",
    "asc": "asciidoc",
}


def build_format_registry() -> OutputFormatRegistry:
    """Return a registry populated with the built-in Markdown and AsciiDoc formats."""
    registry = OutputFormatRegistry()
    registry.register(MarkdownFormat()).register(AsciiDocFormat())
    return registry


def detect_format_from_extension(extension: str) -> Optional[str]:
    """Map a file extension (leading dot optional, any case) to a format code."""
    cleaned = extension.strip().lower()
    if cleaned.startswith("."):
        cleaned = cleaned[1:]
    if not cleaned:
        return None
    return _EXTENSION_FORMATS.get(cleaned)


def detect_format_from_filename(filename: str) -> Optional[str]:
    """Detect the format from the text after the last dot of a file's base name."""
    name = PurePath(filename.replace("\\", "/")).name
    index = name.rfind(".")
    # No dot at all, or a hidden file such as ".gitignore" with nothing after it.
    if index <= 0:
        return None
    return detect_format_from_extension(name[index + 1 :])


__all__ = [
    "AsciiDocFormat",
    "FORMAT_ALIASES",
    "MarkdownFormat",
    "OutputFormat",
    "OutputFormatFactory",
    "OutputFormatRegistry",
    "SUPPORTED_FORMAT_CODES",
    "build_format_registry",
    "detect_format_from_extension",
    "detect_format_from_filename",
    "normalize_format_code",
    "resolve_format_alias",
]
