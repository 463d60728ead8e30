"""Format-aware reading and writing of section files."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional, Tuple

from ..constants import SECTIONS_DIR, coerce_section
from ..errors import NotFoundError, ValidationError
from ..formats import OutputFormat, detect_format_from_extension
from ..locales.provider import LocalizedTemplateProvider
from ..logging import get_logger
from ..models import SectionContent, SectionWriteResult

WRITE_MODES: Tuple[str, ...] = ("replace", "append")

# Extensions a section file may carry besides the canonical one of its format.
_EXTRA_EXTENSIONS: Tuple[str, ...] = (".markdown", ".asciidoc", ".asc")


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in ``text``."""
    return len(text.split())


def read_section_text(path: Path) -> str:
    """Decode a section file as UTF-8, substituting U+FFFD for undecodable bytes."""
    return path.read_text(encoding="utf-8", errors="replace")


def mtime_iso(path: Path) -> str:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc).isoformat()


class SectionAccessor:
    """Locates, reads, and writes ``sections/<id>.<ext>`` inside a workspace.

    Format precedence for a section: an existing file under any recognized
    extension, then the ``format`` recorded in config.yaml, then the default.
    When files exist under several extensions, the configured format wins.
    """

    def __init__(self, provider: LocalizedTemplateProvider) -> None:
        self.provider = provider
        self.logger = get_logger("workspace.accessor")

    def locate(self, section: str, workspace_root: Path) -> Optional[Tuple[Path, OutputFormat]]:
        """Return the existing file for ``section`` and its format, or None."""
        section = coerce_section(section)
        found = list(self._existing_files(section, workspace_root))
        if not found:
            return None
        configured = self.provider.read_format_from_config(workspace_root)
        for path, fmt in found:
            if fmt.code == configured:
                return path, fmt
        return found[0]

    def resolve_format(self, section: str, workspace_root: Path) -> OutputFormat:
        located = self.locate(section, workspace_root)
        if located is not None:
            return located[1]
        return self.provider.resolve_workspace_format(workspace_root)

    def section_path(self, section: str, workspace_root: Path, output_format: OutputFormat) -> Path:
        return workspace_root / SECTIONS_DIR / output_format.section_filename(section)

    def read(self, section: str, workspace_root: Path) -> SectionContent:
        section = coerce_section(section)
        located = self.locate(section, workspace_root)
        if located is None:
            raise NotFoundError(
                f"Section file not found: {section}. This section might not have been created yet."
            )
        path, fmt = located
        content = read_section_text(path)
        return SectionContent(
            section=section,
            content=content,
            format=fmt.code,
            path=path,
            last_modified=mtime_iso(path),
            word_count=count_words(content),
            size=path.stat().st_size,
        )

    def write(
        self,
        section: str,
        content: str,
        mode: str,
        workspace_root: Path,
    ) -> SectionWriteResult:
        section = coerce_section(section)
        normalized_mode = (mode or "replace").strip().lower()
        if normalized_mode not in WRITE_MODES:
            raise ValidationError(
                f"Unknown write mode {mode!r}. Valid modes: {', '.join(WRITE_MODES)}"
            )

        located = self.locate(section, workspace_root)
        if located is not None:
            path, fmt = located
        else:
            fmt = self.provider.resolve_workspace_format(workspace_root)
            path = self.section_path(section, workspace_root, fmt)

        final_content = content
        if normalized_mode == "append" and path.exists():
            final_content = read_section_text(path) + "\n\n" + content

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(final_content, encoding="utf-8")
        self.logger.debug("Wrote %s (%s, %s)", path, fmt.code, normalized_mode)

        return SectionWriteResult(
            section=section,
            format=fmt.code,
            path=path,
            word_count=count_words(final_content),
            mode=normalized_mode,
        )

    def _existing_files(
        self, section: str, workspace_root: Path
    ) -> Iterator[Tuple[Path, OutputFormat]]:
        sections_dir = workspace_root / SECTIONS_DIR
        if not sections_dir.is_dir():
            return
        registry = self.provider.format_factory.registry
        for fmt in registry.get_all():
            candidate = sections_dir / fmt.section_filename(section)
            if candidate.is_file():
                yield candidate, fmt
        for extension in _EXTRA_EXTENSIONS:
            code = detect_format_from_extension(extension)
            fmt = registry.get(code) if code else None
            candidate = sections_dir / f"{section}{extension}"
            if fmt is not None and candidate.is_file():
                yield candidate, fmt


__all__ = ["SectionAccessor", "WRITE_MODES", "count_words", "mtime_iso", "read_section_text"]
