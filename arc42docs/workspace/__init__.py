"""Workspace initialization, section access, and status reporting."""

from .accessor import SectionAccessor, WRITE_MODES, count_words, read_section_text
from .initializer import WorkspaceInitializer
from .status import StatusCalculator

__all__ = [
    "SectionAccessor",
    "StatusCalculator",
    "WRITE_MODES",
    "WorkspaceInitializer",
    "count_words",
    "read_section_text",
]
