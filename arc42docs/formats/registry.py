"""Registry and factory for output format strategies."""

from __future__ import annotations

from typing import List, Optional

from ..constants import DEFAULT_FORMAT
from ..errors import ConfigurationError
from ..logging import get_logger
from ..registry import StrategyRegistry
from .base import FORMAT_ALIASES, OutputFormat, normalize_format_code, resolve_format_alias


class OutputFormatRegistry(StrategyRegistry[OutputFormat]):
    """Stores format strategies under lower-cased codes."""

    kind = "Output format"
    plural = "formats"
    default_code = DEFAULT_FORMAT

    def normalize_code(self, code: str) -> str:
        return code.strip().lower()


class OutputFormatFactory:
    """Resolves format codes and aliases to strategies, with fallback to the default."""

    def __init__(self, registry: OutputFormatRegistry) -> None:
        self.registry = registry
        self.logger = get_logger("formats")

    def normalize_code(self, code: str) -> str:
        return normalize_format_code(code).strip().lower()

    def create(self, code: str) -> OutputFormat:
        return self.registry.get_or_raise(self.normalize_code(code))

    def create_with_fallback(self, code: Optional[str]) -> OutputFormat:
        if isinstance(code, str) and code.strip():
            strategy = self.registry.get(self.normalize_code(code))
            if strategy is not None:
                return strategy
            default = self._default_or_raise(code)
            self.logger.warning(
                "Unknown output format %r. Falling back to %s. Available formats: %s",
                code,
                default.name,
                ", ".join(self.available_codes()),
            )
            return default
        return self._default_or_raise(code)

    def get_default(self) -> OutputFormat:
        return self._default_or_raise(None)

    def is_supported(self, code: str) -> bool:
        return isinstance(code, str) and self.registry.is_supported(self.normalize_code(code))

    def available_codes(self) -> List[str]:
        return self.registry.available_codes()

    def default_code(self) -> str:
        return DEFAULT_FORMAT

    def all_aliases(self) -> List[str]:
        return list(FORMAT_ALIASES)

    def resolve_alias(self, code: str) -> Optional[str]:
        return resolve_format_alias(code)

    def _default_or_raise(self, requested: Optional[str]) -> OutputFormat:
        default = self.registry.get_default()
        if default is None:
            available = ", ".join(self.available_codes()) or "none"
            raise ConfigurationError(
                f"Output format {requested!r} is not supported and the default format "
                f'"{DEFAULT_FORMAT}" is not registered. Available formats: {available}'
            )
        return default


__all__ = ["OutputFormatFactory", "OutputFormatRegistry"]
