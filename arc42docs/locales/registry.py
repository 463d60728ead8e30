"""Registry and factory for language strategies."""

from __future__ import annotations

from typing import Any, List, Optional

from ..constants import DEFAULT_LANGUAGE
from ..errors import ConfigurationError
from ..logging import get_logger
from ..registry import StrategyRegistry
from .base import LanguageStrategy


class LanguageRegistry(StrategyRegistry[LanguageStrategy]):
    """Stores language strategies under trimmed, upper-cased codes."""

    kind = "Language code"
    plural = "languages"
    default_code = DEFAULT_LANGUAGE

    def normalize_code(self, code: str) -> str:
        return code.strip().upper()


class LanguageFactory:
    """Turns language codes into strategies, falling back to English when asked to."""

    def __init__(self, registry: LanguageRegistry) -> None:
        self.registry = registry
        self.logger = get_logger("locales")

    def create(self, code: str) -> LanguageStrategy:
        return self.registry.get_or_raise(code)

    def create_with_fallback(self, code: Any = None) -> LanguageStrategy:
        if isinstance(code, str) and code.strip():
            strategy = self.registry.get(code)
            if strategy is not None:
                return strategy
            default = self._default_or_raise(code)
            self.logger.warning(
                "Language %r is not registered. Falling back to %s. Available languages: %s",
                code,
                default.code,
                ", ".join(self.available_codes()),
            )
            return default
        return self._default_or_raise(code)

    def get_default(self) -> LanguageStrategy:
        return self._default_or_raise(None)

    def is_supported(self, code: Any) -> bool:
        return isinstance(code, str) and self.registry.is_supported(code)

    def available_codes(self) -> List[str]:
        return self.registry.available_codes()

    def _default_or_raise(self, requested: Optional[Any]) -> LanguageStrategy:
        default = self.registry.get_default()
        if default is None:
            available = ", ".join(self.available_codes()) or "none"
            raise ConfigurationError(
                f"Language {requested!r} cannot be resolved and the default language "
                f'"{DEFAULT_LANGUAGE}" is not registered. Available languages: {available}'
            )
        return default


__all__ = ["LanguageFactory", "LanguageRegistry"]
