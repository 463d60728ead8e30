"""Keyed strategy registry shared by the language and output format registries."""

from __future__ import annotations

from typing import Dict, Generic, List, Optional, TypeVar

from .errors import NotFoundError

T = TypeVar("T")


class StrategyRegistry(Generic[T]):
    """Stores strategies under a normalized code; registering a code again overwrites it.

    Subclasses decide how codes are normalized, which attribute of a strategy
    holds its code, and how the registry describes itself in error messages.
    """

    kind = "Strategy"
    plural = "strategies"
    default_code: Optional[str] = None

    def __init__(self) -> None:
        self._strategies: Dict[str, T] = {}

    def normalize_code(self, code: str) -> str:
        return code.strip()

    def code_of(self, strategy: T) -> str:
        return str(getattr(strategy, "code"))

    def register(self, strategy: T) -> "StrategyRegistry[T]":
        self._strategies[self.normalize_code(self.code_of(strategy))] = strategy
        return self

    def get(self, code: str) -> Optional[T]:
        if not isinstance(code, str):
            return None
        return self._strategies.get(self.normalize_code(code))

    def get_or_raise(self, code: str) -> T:
        strategy = self.get(code)
        if strategy is None:
            shown = self.normalize_code(code) if isinstance(code, str) else repr(code)
            available = ", ".join(self.available_codes()) or "none"
            raise NotFoundError(
                f'{self.kind} "{shown}" is not registered. '
                f"Available {self.plural}: {available}"
            )
        return strategy

    def get_all(self) -> List[T]:
        return list(self._strategies.values())

    def get_default(self) -> Optional[T]:
        if self.default_code is None:
            return None
        return self.get(self.default_code)

    def is_supported(self, code: str) -> bool:
        return self.get(code) is not None

    def available_codes(self) -> List[str]:
        return list(self._strategies)

    @property
    def size(self) -> int:
        return len(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_supported(code)

    def clear(self) -> "StrategyRegistry[T]":
        self._strategies.clear()
        return self


__all__ = ["StrategyRegistry"]
