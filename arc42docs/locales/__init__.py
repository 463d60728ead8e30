"""Language strategies, bundled catalogs, and registry construction."""

from __future__ import annotations

from importlib import metadata
from typing import Iterable, Sequence, Set

from .base import CatalogLanguage, Guidance, LanguageCatalog, LanguageStrategy
from .catalogs import BUILTIN_CATALOGS, FALLBACK_CATALOG
from .registry import LanguageFactory, LanguageRegistry

_ENTRY_POINT_GROUP = "arc42docs.languages"


def build_language_registry(enabled: Sequence[str] | None = None) -> LanguageRegistry:
    """Return a registry holding the bundled languages plus any installed plugins.

    Plugins are published under the ``arc42docs.languages`` entry point group and
    may point at a ``LanguageStrategy`` subclass, instance, factory, or a
    ``LanguageCatalog``. A plugin registered under an existing code replaces it.
    """

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {code.strip().upper() for code in enabled}

    registry = LanguageRegistry()

    def _add(strategy: LanguageStrategy) -> None:
        key = registry.normalize_code(strategy.code)
        if enabled_set is not None and key not in enabled_set:
            return
        registry.register(strategy)

    for catalog in BUILTIN_CATALOGS:
        fallback = None if catalog is FALLBACK_CATALOG else FALLBACK_CATALOG
        _add(CatalogLanguage(catalog, fallback=fallback))

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - plugin import failure
            raise RuntimeError(f"Failed to load language entry point '{entry.name}': {exc}") from exc
        _add(_coerce_language(loaded))

    if enabled_set:
        missing = ", ".join(sorted(code for code in enabled_set if code not in registry))
        if missing:
            raise ValueError(f"Unknown languages requested: {missing}")

    return registry


def _coerce_language(obj: object) -> LanguageStrategy:
    if isinstance(obj, LanguageStrategy):
        return obj
    if isinstance(obj, LanguageCatalog):
        return CatalogLanguage(obj, fallback=FALLBACK_CATALOG)
    if isinstance(obj, type) and issubclass(obj, LanguageStrategy):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, LanguageStrategy):
            return instance
    raise TypeError("Language entry point must be a LanguageStrategy, a factory, or a LanguageCatalog")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "CatalogLanguage",
    "Guidance",
    "LanguageCatalog",
    "LanguageFactory",
    "LanguageRegistry",
    "LanguageStrategy",
    "build_language_registry",
]
