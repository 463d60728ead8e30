"""Bundled language catalogs, in the order they are registered."""

from __future__ import annotations

from typing import Tuple

from ..base import LanguageCatalog
from . import cz, de, en, es, fr, it, nl, pt, ru, ukr, zh

FALLBACK_CATALOG: LanguageCatalog = en.CATALOG

BUILTIN_CATALOGS: Tuple[LanguageCatalog, ...] = (
    en.CATALOG,
    de.CATALOG,
    cz.CATALOG,
    es.CATALOG,
    fr.CATALOG,
    it.CATALOG,
    nl.CATALOG,
    pt.CATALOG,
    ru.CATALOG,
    ukr.CATALOG,
    zh.CATALOG,
)

__all__ = ["BUILTIN_CATALOGS", "FALLBACK_CATALOG"]
