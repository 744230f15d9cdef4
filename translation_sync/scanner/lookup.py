"""
Localization lookups

The host application's "what does this key resolve to in locale X" oracle.
A key whose resolved value equals the key text has no translation.
"""

from __future__ import annotations

import abc
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..catalogs.base import BaseCatalog

logger = logging.getLogger(__name__)

__all__ = ["BaseLookup", "StaticLookup", "CatalogLookup"]


class BaseLookup(abc.ABC):
    @abc.abstractmethod
    async def resolve(self, key: str, locale: str) -> str:
        """Value of *key* in *locale*; the key itself when untranslated."""

    def clear(self) -> None:
        """Drop anything cached from earlier passes."""


class StaticLookup(BaseLookup):
    """In-memory ``{locale: {key: value}}`` translations."""

    def __init__(self, translations: Optional[Mapping[str, Mapping[str, str]]] = None):
        self.translations = {
            locale: dict(values) for locale, values in (translations or {}).items()
        }

    async def resolve(self, key: str, locale: str) -> str:
        value = self.translations.get(locale, {}).get(key)
        return value if isinstance(value, str) else key


class CatalogLookup(BaseLookup):
    """Resolves against the catalogs persisted under *lang_dir*.

    The configured format is consulted first, then the other one. Catalogs are
    cached per locale for the lifetime of this lookup.
    """

    def __init__(
        self,
        lang_dir: Union[str, Path],
        file_format: str = "flat",
        group: str = "messages",
    ):
        self.lang_dir = Path(lang_dir)
        self.group = group
        formats = BaseCatalog.get_supported_formats()
        if file_format in formats:
            formats.remove(file_format)
            formats.insert(0, file_format)
        self.formats = formats
        self._cache: Dict[str, Dict[str, Any]] = {}

    async def _entries(self, locale: str) -> Dict[str, Any]:
        if locale not in self._cache:
            merged: Dict[str, Any] = {}
            # Later formats must not override the preferred one.
            for file_format in reversed(self.formats):
                catalog_class = BaseCatalog.get_catalog_by_format(file_format)
                catalog = catalog_class(self.lang_dir, locale, group=self.group)
                merged.update(await catalog.load())
            self._cache[locale] = merged
            logger.debug(f"Loaded {len(merged)} entries for locale {locale}")
        return self._cache[locale]

    async def resolve(self, key: str, locale: str) -> str:
        value = (await self._entries(locale)).get(key)
        return value if isinstance(value, str) else key

    def clear(self) -> None:
        self._cache.clear()
