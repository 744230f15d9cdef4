"""
Catalog writer

Read-merge-rewrite of per-locale catalogs. Each call loads the catalog, applies
the change and rewrites the whole file; nothing is cached between calls. Two
runs writing the same locale at the same time race and the last writer wins.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .base import BaseCatalog

logger = logging.getLogger(__name__)


class CatalogWriter:
    """Merges entries into per-locale catalogs of one file format."""

    def __init__(
        self,
        lang_dir: Union[str, Path],
        file_format: str = "flat",
        group: str = "messages",
    ):
        self.lang_dir = Path(lang_dir)
        self.group = group
        # Raises UnsupportedFormatError for unknown formats.
        self.catalog_class = BaseCatalog.get_catalog_by_format(file_format)
        self.file_format = self.catalog_class.format_name

    def catalog_for(self, locale: str, file_format: Optional[str] = None) -> BaseCatalog:
        catalog_class = (
            BaseCatalog.get_catalog_by_format(file_format)
            if file_format
            else self.catalog_class
        )
        return catalog_class(self.lang_dir, locale, group=self.group)

    async def upsert(self, locale: str, key: str, value: str) -> None:
        """Insert or overwrite *key* in the catalog of *locale*."""
        catalog = self.catalog_for(locale)
        entries = await catalog.load()
        previous = entries.get(key)
        entries[key] = value
        await catalog.dump(entries)

        if previous is None:
            logger.debug(f"[{locale}] added '{key}'")
        elif previous != value:
            logger.debug(f"[{locale}] updated '{key}'")

    async def upsert_many(self, locale: str, values: Mapping[str, str]) -> None:
        """Same as repeated :py:meth:`upsert`, with a single rewrite."""
        if not values:
            return
        catalog = self.catalog_for(locale)
        entries = await catalog.load()
        entries.update(values)
        await catalog.dump(entries)

    async def read(self, locale: str) -> Dict[str, Any]:
        return await self.catalog_for(locale).load()

    async def create_empty(self, locale: str, force: bool = False) -> bool:
        """Create an empty catalog; existing files are kept unless *force*.

        Returns:
            True when a file was written.
        """
        catalog = self.catalog_for(locale)
        if catalog.exists() and not force:
            logger.info(f"Skipped existing catalog for {locale}: {catalog.path}")
            return False

        await catalog.dump({})
        logger.info(f"Created catalog for {locale}: {catalog.path}")
        return True

    async def convert(self, locale: str, target_format: str) -> Path:
        """Rewrite the catalog of *locale* in *target_format*.

        The source file is left in place. Returns the path written.
        """
        entries = await self.read(locale)
        target = self.catalog_for(locale, target_format)
        await target.dump(entries)
        logger.info(
            f"Converted {locale} catalog ({self.file_format} -> "
            f"{target.format_name}): {len(entries)} entries"
        )
        return target.path
