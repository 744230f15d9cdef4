from __future__ import annotations

from pathlib import Path

from .base import BaseCatalog


class ScopedCatalog(BaseCatalog):
    """Group file inside a locale directory: ``<lang_dir>/<locale>/<group>.json``.

    Holds the same key/value content as :class:`FlatCatalog`; only the
    location differs.
    """

    format_name = "scoped"

    @property
    def path(self) -> Path:
        return self.lang_dir / self.locale / f"{self.group}.json"
