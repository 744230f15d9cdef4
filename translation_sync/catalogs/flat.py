from __future__ import annotations

from pathlib import Path

from .base import BaseCatalog


class FlatCatalog(BaseCatalog):
    """Single JSON object per locale: ``<lang_dir>/<locale>.json``."""

    format_name = "flat"

    @property
    def path(self) -> Path:
        return self.lang_dir / f"{self.locale}.json"
