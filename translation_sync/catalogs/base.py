from __future__ import annotations

import abc
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Type, Union

import aiofiles

from ..errors import CatalogFormatError, UnsupportedFormatError

logger = logging.getLogger(__name__)


class BaseCatalog(abc.ABC):
    """Persisted ``{key: translation}`` mapping for one locale.

    Every write re-serializes the whole mapping with keys sorted ascending;
    there is no partial update. Subclasses only decide where the file lives.
    """

    #: Value accepted in ``file_format``
    format_name: str = ""

    # Line comments some editors leave in JSON catalogs
    COMMENT_PATTERN = re.compile(r"^\s*//.*$|//.*$", re.MULTILINE)

    def __init__(self, lang_dir: Union[str, Path], locale: str, group: str = "messages"):
        self.lang_dir = Path(lang_dir)
        self.locale = locale
        self.group = group

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    @abc.abstractmethod
    def path(self) -> Path:
        """Location of the catalog file."""

    def exists(self) -> bool:
        return self.path.is_file()

    async def load(self) -> Dict[str, Any]:
        """Current entries, or an empty mapping when the file does not exist."""
        if not self.exists():
            return {}

        async with aiofiles.open(self.path, encoding="utf-8") as f:
            content = await f.read()

        if not content.strip():
            return {}
        return self._load_json_content(content)

    async def dump(self, data: Mapping[str, Any]) -> None:
        """Rewrite the whole file with *data*, keys sorted."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write(self.serialize(data))

    @staticmethod
    def serialize(data: Mapping[str, Any]) -> str:
        ordered = {key: data[key] for key in sorted(data)}
        return json.dumps(ordered, ensure_ascii=False, indent=4) + "\n"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _load_json_content(self, content: str) -> Dict[str, Any]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.info(f"Repairing JSON syntax in {self.path}")
            # trailing commas
            repaired = re.sub(r'("(?:\\?.)*?")|,\s*([]}])', r"\1\2", content)
            try:
                data = json.loads(repaired)
            except json.JSONDecodeError:
                try:
                    data = json.loads(self.COMMENT_PATTERN.sub("", repaired))
                except json.JSONDecodeError as e:
                    raise CatalogFormatError(f"{self.path}: invalid JSON: {e}")

        if not isinstance(data, dict):
            raise CatalogFormatError(
                f"{self.path}: expected an object, got {type(data).__name__}"
            )
        return data

    # ------------------------------------------------------------------
    # Format lookup
    # ------------------------------------------------------------------
    @staticmethod
    def get_catalog_by_format(file_format: str) -> Type["BaseCatalog"]:
        """
        Catalog class for *file_format*.

        Raises:
            UnsupportedFormatError: the format is unknown.
        """
        fmt = (file_format or "").strip().lower()

        if fmt == "flat":
            from .flat import FlatCatalog

            return FlatCatalog
        elif fmt == "scoped":
            from .scoped import ScopedCatalog

            return ScopedCatalog
        raise UnsupportedFormatError(file_format)

    @staticmethod
    def get_supported_formats() -> list[str]:
        return ["flat", "scoped"]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locale='{self.locale}', path='{self.path}')"
