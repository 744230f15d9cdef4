"""Per-locale translation catalogs and the writer that merges into them."""

from .base import BaseCatalog
from .flat import FlatCatalog
from .scoped import ScopedCatalog
from .writer import CatalogWriter

__all__ = ["BaseCatalog", "FlatCatalog", "ScopedCatalog", "CatalogWriter"]
