"""Key extraction and missing-key detection."""

from .extractor import KeyExtractor, extract, find_occurrences, is_static_key
from .lookup import BaseLookup, CatalogLookup, StaticLookup
from .resolver import MissingKeyResolver

__all__ = [
    "KeyExtractor",
    "extract",
    "find_occurrences",
    "is_static_key",
    "BaseLookup",
    "CatalogLookup",
    "StaticLookup",
    "MissingKeyResolver",
]
