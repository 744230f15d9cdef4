"""translation_sync - find untranslated keys and fill per-language catalogs.

Pipeline: source documents -> key extraction -> missing-key detection ->
provider translation with fallback -> sorted catalog merge.
"""

from .catalogs import CatalogWriter
from .config import SyncConfig, load_config
from .errors import (
    CatalogFormatError,
    ConfigurationError,
    ProviderError,
    TranslationSyncError,
    UnsupportedFormatError,
    UnsupportedProviderError,
)
from .models import (
    CoverageStats,
    FallbackStrategy,
    InitReport,
    SyncOptions,
    SyncReport,
    TranslationKey,
    TranslationOutcome,
)
from .providers import ProviderRegistry
from .sync import SyncState, TranslationSync, run_init, run_sync

__version__ = "1.0.0"

__all__ = [
    "CatalogWriter",
    "SyncConfig",
    "load_config",
    "CatalogFormatError",
    "ConfigurationError",
    "ProviderError",
    "TranslationSyncError",
    "UnsupportedFormatError",
    "UnsupportedProviderError",
    "CoverageStats",
    "FallbackStrategy",
    "InitReport",
    "SyncOptions",
    "SyncReport",
    "TranslationKey",
    "TranslationOutcome",
    "ProviderRegistry",
    "SyncState",
    "TranslationSync",
    "run_init",
    "run_sync",
]
