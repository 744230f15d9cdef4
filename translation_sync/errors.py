"""Exception hierarchy shared by every translation-sync component."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "TranslationSyncError",
    "ConfigurationError",
    "UnsupportedProviderError",
    "ProviderError",
    "UnsupportedFormatError",
    "CatalogFormatError",
]


class TranslationSyncError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(TranslationSyncError):
    """A provider or the run itself is misconfigured."""


class UnsupportedProviderError(ConfigurationError):
    """The requested provider name is not known to the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported translation service: {name}")


class ProviderError(TranslationSyncError):
    """A remote backend failed to translate a single string."""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: Optional[int] = None,
    ):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider} error: {message}")


class UnsupportedFormatError(TranslationSyncError):
    """An unknown catalog file format reached the catalog writer."""

    def __init__(self, file_format: str):
        self.file_format = file_format
        super().__init__(f"Unsupported catalog file format: {file_format!r}")


class CatalogFormatError(TranslationSyncError, ValueError):
    """An existing catalog file could not be read as a key/value mapping."""
