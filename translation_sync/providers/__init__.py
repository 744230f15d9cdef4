"""Translation provider adapters.

Each provider wraps one backend (Google, DeepL, Azure, LibreTranslate,
MyMemory, a self-hosted free-translate-api, or the offline dummy) behind the
:class:`BaseProvider` interface. :class:`ProviderRegistry` builds them by name.
"""

from .azure import AzureTranslationProvider
from .base import BaseProvider, HTTPProvider
from .deepl import DeepLTranslationProvider
from .dummy import DummyProvider
from .freetranslateapi import FreeTranslateApiProvider
from .google import GoogleTranslationProvider
from .libretranslate import LibreTranslationProvider
from .mymemory import MyMemoryProvider
from .placeholders import PlaceholderManager
from .registry import PROVIDER_CLASSES, ProviderRegistry

__all__ = [
    "BaseProvider",
    "HTTPProvider",
    "DummyProvider",
    "GoogleTranslationProvider",
    "DeepLTranslationProvider",
    "AzureTranslationProvider",
    "LibreTranslationProvider",
    "MyMemoryProvider",
    "FreeTranslateApiProvider",
    "PlaceholderManager",
    "PROVIDER_CLASSES",
    "ProviderRegistry",
]
