"""
Provider registry

Maps provider names to adapter classes and owns the adapters created for a
run, so their HTTP clients can be released together.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, Union

import httpx

from ..errors import UnsupportedProviderError
from ..models import ProviderConfig
from .azure import AzureTranslationProvider
from .base import BaseProvider, HTTPProvider
from .deepl import DeepLTranslationProvider
from .dummy import DummyProvider
from .freetranslateapi import FreeTranslateApiProvider
from .google import GoogleTranslationProvider
from .libretranslate import LibreTranslationProvider
from .mymemory import MyMemoryProvider

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: Dict[str, Type[BaseProvider]] = {
    cls.name: cls
    for cls in (
        DummyProvider,
        GoogleTranslationProvider,
        DeepLTranslationProvider,
        AzureTranslationProvider,
        LibreTranslationProvider,
        MyMemoryProvider,
        FreeTranslateApiProvider,
    )
}


class ProviderRegistry:
    """Creates provider adapters by name and closes them at the end of a run."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport
        self.providers: List[BaseProvider] = []

    @staticmethod
    def list_available() -> Dict[str, str]:
        """Known provider names and their labels."""
        return {name: cls.label for name, cls in PROVIDER_CLASSES.items()}

    @staticmethod
    def get_provider_class(name: str) -> Type[BaseProvider]:
        try:
            return PROVIDER_CLASSES[name.strip().lower()]
        except (KeyError, AttributeError):
            raise UnsupportedProviderError(str(name))

    def create(
        self,
        name: Union[str, ProviderConfig],
        config: Optional[Mapping[str, Any]] = None,
    ) -> BaseProvider:
        """Build the adapter registered under *name*.

        Raises:
            UnsupportedProviderError: *name* is not a known provider.
        """
        if isinstance(name, ProviderConfig):
            name, config = name.name, name.settings

        provider_class = self.get_provider_class(name)
        if issubclass(provider_class, HTTPProvider):
            provider = provider_class(
                config, timeout=self.timeout, transport=self.transport
            )
        else:
            provider = provider_class(config)

        self.providers.append(provider)
        logger.info(
            f"Translation provider created: {provider.name} "
            f"(configured: {provider.is_configured()})"
        )
        return provider

    async def aclose(self) -> None:
        for provider in self.providers:
            await provider.aclose()
        self.providers.clear()

    async def __aenter__(self) -> "ProviderRegistry":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
