import asyncio

import httpx
import pytest

from translation_sync.errors import ConfigurationError, UnsupportedProviderError
from translation_sync.models import ProviderConfig
from translation_sync.providers import (
    DummyProvider,
    LibreTranslationProvider,
    ProviderRegistry,
)


def test_list_available_names_every_adapter():
    available = ProviderRegistry.list_available()
    assert set(available) == {
        "dummy",
        "google",
        "deepl",
        "azure",
        "libretranslate",
        "mymemory",
        "freetranslateapi",
    }
    assert available["dummy"] == "Dummy Service (for testing)"


def test_unknown_name_raises_configuration_error():
    registry = ProviderRegistry()
    with pytest.raises(UnsupportedProviderError) as excinfo:
        registry.create("babelfish")
    assert isinstance(excinfo.value, ConfigurationError)
    assert "babelfish" in str(excinfo.value)


def test_lookup_ignores_case_and_whitespace():
    assert ProviderRegistry.get_provider_class(" Dummy ") is DummyProvider


def test_create_passes_transport_and_timeout_to_http_adapters():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, json={"translatedText": "Hallo"})
    )
    registry = ProviderRegistry(timeout=5.0, transport=transport)
    provider = registry.create(
        ProviderConfig(name="libretranslate", settings={"url": "https://lt.test"})
    )

    assert isinstance(provider, LibreTranslationProvider)
    assert provider.timeout == 5.0

    async def _go():
        async with registry:
            return await provider.translate("Hello", "de")

    assert asyncio.run(_go()) == "Hallo"
    assert registry.providers == []


def test_create_dummy_without_settings():
    provider = ProviderRegistry().create("dummy")
    assert isinstance(provider, DummyProvider)
    assert provider.is_configured()
