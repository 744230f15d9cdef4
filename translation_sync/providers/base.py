from __future__ import annotations

import abc
import logging
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional

import httpx

from ..errors import ProviderError
from ..models import ProviderResult
from .placeholders import PlaceholderManager

logger = logging.getLogger(__name__)

__all__ = ["BaseProvider", "HTTPProvider", "COMMON_LANGUAGE_CODES"]

# Codes passed through unchanged by most backends.
COMMON_LANGUAGE_CODES: Dict[str, str] = {
    code: code
    for code in (
        "en", "es", "fr", "de", "it", "pt", "ru", "ja", "ko", "zh",
        "ar", "hi", "tr", "pl", "nl", "sv", "da", "no", "fi",
    )
}


class BaseProvider(abc.ABC):
    """One translation backend.

    Subclasses implement :py:meth:`_translate_text`, which receives text whose
    placeholders are already masked and language codes already normalized.
    """

    #: Registry name, also reported as the translation method on success
    name: ClassVar[str] = ""
    #: Human readable label for diagnostics
    label: ClassVar[str] = ""
    #: Locale code -> backend code
    LANGUAGE_MAP: ClassVar[Mapping[str, str]] = COMMON_LANGUAGE_CODES
    SUPPORTED_LANGUAGES: ClassVar[FrozenSet[str]] = frozenset()
    #: Settings that must be non-empty for the provider to be usable
    REQUIRED_SETTINGS: ClassVar[tuple[str, ...]] = ()

    def __init__(self, config: Optional[Mapping[str, Any]] = None, **kwargs):
        self.config: Dict[str, Any] = dict(config or {})

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def translate(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> str:
        """Translate *text*, keeping ``:name`` placeholders intact.

        Raises:
            ProviderError: on any transport, status or payload failure.
        """
        if not self.is_configured():
            raise ProviderError(self.name, "service is not properly configured")

        masked, placeholders = PlaceholderManager.mask(text)
        translated = await self._translate_text(
            masked,
            self.normalize_language_code(target_language),
            self.normalize_source_language_code(source_language)
            if source_language
            else None,
        )
        if not isinstance(translated, str):
            raise ProviderError(
                self.name, f"invalid response: expected text, got {translated!r}"
            )
        return PlaceholderManager.restore(translated, placeholders)

    async def try_translate(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> ProviderResult:
        """Like :py:meth:`translate` but returns a tagged result instead of raising."""
        try:
            translated = await self.translate(text, target_language, source_language)
        except ProviderError as e:
            logger.error(f"[{self.name}] {target_language}: {e}")
            return ProviderResult.failed(str(e))
        return ProviderResult.ok(translated)

    def is_configured(self) -> bool:
        return all(self.config.get(setting) for setting in self.REQUIRED_SETTINGS)

    def supported_languages(self) -> FrozenSet[str]:
        return self.SUPPORTED_LANGUAGES

    def normalize_language_code(self, language: str) -> str:
        return self.LANGUAGE_MAP.get(language, language)

    def normalize_source_language_code(self, language: str) -> str:
        return self.normalize_language_code(language)

    async def aclose(self) -> None:
        """Release any held resources."""

    # ------------------------------------------------------------------
    # Backend hook
    # ------------------------------------------------------------------
    @abc.abstractmethod
    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        """Translate already-masked *text* with backend-specific codes."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(configured={self.is_configured()})"


class HTTPProvider(BaseProvider):
    """Base for providers talking to a JSON HTTP API through ``httpx``."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ):
        super().__init__(config, **kwargs)
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                headers={"User-Agent": "translation-sync/1.0"},
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request_json(self, method: str, url: str, **kwargs) -> Any:
        """Send one request and decode the JSON body; no retries."""
        logger.debug(f"[{self.name}] {method} {url}")
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        if response.status_code >= 400:
            raise ProviderError(
                self.name,
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(self.name, "invalid JSON response") from e

    def _invalid_response(self, data: Any) -> ProviderError:
        return ProviderError(self.name, f"invalid response: {str(data)[:200]}")
