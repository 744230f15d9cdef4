"""
Translation orchestrator

Runs one sync: scan sources for keys, find the ones missing in the checked
locale, obtain a value for every (key, target language) pair and merge the
values into the target catalogs.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from ..catalogs.writer import CatalogWriter
from ..config import SyncConfig
from ..errors import ConfigurationError
from ..models import (
    CoverageStats,
    InitReport,
    ProviderResult,
    SyncOptions,
    SyncReport,
    TranslationKey,
    TranslationMethod,
    TranslationOutcome,
)
from ..providers.base import BaseProvider
from ..providers.registry import ProviderRegistry
from ..scanner.extractor import KeyExtractor
from ..scanner.lookup import BaseLookup, CatalogLookup
from ..scanner.resolver import MissingKeyResolver
from .delay import RequestDelayManager

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[TranslationKey], bool]


class SyncState(str, Enum):
    INIT = "init"
    SCANNING = "scanning"
    TRANSLATING = "translating"
    WRITING = "writing"
    DONE = "done"


class TranslationSync:
    """Owns one translation run and the provider adapter it uses."""

    def __init__(
        self,
        config: SyncConfig,
        lookup: Optional[BaseLookup] = None,
        registry: Optional[ProviderRegistry] = None,
    ):
        self.config = config
        self.lookup_injected = lookup is not None
        self.lookup = lookup or CatalogLookup(
            config.lang_dir, config.file_format, group=config.catalog_group
        )
        self.registry = registry or ProviderRegistry(timeout=config.request_timeout)
        self.extractor = KeyExtractor(
            config.patterns,
            file_extensions=config.file_extensions,
            exclude_dirs=config.exclude_dirs,
            skip_unreadable=config.skip_unreadable,
        )
        self.delay_manager = RequestDelayManager(config.delay_between_requests_ms)
        self.state = SyncState.INIT

        self.provider: BaseProvider
        self.provider_downgraded = False
        self._initialize_provider()

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def _initialize_provider(self) -> None:
        try:
            self.provider = self.registry.create(
                self.config.service, self.config.provider_settings()
            )
        except ConfigurationError as e:
            logger.warning(f"{e}; using the dummy provider, translation disabled")
            self.provider = self.registry.create("dummy")
            self.provider_downgraded = True
            return

        if not self.provider.is_configured():
            logger.warning(
                f"Provider '{self.provider.name}' is not configured; "
                "automatic translation is disabled"
            )

    @property
    def translation_available(self) -> bool:
        return not self.provider_downgraded and self.provider.is_configured()

    @property
    def check_locale(self) -> str:
        if self.config.missing_check_locale == "source":
            return self.config.source_language
        return self.config.active_locale

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    async def scan(self) -> Dict[str, TranslationKey]:
        """All keys found under the scan paths."""
        return await self.extractor.scan(self.config.scan_dirs())

    async def _analyze(self):
        keys = await self.scan()
        # Catalogs may have been rewritten since the previous pass.
        self.lookup.clear()
        resolver = MissingKeyResolver(self.lookup, self.check_locale)
        return await resolver.analyze(keys.values())

    async def find_missing(self) -> List[TranslationKey]:
        missing, _ = await self._analyze()
        return missing

    async def statistics(self) -> CoverageStats:
        _, stats = await self._analyze()
        return stats

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------
    async def translate_key(
        self,
        key: str,
        source_value: Optional[str] = None,
        languages: Optional[Iterable[str]] = None,
        auto_translate: Optional[bool] = None,
    ) -> Dict[str, TranslationOutcome]:
        """Outcome per target language; one failure never stops the others."""
        source_value = source_value or key
        if languages is None:
            languages = self.config.resolve_target_languages()
        if auto_translate is None:
            auto_translate = self.config.auto_translate

        outcomes: Dict[str, TranslationOutcome] = {}
        for language in languages:
            outcomes[language] = await self._translate_one(
                key, source_value, language, auto_translate
            )
        return outcomes

    async def _translate_one(
        self, key: str, source_value: str, language: str, auto_translate: bool
    ) -> TranslationOutcome:
        source_language = self.config.source_language

        if language == source_language:
            return TranslationOutcome(
                key=key,
                language=language,
                success=True,
                value=source_value,
                method=TranslationMethod.SAME_LANGUAGE.value,
            )

        if not auto_translate or not self.translation_available:
            return TranslationOutcome(
                key=key,
                language=language,
                success=True,
                value=source_value,
                method=TranslationMethod.NO_TRANSLATION.value,
            )

        result = await self._call_provider(source_value, language, source_language)
        if result.success:
            return TranslationOutcome(
                key=key,
                language=language,
                success=True,
                value=result.text,
                method=self.provider.name,
            )

        fallback = self.config.fallback_strategy.apply(key, source_value)
        logger.warning(
            f"[{language}] '{key}': translation failed, "
            f"fallback '{self.config.fallback_strategy.value}' applied"
        )
        return TranslationOutcome(
            key=key,
            language=language,
            success=False,
            value=fallback,
            method=TranslationMethod.FALLBACK.value,
            error=result.error,
        )

    async def _call_provider(
        self, text: str, language: str, source_language: str
    ) -> ProviderResult:
        attempts = self.config.max_retries + 1
        result = ProviderResult.failed("no attempt made")
        for attempt in range(1, attempts + 1):
            await self.delay_manager.wait()
            try:
                result = await self.provider.try_translate(
                    text, language, source_language
                )
            except Exception as e:
                logger.exception(f"[{self.provider.name}] unexpected error")
                result = ProviderResult.failed(f"{self.provider.name} error: {e}")

            if result.success:
                return result
            if attempt < attempts:
                logger.info(
                    f"[{language}] retrying ({attempt}/{self.config.max_retries})"
                )
        return result

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def sync(
        self,
        options: Optional[SyncOptions] = None,
        confirm: Optional[ConfirmCallback] = None,
    ) -> SyncReport:
        """Extract, detect, translate and write.

        *confirm* is asked about every missing key unless ``auto_add`` is set;
        without a callback every key is processed.
        """
        options = options or SyncOptions()
        config = self.config.with_options(options)
        if config != self.config:
            lookup = self.lookup
            format_changed = config.file_format != self.config.file_format
            if format_changed and not self.lookup_injected:
                lookup = None
            runner = TranslationSync(config, lookup=lookup, registry=self.registry)
            try:
                return await runner._sync(options, confirm)
            finally:
                self.state = runner.state
        return await self._sync(options, confirm)

    async def _sync(
        self, options: SyncOptions, confirm: Optional[ConfirmCallback]
    ) -> SyncReport:
        self.state = SyncState.SCANNING
        logger.info("Scanning for missing translations...")
        missing, stats = await self._analyze()

        report = SyncReport(
            missing=missing,
            stats=stats,
            dry_run=options.dry_run,
            provider=self.provider.name,
        )

        if options.stats_only or options.dry_run or not missing:
            if not missing:
                logger.info("No missing translations found")
            self.state = SyncState.DONE
            return report

        writer = CatalogWriter(
            self.config.lang_dir, self.config.file_format, group=self.config.catalog_group
        )
        languages = self.config.resolve_target_languages()
        logger.info(
            f"{len(missing)} missing key(s), target languages: {', '.join(languages)}"
        )

        self.state = SyncState.TRANSLATING
        for key in missing:
            if not options.auto_add and confirm is not None and not confirm(key):
                report.skipped.append(key.text)
                continue
            try:
                report.results[key.text] = await self.translate_key(
                    key.text, languages=languages
                )
            except Exception:
                logger.exception(f"'{key.text}': processing failed")
                report.failed.append(key.text)

        self.state = SyncState.WRITING
        for language in languages:
            values = {
                key: outcomes[language].value
                for key, outcomes in report.results.items()
                if language in outcomes
            }
            await writer.upsert_many(language, values)

        self.state = SyncState.DONE
        logger.info(
            f"Sync finished: {report.processed} key(s) processed, "
            f"{report.errors} with errors, {report.fallbacks} fallback(s), "
            f"{len(report.skipped)} skipped, "
            f"{self.delay_manager.requests} provider request(s)"
        )
        return report

    async def initialize(
        self, locales: Optional[List[str]] = None, force: bool = False
    ) -> InitReport:
        """Create empty catalogs; existing ones are kept unless *force*."""
        if not locales:
            locales = self.config.app_locales or [self.config.active_locale]
        writer = CatalogWriter(
            self.config.lang_dir, self.config.file_format, group=self.config.catalog_group
        )

        report = InitReport()
        for locale in locales:
            locale = locale.strip()
            if not locale:
                continue
            if await writer.create_empty(locale, force=force):
                report.created.append(locale)
            else:
                report.skipped.append(locale)

        logger.info(
            f"Initialized catalogs: {len(report.created)} created, "
            f"{len(report.skipped)} skipped"
        )
        return report

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    async def aclose(self) -> None:
        await self.registry.aclose()

    async def __aenter__(self) -> "TranslationSync":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def run_sync(
    config: SyncConfig,
    options: Optional[SyncOptions] = None,
    confirm: Optional[ConfirmCallback] = None,
) -> SyncReport:
    """Blocking entry point for front ends."""

    async def _run() -> SyncReport:
        async with TranslationSync(config) as runner:
            return await runner.sync(options, confirm)

    return asyncio.run(_run())


def run_init(
    config: SyncConfig, locales: Optional[List[str]] = None, force: bool = False
) -> InitReport:
    async def _run() -> InitReport:
        async with TranslationSync(config) as runner:
            return await runner.initialize(locales, force=force)

    return asyncio.run(_run())
