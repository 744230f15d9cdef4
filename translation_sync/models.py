from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

__all__ = [
    "FallbackStrategy",
    "TranslationMethod",
    "KeyOccurrence",
    "TranslationKey",
    "ProviderConfig",
    "ProviderResult",
    "TranslationOutcome",
    "CoverageStats",
    "SyncOptions",
    "SyncReport",
    "InitReport",
]


class FallbackStrategy(str, Enum):
    """Value persisted when a translation is unavailable or fails."""

    KEY = "key"
    SOURCE = "source"
    EMPTY = "empty"

    def apply(self, key: str, source_value: str) -> str:
        if self is FallbackStrategy.EMPTY:
            return ""
        if self is FallbackStrategy.SOURCE:
            return source_value
        return key


class TranslationMethod(str, Enum):
    """Fixed method tags. Successful provider calls use the provider name."""

    SAME_LANGUAGE = "same_language"
    NO_TRANSLATION = "no_translation"
    FALLBACK = "fallback"


class KeyOccurrence(BaseModel):
    """Where a key was found and the lines around it."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(description="Path of the source document")
    line: int = Field(description="1-based line number of the match")
    context: str = Field(
        default="", description="Matched line plus one line before and after"
    )


class TranslationKey(BaseModel):
    """A literal string marked for localization, identified by exact text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Key text, also the default source value")
    occurrences: Tuple[KeyOccurrence, ...] = Field(default=())

    @property
    def files(self) -> List[str]:
        seen: List[str] = []
        for occurrence in self.occurrences:
            if occurrence.file not in seen:
                seen.append(occurrence.file)
        return seen


class ProviderConfig(BaseModel):
    """Backend name plus backend-specific settings (url, api_key, region...)."""

    name: str
    settings: Dict[str, Any] = Field(default_factory=dict)


class ProviderResult(BaseModel):
    """Tagged result of one adapter call."""

    success: bool
    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "ProviderResult":
        return cls(success=True, text=text)

    @classmethod
    def failed(cls, error: str) -> "ProviderResult":
        return cls(success=False, error=error)


class TranslationOutcome(BaseModel):
    """Result for one (key, target language) pair."""

    key: str
    language: str
    success: bool
    value: str
    method: str = Field(
        description="same_language, no_translation, fallback or a provider name"
    )
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.method == TranslationMethod.FALLBACK.value


class CoverageStats(BaseModel):
    total_keys: int = 0
    missing_keys: int = 0
    translated_keys: int = 0
    coverage_percentage: float = 100.0

    @classmethod
    def from_counts(cls, total: int, missing: int) -> "CoverageStats":
        translated = total - missing
        coverage = round(translated / total * 100, 2) if total > 0 else 100.0
        return cls(
            total_keys=total,
            missing_keys=missing,
            translated_keys=translated,
            coverage_percentage=coverage,
        )


class SyncOptions(BaseModel):
    """Options recognised by the ``sync`` operation."""

    auto_add: bool = False
    translate: Optional[bool] = None
    service: Optional[str] = None
    source_language: Optional[str] = None
    target_languages: Optional[List[str]] = None
    dry_run: bool = False
    stats_only: bool = False
    file_format: Optional[str] = None
    fallback_strategy: Optional[FallbackStrategy] = None

    @field_validator("target_languages", mode="before")
    @classmethod
    def _split_target_languages(cls, value):
        if isinstance(value, str):
            value = [lang.strip() for lang in value.split(",") if lang.strip()]
        return value or None


class SyncReport(BaseModel):
    """Everything a front end needs to report on a ``sync`` run."""

    missing: List[TranslationKey] = Field(default_factory=list)
    results: Dict[str, Dict[str, TranslationOutcome]] = Field(default_factory=dict)
    skipped: List[str] = Field(default_factory=list)
    failed: List[str] = Field(
        default_factory=list, description="Keys whose processing raised"
    )
    stats: Optional[CoverageStats] = None
    dry_run: bool = False
    provider: Optional[str] = None

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def fallbacks(self) -> int:
        return sum(1 for outcome in self.outcomes() if outcome.is_fallback)

    @property
    def errors(self) -> int:
        """Failed keys; a recovered fallback is not an error."""
        unrecovered = {
            outcome.key
            for outcome in self.outcomes()
            if not outcome.success and not outcome.is_fallback
        }
        return len(unrecovered) + len(self.failed)

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    @property
    def exit_code(self) -> int:
        return 1 if self.has_errors else 0

    def outcomes(self) -> List[TranslationOutcome]:
        return [
            outcome
            for per_language in self.results.values()
            for outcome in per_language.values()
        ]


class InitReport(BaseModel):
    created: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
