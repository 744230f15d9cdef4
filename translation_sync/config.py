"""
Run configuration

A single ``SyncConfig`` value is built once per run (from a ``.env`` file, the
environment, a JSON document or plain keyword arguments) and handed to every
component constructor.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .models import FallbackStrategy, SyncOptions
from .utils.env_manager import EnvManager

logger = logging.getLogger(__name__)

__all__ = ["SyncConfig", "load_config", "DEFAULT_PATTERNS", "DEFAULT_SERVICES"]

# Each pattern captures the quoted key as its first group.
DEFAULT_PATTERNS: List[str] = [
    r"""__\(['"](.+?)['"]\)""",
    r"""@lang\(['"](.+?)['"]\)""",
    r"""trans\(['"](.+?)['"]\)""",
    r"""Lang::get\(['"](.+?)['"]\)""",
]

DEFAULT_SERVICES: Dict[str, Dict[str, Any]] = {
    "google": {"api_key": None},
    "deepl": {"api_key": None, "url": "https://api-free.deepl.com"},
    "azure": {
        "api_key": None,
        "region": None,
        "endpoint": "https://api.cognitive.microsofttranslator.com",
    },
    "libretranslate": {"url": "https://libretranslate.com", "api_key": None},
    "mymemory": {"email": None},
    "freetranslateapi": {"url": "http://localhost:5000"},
}

# (service, setting) -> environment variable
SERVICE_ENV_VARS = {
    ("google", "api_key"): "GOOGLE_TRANSLATE_API_KEY",
    ("deepl", "api_key"): "DEEPL_API_KEY",
    ("deepl", "url"): "DEEPL_API_URL",
    ("azure", "api_key"): "AZURE_TRANSLATOR_KEY",
    ("azure", "region"): "AZURE_TRANSLATOR_REGION",
    ("azure", "endpoint"): "AZURE_TRANSLATOR_ENDPOINT",
    ("libretranslate", "url"): "LIBRETRANSLATE_URL",
    ("libretranslate", "api_key"): "LIBRETRANSLATE_API_KEY",
    ("mymemory", "email"): "MYMEMORY_EMAIL",
    ("freetranslateapi", "url"): "FREETRANSLATEAPI_URL",
}


def _split_languages(value: Union[str, List[str], None]) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    languages = [str(lang).strip() for lang in value if str(lang).strip()]
    return languages or None


class SyncConfig(BaseModel):
    """Every setting the sync pipeline consumes."""

    service: str = Field(default="freetranslateapi", description="Provider name")
    services: Dict[str, Dict[str, Any]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_SERVICES.items()}
    )
    source_language: str = "en"
    target_languages: Optional[List[str]] = Field(
        default=None, description="None derives targets from app_locales"
    )
    app_locales: List[str] = Field(default_factory=list)
    active_locale: str = "en"
    missing_check_locale: Literal["active", "source"] = "active"

    base_path: Path = Path(".")
    scan_paths: List[str] = Field(
        default_factory=lambda: ["app", "resources", "routes"]
    )
    file_extensions: List[str] = Field(default_factory=lambda: ["php", "blade.php"])
    exclude_dirs: List[str] = Field(
        default_factory=lambda: ["vendor", "node_modules", ".git", "storage"]
    )
    patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_PATTERNS))
    skip_unreadable: bool = False

    auto_translate: bool = False
    fallback_strategy: FallbackStrategy = FallbackStrategy.KEY
    file_format: str = Field(default="flat", description="flat or scoped")
    lang_path: str = "lang"
    catalog_group: str = "messages"

    request_timeout: float = 30.0
    max_retries: int = Field(default=0, ge=0)
    delay_between_requests_ms: int = Field(default=0, ge=0)

    @field_validator("target_languages", mode="before")
    @classmethod
    def _parse_target_languages(cls, value):
        return _split_languages(value)

    @field_validator("app_locales", mode="before")
    @classmethod
    def _parse_app_locales(cls, value):
        if isinstance(value, Mapping):
            value = list(value.keys())
        return _split_languages(value) or []

    @property
    def lang_dir(self) -> Path:
        return Path(self.base_path) / self.lang_path

    def scan_dirs(self) -> List[Path]:
        return [Path(self.base_path) / path for path in self.scan_paths]

    def provider_settings(self, name: Optional[str] = None) -> Dict[str, Any]:
        return dict(self.services.get(name or self.service, {}))

    def resolve_target_languages(self) -> List[str]:
        """Configured targets (or host locales) without the source language."""
        languages = self.target_languages
        if not languages:
            languages = self.app_locales or [self.active_locale]
        source = self.source_language.strip()
        result: List[str] = []
        for language in languages:
            language = language.strip()
            if language and language != source and language not in result:
                result.append(language)
        return result

    def with_options(self, options: SyncOptions) -> "SyncConfig":
        """Copy of this config with the command-surface overrides applied."""
        update: Dict[str, Any] = {}
        if options.service:
            update["service"] = options.service
        if options.source_language:
            update["source_language"] = options.source_language
        if options.target_languages:
            update["target_languages"] = _split_languages(options.target_languages)
        if options.file_format:
            update["file_format"] = options.file_format
        if options.fallback_strategy is not None:
            update["fallback_strategy"] = options.fallback_strategy
        if options.translate is not None:
            update["auto_translate"] = options.translate
        return self.model_copy(update=update)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "SyncConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)


def load_config(
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SyncConfig:
    """Build the run configuration from the environment and a ``.env`` file."""
    env = EnvManager(env_file, environ=environ)
    data: Dict[str, Any] = {}

    simple = {
        "service": "TRANSLATION_SERVICE",
        "source_language": "TRANSLATION_SOURCE_LANG",
        "fallback_strategy": "TRANSLATION_FALLBACK_STRATEGY",
        "file_format": "TRANSLATION_FILE_FORMAT",
        "active_locale": "TRANSLATION_ACTIVE_LOCALE",
        "lang_path": "TRANSLATION_LANG_PATH",
    }
    for field_name, env_name in simple.items():
        value = env.get_env_var(env_name)
        if value:
            data[field_name] = value

    targets = env.get_list("TRANSLATION_TARGET_LANGS")
    if targets:
        data["target_languages"] = targets
    app_locales = env.get_list("TRANSLATION_APP_LOCALES")
    if app_locales:
        data["app_locales"] = app_locales
    data["auto_translate"] = env.get_bool("TRANSLATION_AUTO_TRANSLATE", False)

    services = {k: dict(v) for k, v in DEFAULT_SERVICES.items()}
    for (service, setting), env_name in SERVICE_ENV_VARS.items():
        value = env.get_env_var(env_name)
        if value:
            services[service][setting] = value
    data["services"] = services

    if overrides:
        data.update(overrides)

    config = SyncConfig.model_validate(data)
    logger.debug(
        f"Configuration loaded - service: {config.service}, "
        f"source: {config.source_language}, format: {config.file_format}"
    )
    return config
