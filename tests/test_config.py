import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from translation_sync.config import SyncConfig, load_config
from translation_sync.models import FallbackStrategy, SyncOptions
from translation_sync.utils import EnvManager


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(env_file=None, environ={})

        assert config.service == "freetranslateapi"
        assert config.source_language == "en"
        assert config.target_languages is None
        assert config.auto_translate is False
        assert config.fallback_strategy is FallbackStrategy.KEY
        assert config.file_format == "flat"
        assert config.services["freetranslateapi"]["url"] == "http://localhost:5000"

    def test_environment_variables(self):
        config = load_config(
            env_file=None,
            environ={
                "TRANSLATION_SERVICE": "deepl",
                "TRANSLATION_TARGET_LANGS": "es, fr ,,de",
                "TRANSLATION_AUTO_TRANSLATE": "true",
                "TRANSLATION_FALLBACK_STRATEGY": "source",
                "DEEPL_API_KEY": "d-key",
            },
        )

        assert config.service == "deepl"
        assert config.target_languages == ["es", "fr", "de"]
        assert config.auto_translate is True
        assert config.fallback_strategy is FallbackStrategy.SOURCE
        assert config.provider_settings() == {
            "api_key": "d-key",
            "url": "https://api-free.deepl.com",
        }

    def test_env_file_and_precedence(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# translation settings\n"
            "TRANSLATION_SERVICE=libretranslate\n"
            'LIBRETRANSLATE_URL="https://lt.example.org"\n'
            "TRANSLATION_SOURCE_LANG='de'\n",
            encoding="utf-8",
        )

        config = load_config(
            env_file=str(env_file), environ={"TRANSLATION_SOURCE_LANG": "fr"}
        )

        assert config.service == "libretranslate"
        assert config.services["libretranslate"]["url"] == "https://lt.example.org"
        assert config.source_language == "fr"

    def test_overrides_win(self):
        config = load_config(
            env_file=None,
            environ={"TRANSLATION_SERVICE": "google"},
            overrides={"service": "dummy", "max_retries": 2},
        )
        assert config.service == "dummy"
        assert config.max_retries == 2

    def test_invalid_fallback_strategy(self):
        with pytest.raises(ValidationError):
            load_config(
                env_file=None, environ={"TRANSLATION_FALLBACK_STRATEGY": "guess"}
            )


class TestSyncConfig:
    def test_target_languages_exclude_source(self):
        config = SyncConfig(source_language="en", target_languages="en,es,fr,es")
        assert config.resolve_target_languages() == ["es", "fr"]

    def test_targets_fall_back_to_app_locales(self):
        config = SyncConfig(app_locales={"en": "English", "es": "Español", "ja": "日本語"})
        assert config.resolve_target_languages() == ["es", "ja"]

    def test_targets_fall_back_to_active_locale(self):
        config = SyncConfig(active_locale="pt_BR")
        assert config.resolve_target_languages() == ["pt_BR"]

    def test_paths(self, tmp_path: Path):
        config = SyncConfig(base_path=tmp_path, scan_paths=["app"], lang_path="resources/lang")
        assert config.lang_dir == tmp_path / "resources" / "lang"
        assert config.scan_dirs() == [tmp_path / "app"]

    def test_with_options(self):
        config = SyncConfig(service="google", auto_translate=False)
        updated = config.with_options(
            SyncOptions(
                service="dummy",
                translate=True,
                target_languages="de,it",
                fallback_strategy="empty",
                file_format="scoped",
            )
        )

        assert updated.service == "dummy"
        assert updated.auto_translate is True
        assert updated.target_languages == ["de", "it"]
        assert updated.fallback_strategy is FallbackStrategy.EMPTY
        assert updated.file_format == "scoped"
        assert config.service == "google"

    def test_with_empty_options_is_equal(self):
        config = SyncConfig()
        assert config.with_options(SyncOptions()) == config

    def test_from_json_file(self, tmp_path: Path):
        path = tmp_path / "translation.json"
        path.write_text(
            json.dumps({"service": "mymemory", "target_languages": ["ko"]}),
            encoding="utf-8",
        )
        config = SyncConfig.from_json_file(path)
        assert config.service == "mymemory"
        assert config.target_languages == ["ko"]


class TestEnvManager:
    def test_bool_and_list_values(self):
        env = EnvManager(
            None, environ={"FLAG": "Yes", "OFF": "0", "LIST": "a, b,", "BLANK": " , "}
        )
        assert env.get_bool("FLAG") is True
        assert env.get_bool("OFF", default=True) is False
        assert env.get_bool("UNSET", default=True) is True
        assert env.get_list("LIST") == ["a", "b"]
        assert env.get_list("BLANK") is None
        assert env.get_list("UNSET") is None

    def test_missing_env_file_is_ignored(self, tmp_path: Path):
        env = EnvManager(str(tmp_path / "absent.env"), environ={})
        assert env.env_data == {}
        assert env.get_env_var("ANY", "default") == "default"
