from __future__ import annotations

from typing import Optional

from .base import HTTPProvider


class DeepLTranslationProvider(HTTPProvider):
    """DeepL API. Free-plan keys use ``api-free.deepl.com``."""

    name = "deepl"
    label = "DeepL"
    DEFAULT_URL = "https://api-free.deepl.com"
    REQUIRED_SETTINGS = ("api_key",)

    # DeepL uses upper-case codes and regional variants for a few targets.
    LANGUAGE_MAP = {
        "en": "EN-US",
        "en_US": "EN-US",
        "en_GB": "EN-GB",
        "pt": "PT-PT",
        "pt_BR": "PT-BR",
        "pt_PT": "PT-PT",
        "zh": "ZH",
        "zh_CN": "ZH",
        "no": "NB",
        "nb": "NB",
    }
    SUPPORTED_LANGUAGES = frozenset(
        """
        ar bg cs da de el en es et fi fr hu id it ja ko lt lv nb nl pl pt ro
        ru sk sl sv tr uk zh
        """.split()
    )

    def normalize_language_code(self, language: str) -> str:
        return self.LANGUAGE_MAP.get(language, language.replace("_", "-").upper())

    def normalize_source_language_code(self, language: str) -> str:
        # Source languages never carry a regional variant.
        base = language.replace("_", "-").split("-")[0].lower()
        if base == "no":
            base = "nb"
        return base.upper()

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        base_url = (self.config.get("url") or self.DEFAULT_URL).rstrip("/")
        payload = {"text": [text], "target_lang": target}
        if source:
            payload["source_lang"] = source

        data = await self._request_json(
            "POST",
            f"{base_url}/v2/translate",
            headers={"Authorization": f"DeepL-Auth-Key {self.config['api_key']}"},
            json=payload,
        )
        try:
            return data["translations"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise self._invalid_response(data)
