from __future__ import annotations

from typing import Optional

from .base import COMMON_LANGUAGE_CODES, HTTPProvider


class LibreTranslationProvider(HTTPProvider):
    """LibreTranslate, public or self-hosted. An API key is optional."""

    name = "libretranslate"
    label = "LibreTranslate"
    REQUIRED_SETTINGS = ("url",)

    LANGUAGE_MAP = {
        **COMMON_LANGUAGE_CODES,
        "zh_CN": "zh",
        "zh_TW": "zt",
        "pt_BR": "pb",
        "nb": "nb",
    }
    SUPPORTED_LANGUAGES = frozenset(
        """
        ar az bg bn ca cs da de el en eo es et fa fi fr ga he hi hu id it ja
        ko lt lv ms nb nl pl pt ro ru sk sl sq sv th tl tr uk ur zh
        """.split()
    )

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        payload = {
            "q": text,
            "source": source or "auto",
            "target": target,
            "format": "text",
        }
        if self.config.get("api_key"):
            payload["api_key"] = self.config["api_key"]

        data = await self._request_json(
            "POST", f"{self.config['url'].rstrip('/')}/translate", json=payload
        )
        if not isinstance(data, dict) or "translatedText" not in data:
            raise self._invalid_response(data)
        return data["translatedText"]
