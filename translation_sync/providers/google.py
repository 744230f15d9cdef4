from __future__ import annotations

from typing import Optional

from .base import COMMON_LANGUAGE_CODES, HTTPProvider


class GoogleTranslationProvider(HTTPProvider):
    """Google Cloud Translation (v2 REST API, key authentication)."""

    name = "google"
    label = "Google Cloud Translation"
    ENDPOINT = "https://translation.googleapis.com/language/translate/v2"
    REQUIRED_SETTINGS = ("api_key",)

    LANGUAGE_MAP = {
        **COMMON_LANGUAGE_CODES,
        "zh": "zh-CN",
        "zh_CN": "zh-CN",
        "zh_TW": "zh-TW",
        "pt_BR": "pt",
        "pt_PT": "pt",
        "he": "iw",
        "jv": "jw",
        "nb": "no",
    }
    SUPPORTED_LANGUAGES = frozenset(
        """
        af sq am ar hy az eu be bn bs bg ca ceb zh co hr cs da nl en eo et fi
        fr fy gl ka de el gu ht ha haw he hi hmn hu is ig id ga it ja jw kn kk
        km rw ko ku ky lo la lv lt lb mk mg ms ml mt mi mr mn my ne no ny or
        ps fa pl pt pa ro ru sm gd sr st sn sd si sk sl so es su sw sv tl tg
        ta tt te th tr tk uk ur ug uz vi cy xh yi yo zu
        """.split()
    )

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        payload = {"q": text, "target": target, "format": "text"}
        if source:
            payload["source"] = source

        data = await self._request_json(
            "POST",
            self.config.get("url") or self.ENDPOINT,
            params={"key": self.config["api_key"]},
            json=payload,
        )
        try:
            return data["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError):
            raise self._invalid_response(data)
