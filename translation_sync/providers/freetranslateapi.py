from __future__ import annotations

from typing import Optional

from .base import HTTPProvider


class FreeTranslateApiProvider(HTTPProvider):
    """Self-hosted free-translate-api instance (LibreTranslate compatible)."""

    name = "freetranslateapi"
    label = "Free Translate API (self-hosted)"
    DEFAULT_TIMEOUT = 10.0
    REQUIRED_SETTINGS = ("url",)
    SUPPORTED_LANGUAGES = frozenset(
        """
        af am ar bg bs ca cs cy da de el en es et eu fa fi fr ga gl ha he hi
        hr hu id ig is it ja ko lt lv mg mk ms mt nl no pl pt ro ru sk sl so
        sq sr sv sw ta te th tl tr uk ur uz vi xh yo zh zu
        """.split()
    )

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        data = await self._request_json(
            "POST",
            f"{self.config['url'].rstrip('/')}/translate",
            json={"q": text, "source": source or "auto", "target": target},
        )
        if not isinstance(data, dict) or "translatedText" not in data:
            raise self._invalid_response(data)
        return data["translatedText"]
