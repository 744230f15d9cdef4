from __future__ import annotations

from typing import Optional

from ..errors import ProviderError
from .base import HTTPProvider


class MyMemoryProvider(HTTPProvider):
    """MyMemory public API. An e-mail raises the free daily quota."""

    name = "mymemory"
    label = "MyMemory"
    BASE_URL = "https://api.mymemory.translated.net"

    # MyMemory expects RFC 3066 style codes.
    LANGUAGE_MAP = {
        "zh": "zh-CN",
        "zh_CN": "zh-CN",
        "zh_TW": "zh-TW",
        "pt_BR": "pt-BR",
        "pt_PT": "pt-PT",
        "en_US": "en-US",
        "en_GB": "en-GB",
    }
    SUPPORTED_LANGUAGES = frozenset(
        """
        af am ar bg bn bs ceb cs cy da de el en es et fa fi fr ga gu ha he hi
        hr ht hu id ig is it ja jv kn ko ku lt lv mg mk ml mr ms ne nl no om
        or pa pl ps pt ro ru rw sd sk sl so sq sr st su sv sw ta te ti tl tn
        tr ts uk ur ve xh yo zh zu
        """.split()
    )

    def is_configured(self) -> bool:
        return True

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        params = {"q": text, "langpair": f"{source or 'en'}|{target}"}
        if self.config.get("email"):
            params["de"] = self.config["email"]

        data = await self._request_json(
            "GET", f"{self.config.get('url') or self.BASE_URL}/get", params=params
        )
        if not isinstance(data, dict):
            raise self._invalid_response(data)

        status = data.get("responseStatus")
        if status is not None and str(status) != "200":
            raise ProviderError(
                self.name,
                f"API error: {data.get('responseDetails') or 'Unknown error'}",
            )
        try:
            return data["responseData"]["translatedText"]
        except (KeyError, TypeError):
            raise self._invalid_response(data)
