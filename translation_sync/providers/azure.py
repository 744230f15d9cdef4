from __future__ import annotations

from typing import Optional

from .base import COMMON_LANGUAGE_CODES, HTTPProvider


class AzureTranslationProvider(HTTPProvider):
    """Azure AI Translator (Text Translation v3)."""

    name = "azure"
    label = "Azure AI Translator"
    DEFAULT_ENDPOINT = "https://api.cognitive.microsofttranslator.com"
    REQUIRED_SETTINGS = ("api_key",)

    LANGUAGE_MAP = {
        **COMMON_LANGUAGE_CODES,
        "zh": "zh-Hans",
        "zh_CN": "zh-Hans",
        "zh_TW": "zh-Hant",
        "no": "nb",
        "pt_BR": "pt",
        "pt_PT": "pt-pt",
        "sr": "sr-Cyrl",
    }
    SUPPORTED_LANGUAGES = frozenset(
        """
        af am ar as az ba bg bn bo bs ca cs cy da de dv el en es et eu fa fi
        fil fj fo fr ga gl gu he hi hr ht hu hy id is it iu ja ka kk km kn ko
        ku ky lo lt lv mg mi mk ml mn mr ms mt my nb ne nl or pa pl ps pt ro
        ru sk sl sm so sq sr sv sw ta te th ti tk tr tt ty ug uk ur uz vi zh
        """.split()
    )

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        endpoint = (self.config.get("endpoint") or self.DEFAULT_ENDPOINT).rstrip("/")
        params = {"api-version": "3.0", "to": target}
        if source:
            params["from"] = source

        headers = {"Ocp-Apim-Subscription-Key": self.config["api_key"]}
        if self.config.get("region"):
            headers["Ocp-Apim-Subscription-Region"] = self.config["region"]

        data = await self._request_json(
            "POST",
            f"{endpoint}/translate",
            params=params,
            headers=headers,
            json=[{"Text": text}],
        )
        try:
            return data[0]["translations"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise self._invalid_response(data)
