from __future__ import annotations

from typing import Optional

from .base import BaseProvider


class DummyProvider(BaseProvider):
    """Offline provider for tests: appends ``[<lang>]`` to the input."""

    name = "dummy"
    label = "Dummy Service (for testing)"
    SUPPORTED_LANGUAGES = frozenset(
        {"en", "es", "fr", "de", "it", "pt", "ru", "ja", "ko", "zh", "ar"}
    )

    def is_configured(self) -> bool:
        return True

    async def _translate_text(
        self, text: str, target: str, source: Optional[str]
    ) -> str:
        return f"{text} [{target}]"
