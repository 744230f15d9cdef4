from __future__ import annotations

import logging
from typing import Iterable, List, Tuple, Union

from ..models import CoverageStats, TranslationKey
from .lookup import BaseLookup

logger = logging.getLogger(__name__)

__all__ = ["MissingKeyResolver"]

KeyLike = Union[str, TranslationKey]


def _text(key: KeyLike) -> str:
    return key.text if isinstance(key, TranslationKey) else key


class MissingKeyResolver:
    """Decides which keys lack a translation in one locale.

    A key is missing when the lookup resolves it to exactly its own text. A
    translation that is legitimately identical to its key is therefore
    reported as missing as well.
    """

    def __init__(self, lookup: BaseLookup, locale: str):
        self.lookup = lookup
        self.locale = locale

    async def is_missing(self, key: KeyLike) -> bool:
        text = _text(key)
        return await self.lookup.resolve(text, self.locale) == text

    async def analyze(
        self, keys: Iterable[KeyLike]
    ) -> Tuple[List[KeyLike], CoverageStats]:
        """Missing keys (input order kept) and coverage, from one lookup pass."""
        seen = set()
        missing: List[KeyLike] = []
        for key in keys:
            text = _text(key)
            if text in seen:
                continue
            seen.add(text)
            if await self.is_missing(key):
                missing.append(key)

        stats = CoverageStats.from_counts(len(seen), len(missing))
        logger.info(
            f"[{self.locale}] {stats.missing_keys}/{stats.total_keys} key(s) missing, "
            f"coverage {stats.coverage_percentage}%"
        )
        return missing, stats

    async def find_missing(self, keys: Iterable[KeyLike]) -> List[KeyLike]:
        missing, _ = await self.analyze(keys)
        return missing

    async def statistics(self, keys: Iterable[KeyLike]) -> CoverageStats:
        _, stats = await self.analyze(keys)
        return stats
