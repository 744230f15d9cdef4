from __future__ import annotations

import logging
from typing import List, Tuple

import regex as re

logger = logging.getLogger(__name__)

__all__ = ["PlaceholderManager"]


class PlaceholderManager:
    """Masks ``:name`` placeholders before translation and restores them after.

    Every placeholder is replaced by the same neutral marker so that the
    backend sees one opaque token per placeholder. Restoration is purely
    positional: the i-th marker in the translated text receives the i-th
    placeholder recorded from the source text. Markers beyond the number of
    recorded placeholders are left as they are.
    """

    PLACEHOLDER_PATTERN = re.compile(r":[A-Za-z_]\w*")
    MARKER = "[PH]"
    _MARKER_PATTERN = re.compile(re.escape(MARKER))

    @staticmethod
    def extract_placeholders(text: str) -> List[str]:
        """Placeholders of *text* in left-to-right order, duplicates kept."""
        if not isinstance(text, str):
            return []
        return PlaceholderManager.PLACEHOLDER_PATTERN.findall(text)

    @staticmethod
    def mask(text: str) -> Tuple[str, List[str]]:
        """Return *text* with every placeholder replaced by the marker."""
        placeholders = PlaceholderManager.extract_placeholders(text)
        if not placeholders:
            return text, []
        masked = PlaceholderManager.PLACEHOLDER_PATTERN.sub(
            PlaceholderManager.MARKER, text
        )
        return masked, placeholders

    @staticmethod
    def restore(text: str, placeholders: List[str]) -> str:
        if not placeholders or not isinstance(text, str):
            return text

        index = 0

        def replace_marker(match):
            nonlocal index
            if index < len(placeholders):
                restored = placeholders[index]
            else:
                restored = match.group(0)
            index += 1
            return restored

        restored_text = PlaceholderManager._MARKER_PATTERN.sub(replace_marker, text)
        if index < len(placeholders):
            logger.warning(
                f"Translation returned {index} marker(s) for "
                f"{len(placeholders)} placeholder(s): {placeholders[index:]} lost"
            )
        return restored_text

    @staticmethod
    def validate_placeholder_preservation(original: str, translated: str) -> bool:
        """True when *translated* carries the same placeholders in the same order."""
        if not isinstance(original, str) or not isinstance(translated, str):
            return True
        return PlaceholderManager.extract_placeholders(
            original
        ) == PlaceholderManager.extract_placeholders(translated)
