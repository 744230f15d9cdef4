#!/usr/bin/env python3
"""
Key extractor - finds literal translation keys in application source.

Pattern driven: every configured regular expression captures the quoted
argument of a localization call (``__('...')``, ``@lang('...')``,
``trans('...')``, ...). Captured strings that contain interpolation characters
are rejected so dynamically built keys are never proposed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

import aiofiles
import regex as re

from ..models import KeyOccurrence, TranslationKey

logger = logging.getLogger(__name__)

__all__ = [
    "KeyExtractor",
    "compile_patterns",
    "extract",
    "find_occurrences",
    "is_static_key",
]

# $var, {$var}, {{ expr }}, ${expr}
INTERPOLATION_PATTERN = re.compile(r"[\$\{\}]")

CONTEXT_MARKER = ">>> "
CONTEXT_INDENT = "    "


def compile_patterns(patterns: Iterable) -> List[re.Pattern]:
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        compiled.append(pattern)
    return compiled


def is_static_key(text: str) -> bool:
    """A key is usable only if it is non-empty and has no interpolation."""
    return bool(text) and not INTERPOLATION_PATTERN.search(text)


def _captured(match) -> Tuple[str, int]:
    """Captured key text and its offset: group ``key``, else group 1, else all."""
    if "key" in match.re.groupindex:
        return match.group("key") or "", match.start("key")
    if match.re.groups:
        return match.group(1) or "", match.start(1)
    return match.group(0), match.start()


def line_context(lines: Sequence[str], index: int) -> str:
    """The line at *index* and its neighbours, the matched line marked."""
    start = max(0, index - 1)
    end = min(len(lines) - 1, index + 1)
    context = []
    for i in range(start, end + 1):
        marker = CONTEXT_MARKER if i == index else CONTEXT_INDENT
        context.append(marker + lines[i].strip())
    return "\n".join(context)


def find_occurrences(
    document_text: str, patterns: Iterable, file: str = ""
) -> List[Tuple[str, KeyOccurrence]]:
    """Every accepted ``(key, occurrence)`` in *document_text*, in pattern order."""
    lines = document_text.split("\n")
    found: List[Tuple[str, KeyOccurrence]] = []

    for pattern in compile_patterns(patterns):
        for match in pattern.finditer(document_text):
            text, offset = _captured(match)
            if not is_static_key(text):
                continue
            index = document_text.count("\n", 0, offset)
            found.append(
                (
                    text,
                    KeyOccurrence(
                        file=file, line=index + 1, context=line_context(lines, index)
                    ),
                )
            )
    return found


def extract(document_text: str, patterns: Iterable) -> Set[str]:
    """Distinct key candidates found in one document."""
    return {text for text, _ in find_occurrences(document_text, patterns)}


class KeyExtractor:
    """Walks the scan paths and collects every key with its occurrences."""

    def __init__(
        self,
        patterns: Iterable,
        file_extensions: Optional[Iterable[str]] = None,
        exclude_dirs: Optional[Iterable[str]] = None,
        skip_unreadable: bool = False,
    ):
        self.patterns = compile_patterns(patterns)
        self.file_extensions = [
            ext.lstrip(".") for ext in (file_extensions or ["php", "blade.php"])
        ]
        self.exclude_dirs = set(exclude_dirs or [])
        self.skip_unreadable = skip_unreadable

    def find_files(self, scan_dirs: Iterable[Path]) -> List[Path]:
        """Matching files under every existing scan directory, sorted."""
        files: List[Path] = []
        for scan_dir in scan_dirs:
            scan_dir = Path(scan_dir)
            if not scan_dir.is_dir():
                logger.debug(f"Scan path not found, skipped: {scan_dir}")
                continue
            for path in scan_dir.rglob("*"):
                if not path.is_file():
                    continue
                parts = path.relative_to(scan_dir).parts
                if any(part in self.exclude_dirs for part in parts[:-1]):
                    continue
                if self._matches_extension(path.name) and path not in files:
                    files.append(path)
        return sorted(files)

    def _matches_extension(self, filename: str) -> bool:
        return any(filename.endswith(f".{ext}") for ext in self.file_extensions)

    def extract_from_documents(
        self, documents: Mapping[str, str]
    ) -> Dict[str, TranslationKey]:
        """Deduplicated keys across *documents* (``{file: text}``)."""
        occurrences: Dict[str, List[KeyOccurrence]] = {}
        for file, text in documents.items():
            for key, occurrence in find_occurrences(text, self.patterns, file):
                occurrences.setdefault(key, []).append(occurrence)

        return {
            key: TranslationKey(text=key, occurrences=tuple(found))
            for key, found in occurrences.items()
        }

    async def read_documents(self, files: Iterable[Path]) -> Dict[str, str]:
        documents: Dict[str, str] = {}
        for path in files:
            try:
                async with aiofiles.open(path, encoding="utf-8") as f:
                    documents[str(path)] = await f.read()
            except (OSError, UnicodeDecodeError) as e:
                if not self.skip_unreadable:
                    raise
                logger.warning(f"Unreadable source file skipped: {path}: {e}")
        return documents

    async def scan(self, scan_dirs: Iterable[Path]) -> Dict[str, TranslationKey]:
        files = self.find_files(scan_dirs)
        logger.info(f"Scanning {len(files)} source file(s) for translation keys")

        documents = await self.read_documents(files)
        keys = self.extract_from_documents(documents)

        logger.info(f"Found {len(keys)} unique translation key(s)")
        return keys
