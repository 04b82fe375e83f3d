"""Deterministic cleanup of OCR and PDF text-layer output.

Processing flow:
1. Unicode NFKC (folds ligatures, superscripts, full-width digits).
2. ICU Latin-ASCII transliteration (accents, typographic dashes and quotes).
3. Collapse horizontal whitespace inside each line and strip the line.

Line breaks are preserved: field recognizers bound their value-before-label
search to a single line.
"""

from __future__ import annotations

import re
import unicodedata
from typing import ClassVar

import icu  # type: ignore[import-untyped]

from app.logging.logger import Log
from app.normalization.base import BaseTextNormalizer
from app.normalization.exceptions import NormalizationError


class TextNormalizer(BaseTextNormalizer):
    """ICU-backed normalizer for English medical report text."""

    _ICU_TRANSFORM: ClassVar[str] = "Latin-ASCII"

    _HORIZONTAL_SPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\S\n]+")
    _LINE_BREAK_RE: ClassVar[re.Pattern[str]] = re.compile(r"\r\n?")

    def __init__(self) -> None:
        self._transliterator: icu.Transliterator = icu.Transliterator.createInstance(
            self._ICU_TRANSFORM
        )

    def normalize(self, text: str) -> str:
        if not text:
            return ""
        try:
            return self._run(text)
        except NormalizationError:
            raise
        except Exception as exc:
            raise NormalizationError(f"Text normalization failed: {exc}") from exc

    def _run(self, text: str) -> str:
        folded = unicodedata.normalize("NFKC", text)
        folded = self._LINE_BREAK_RE.sub("\n", folded)
        transliterated = self._transliterator.transliterate(folded)

        lines = [
            self._HORIZONTAL_SPACE_RE.sub(" ", line).strip()
            for line in transliterated.split("\n")
        ]
        normalized = "\n".join(lines).strip()

        Log.debug(f"Normalized {len(text)} chars -> {len(normalized)} chars")
        return normalized
