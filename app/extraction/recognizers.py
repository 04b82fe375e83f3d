"""Text recognizers that turn a field definition into a value.

Numeric recognizers try up to three forms in order and stop at the first
match:

1. label then value, e.g. ``Glucose: 95`` or ``Albumin (g/dl) 4.0``
2. value and unit then label on the same line, e.g. ``95 mg/dl Glucose``
3. label then the first number within a bounded window on the same line

Enumerated recognizers test for phrase presence only.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import ClassVar

from app.extraction.models import FieldDefinition, FieldValue, ValueKind

_FLAGS = re.IGNORECASE

# thousands groups ("7,800") are captured whole; commas are dropped when parsing
_INTEGER = r"(?P<value>\d{1,3}(?:,\d{3})+(?!\d)|\d+)"
_DECIMAL = r"(?P<value>(?:\d{1,3}(?:,\d{3})+(?!\d)|\d+)(?:\.\d+)?)"
# optional "(unit)" between a label and its value, then a short separator run
_LABEL_TAIL = r"(?:\s*\([^)\n]{0,20}\))?[\s:=\-]{0,6}"


def phrase_pattern(phrases: tuple[str, ...]) -> str:
    """Alternation of whole-word phrases; words may be split by spaces, not lines."""
    alternatives = [
        r"[^\S\n]+".join(re.escape(word) for word in phrase.split())
        for phrase in phrases
        if phrase.strip()
    ]
    return r"(?<!\w)(?:" + "|".join(alternatives) + r")(?!\w)"


def _unit_pattern(units: tuple[str, ...]) -> str:
    return r"(?:" + "|".join(re.escape(unit) for unit in units) + r")"


def contains_phrase(text: str, phrases: tuple[str, ...]) -> bool:
    return re.search(phrase_pattern(phrases), text, _FLAGS) is not None


class FieldRecognizer(ABC):
    """Contract for per-field recognizers."""

    def __init__(self, definition: FieldDefinition) -> None:
        self._definition = definition

    @property
    def definition(self) -> FieldDefinition:
        return self._definition

    @abstractmethod
    def recognize(self, text: str) -> FieldValue | None:
        """Return the field value found in ``text`` or None when absent."""


class NumberRecognizer(FieldRecognizer):
    """Captures an integer or decimal next to one of the field's labels."""

    def __init__(self, definition: FieldDefinition, lookahead_chars: int) -> None:
        super().__init__(definition)
        self._integer = definition.kind is ValueKind.INTEGER
        self._patterns = self._compile(definition, lookahead_chars)

    def _compile(
        self, definition: FieldDefinition, lookahead_chars: int
    ) -> list[re.Pattern[str]]:
        label = phrase_pattern(definition.labels)
        value = _INTEGER if self._integer else _DECIMAL
        window = f"[^\\n]{{0,{lookahead_chars}}}?"

        sources = [label + _LABEL_TAIL + value]
        if definition.units:
            sources.append(
                r"(?<![\d.])" + value + r"\s*" + _unit_pattern(definition.units)
                + window + label
            )
        if definition.loose:
            sources.append(label + window + r"(?<![\d.])" + value)
        return [re.compile(source, _FLAGS) for source in sources]

    def recognize(self, text: str) -> FieldValue | None:
        for pattern in self._patterns:
            match = pattern.search(text)
            if match:
                return self._parse(match.group("value"))
        return None

    def _parse(self, raw: str) -> FieldValue | None:
        try:
            number = raw.replace(",", "")
            return int(number) if self._integer else float(number)
        except ValueError:
            return None


class ThresholdRecognizer(NumberRecognizer):
    """Encodes a captured measurement as 1 above the threshold, else 0."""

    def __init__(self, definition: FieldDefinition, lookahead_chars: int) -> None:
        if definition.threshold is None:
            raise ValueError(f"Field '{definition.key}' needs a threshold")
        super().__init__(definition, lookahead_chars)
        self._threshold = definition.threshold

    def _parse(self, raw: str) -> FieldValue | None:
        measured = super()._parse(raw)
        if measured is None:
            return None
        return 1 if float(measured) > self._threshold else 0


class ChoiceRecognizer(FieldRecognizer):
    """Picks the first choice whose phrase appears in the text."""

    def __init__(self, definition: FieldDefinition) -> None:
        super().__init__(definition)
        self._choices = [
            (value, re.compile(phrase_pattern(phrases), _FLAGS))
            for value, phrases in definition.choices
        ]

    def recognize(self, text: str) -> FieldValue | None:
        for value, pattern in self._choices:
            if pattern.search(text):
                return value
        return None


class FlagRecognizer(FieldRecognizer):
    """Yes/no field set only when its topic is mentioned.

    The affirmative value is chosen when the word "yes" occurs anywhere in
    the report, not necessarily next to the topic.
    """

    _YES_RE: ClassVar[re.Pattern[str]] = re.compile(r"(?<!\w)yes(?!\w)", _FLAGS)

    def __init__(self, definition: FieldDefinition) -> None:
        super().__init__(definition)
        self._topic = re.compile(phrase_pattern(definition.labels), _FLAGS)

    def recognize(self, text: str) -> FieldValue | None:
        if not self._topic.search(text):
            return None
        affirmative, negative = self._definition.flag_values
        return affirmative if self._YES_RE.search(text) else negative


class PressureRecognizer(FieldRecognizer):
    """Captures a ``systolic/diastolic`` reading as a string."""

    _READING = r"(?P<systolic>\d{2,3})\s*/\s*(?P<diastolic>\d{2,3})"

    def __init__(self, definition: FieldDefinition, lookahead_chars: int) -> None:
        super().__init__(definition)
        label = phrase_pattern(definition.labels)
        units = _unit_pattern(definition.units or ("mmhg",))
        window = f"[^\\n]{{0,{lookahead_chars}}}?"
        self._patterns = [
            re.compile(source, _FLAGS)
            for source in (
                label + r"[\s:=\-]{0,6}" + self._READING,
                self._READING + r"\s*" + units + window + label,
                self._READING + r"\s*" + units,
            )
        ]

    def recognize(self, text: str) -> FieldValue | None:
        for pattern in self._patterns:
            match = pattern.search(text)
            if match:
                return f"{match.group('systolic')}/{match.group('diastolic')}"
        return None


def build_recognizer(definition: FieldDefinition, lookahead_chars: int) -> FieldRecognizer:
    """Compile a field definition into its recognizer."""
    kind = definition.kind
    if kind in (ValueKind.INTEGER, ValueKind.DECIMAL):
        return NumberRecognizer(definition, lookahead_chars)
    if kind is ValueKind.THRESHOLD:
        return ThresholdRecognizer(definition, lookahead_chars)
    if kind is ValueKind.CHOICE:
        return ChoiceRecognizer(definition)
    if kind is ValueKind.FLAG:
        return FlagRecognizer(definition)
    if kind is ValueKind.PRESSURE:
        return PressureRecognizer(definition, lookahead_chars)
    raise ValueError(f"Unsupported value kind: {kind!r}")
