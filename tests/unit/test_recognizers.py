import re

import pytest

from app.extraction.models import FieldDefinition, ValueKind
from app.extraction.recognizers import (
    ChoiceRecognizer,
    FlagRecognizer,
    NumberRecognizer,
    PressureRecognizer,
    ThresholdRecognizer,
    build_recognizer,
    contains_phrase,
    phrase_pattern,
)

_WINDOW = 40


def _number(
    kind: ValueKind = ValueKind.DECIMAL,
    labels: tuple[str, ...] = ("albumin",),
    units: tuple[str, ...] = (),
    loose: bool = False,
) -> NumberRecognizer:
    definition = FieldDefinition("field", kind, labels, units=units, loose=loose)
    return NumberRecognizer(definition, _WINDOW)


class TestPhrasePattern:
    def test_matches_whole_words_only(self) -> None:
        assert contains_phrase("ALT: 40", ("alt",))
        assert not contains_phrase("Salt intake", ("alt",))

    def test_tolerates_runs_of_spaces(self) -> None:
        assert contains_phrase("Blood   Pressure", ("blood pressure",))

    def test_does_not_span_lines(self) -> None:
        assert not contains_phrase("RBC normal\nPC abnormal", ("normal pc",))

    def test_escapes_special_characters(self) -> None:
        pattern = re.compile(phrase_pattern(("a/g ratio",)), re.IGNORECASE)
        assert pattern.search("A/G Ratio: 1.2")
        assert not pattern.search("aXg ratio")


class TestNumberRecognizer:
    def test_label_then_value(self) -> None:
        assert _number().recognize("Albumin: 4.0") == 4.0

    def test_is_case_insensitive(self) -> None:
        assert _number().recognize("ALBUMIN 3.5") == 3.5

    def test_skips_parenthesized_unit(self) -> None:
        assert _number().recognize("Albumin (g/dl): 4.1") == 4.1

    def test_integer_field_ignores_fraction(self) -> None:
        recognizer = _number(kind=ValueKind.INTEGER, labels=("age",))
        value = recognizer.recognize("Age: 45.7")
        assert value == 45
        assert isinstance(value, int)

    def test_value_unit_then_label(self) -> None:
        recognizer = _number(kind=ValueKind.INTEGER, labels=("glucose",), units=("mg/dl",))
        assert recognizer.recognize("95 mg/dl Glucose") == 95

    def test_value_unit_then_label_stays_on_line(self) -> None:
        recognizer = _number(labels=("glucose",), units=("mg/dl",))
        assert recognizer.recognize("95 mg/dl\nGlucose") is None

    def test_label_then_value_wins_over_value_then_label(self) -> None:
        recognizer = _number(kind=ValueKind.INTEGER, labels=("glucose",), units=("mg/dl",))
        assert recognizer.recognize("80 mg/dl glucose ... Glucose: 110") == 110

    def test_loose_form_finds_value_within_window(self) -> None:
        recognizer = _number(labels=("glucose",), loose=True)
        assert recognizer.recognize("Glucose fasting plasma 105") == 105.0

    def test_loose_form_respects_window(self) -> None:
        recognizer = _number(labels=("glucose",), loose=True)
        assert recognizer.recognize("Glucose " + "x" * 60 + " 105") is None

    def test_loose_form_disabled_by_default(self) -> None:
        recognizer = _number(labels=("glucose",))
        assert recognizer.recognize("Glucose fasting plasma 105") is None

    def test_integer_with_thousands_separator(self) -> None:
        recognizer = _number(kind=ValueKind.INTEGER, labels=("wbc",))
        assert recognizer.recognize("WBC: 11,250") == 11250

    def test_decimal_with_thousands_separator(self) -> None:
        recognizer = _number(labels=("platelets",), loose=True)
        assert recognizer.recognize("Platelets count 1,250,000.5") == 1250000.5

    def test_comma_list_is_not_a_thousands_group(self) -> None:
        recognizer = _number(kind=ValueKind.INTEGER, labels=("wbc",))
        assert recognizer.recognize("WBC: 12, 14") == 12

    def test_missing_label_returns_none(self) -> None:
        assert _number().recognize("Globulin: 3.0") is None


class TestThresholdRecognizer:
    def _recognizer(self) -> ThresholdRecognizer:
        definition = FieldDefinition(
            "fbs", ValueKind.THRESHOLD, ("fbs",), threshold=120
        )
        return ThresholdRecognizer(definition, _WINDOW)

    def test_above_threshold_is_one(self) -> None:
        assert self._recognizer().recognize("FBS: 121") == 1

    def test_at_threshold_is_zero(self) -> None:
        assert self._recognizer().recognize("FBS: 120") == 0

    def test_missing_measurement_is_none(self) -> None:
        assert self._recognizer().recognize("Cholesterol: 200") is None

    def test_requires_threshold(self) -> None:
        definition = FieldDefinition("fbs", ValueKind.THRESHOLD, ("fbs",))
        with pytest.raises(ValueError, match="threshold"):
            ThresholdRecognizer(definition, _WINDOW)


class TestChoiceRecognizer:
    def _recognizer(self) -> ChoiceRecognizer:
        definition = FieldDefinition(
            "gender",
            ValueKind.CHOICE,
            choices=(("Female", ("female",)), ("Male", ("male",))),
        )
        return ChoiceRecognizer(definition)

    def test_female_is_not_read_as_male(self) -> None:
        assert self._recognizer().recognize("Sex: Female") == "Female"

    def test_male(self) -> None:
        assert self._recognizer().recognize("Sex: MALE") == "Male"

    def test_absent_phrase_is_none(self) -> None:
        assert self._recognizer().recognize("Age: 40") is None

    def test_abnormal_does_not_count_as_normal(self) -> None:
        definition = FieldDefinition(
            "rbc",
            ValueKind.CHOICE,
            choices=(
                ("normal", ("normal rbc",)),
                ("abnormal", ("abnormal rbc",)),
            ),
        )
        assert ChoiceRecognizer(definition).recognize("Abnormal RBC") == "abnormal"


class TestFlagRecognizer:
    def _recognizer(self) -> FlagRecognizer:
        definition = FieldDefinition("htn", ValueKind.FLAG, ("hypertension", "htn"))
        return FlagRecognizer(definition)

    def test_topic_absent_leaves_field_unset(self) -> None:
        assert self._recognizer().recognize("Age: 40") is None

    def test_topic_with_yes(self) -> None:
        assert self._recognizer().recognize("Hypertension: Yes") == "yes"

    def test_topic_without_yes(self) -> None:
        assert self._recognizer().recognize("HTN: no") == "no"

    def test_yes_anywhere_in_report_counts(self) -> None:
        text = "Hypertension: no\nPedal edema: yes"
        assert self._recognizer().recognize(text) == "yes"

    def test_yes_must_be_a_word(self) -> None:
        assert self._recognizer().recognize("Hypertension since yesterday") == "no"

    def test_custom_flag_values(self) -> None:
        definition = FieldDefinition(
            "exang", ValueKind.FLAG, ("exercise angina",), flag_values=(1, 0)
        )
        assert FlagRecognizer(definition).recognize("Exercise angina: yes") == 1


class TestPressureRecognizer:
    def _recognizer(self) -> PressureRecognizer:
        definition = FieldDefinition(
            "blood_pressure", ValueKind.PRESSURE, ("blood pressure", "bp"), units=("mmhg",)
        )
        return PressureRecognizer(definition, _WINDOW)

    def test_label_then_reading(self) -> None:
        assert self._recognizer().recognize("BP: 120/80 mmHg") == "120/80"

    def test_reading_then_label(self) -> None:
        assert self._recognizer().recognize("130 / 85 mmHg blood pressure") == "130/85"

    def test_bare_reading_with_unit(self) -> None:
        assert self._recognizer().recognize("Vitals 118/76 mmHg") == "118/76"

    def test_no_reading(self) -> None:
        assert self._recognizer().recognize("BP: normal") is None


class TestBuildRecognizer:
    @pytest.mark.parametrize(
        ("definition", "expected_type"),
        [
            (FieldDefinition("a", ValueKind.INTEGER, ("a",)), NumberRecognizer),
            (FieldDefinition("a", ValueKind.DECIMAL, ("a",)), NumberRecognizer),
            (
                FieldDefinition("a", ValueKind.THRESHOLD, ("a",), threshold=1),
                ThresholdRecognizer,
            ),
            (FieldDefinition("a", ValueKind.CHOICE, choices=(("x", ("x",)),)), ChoiceRecognizer),
            (FieldDefinition("a", ValueKind.FLAG, ("a",)), FlagRecognizer),
            (FieldDefinition("a", ValueKind.PRESSURE, ("a",)), PressureRecognizer),
        ],
    )
    def test_dispatches_on_kind(
        self, definition: FieldDefinition, expected_type: type
    ) -> None:
        assert type(build_recognizer(definition, _WINDOW)) is expected_type
