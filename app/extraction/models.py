from dataclasses import dataclass, field
from enum import Enum

FieldValue = int | float | str
FieldMap = dict[str, FieldValue]


class ReportCategory(str, Enum):
    """Closed set of report types a document can be classified as."""

    HEART = "heart"
    DIABETES = "diabetes"
    KIDNEY = "kidney"
    LIVER = "liver"
    UNKNOWN = "unknown"


class ValueKind(str, Enum):
    """How a field's value is recognized and typed."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    CHOICE = "choice"  # first choice whose phrase occurs
    FLAG = "flag"  # topic mentioned -> affirmative if "yes" occurs
    THRESHOLD = "threshold"  # captured number encoded as 1 above threshold, else 0
    PRESSURE = "pressure"  # "systolic/diastolic" reading


@dataclass(frozen=True)
class FieldDefinition:
    """One row of a field table.

    ``labels`` are plain phrases (case-insensitive, any run of spaces between
    words). ``units`` enable the value-before-label form and ``loose``
    enables the windowed label-then-value form. ``mirrors`` are extra keys
    that receive the same value.
    """

    key: str
    kind: ValueKind
    labels: tuple[str, ...] = ()
    units: tuple[str, ...] = ()
    loose: bool = False
    choices: tuple[tuple[FieldValue, tuple[str, ...]], ...] = ()
    flag_values: tuple[FieldValue, FieldValue] = ("yes", "no")
    threshold: float | None = None
    mirrors: tuple[str, ...] = ()

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key, *self.mirrors)

    @property
    def allowed_values(self) -> frozenset[FieldValue] | None:
        """Closed value set for enumerated kinds, None for free numbers."""
        if self.kind is ValueKind.CHOICE:
            return frozenset(value for value, _phrases in self.choices)
        if self.kind is ValueKind.FLAG:
            return frozenset(self.flag_values)
        if self.kind is ValueKind.THRESHOLD:
            return frozenset({0, 1})
        return None


@dataclass(frozen=True)
class FieldSchema:
    """Ordered field table. Later rows overwrite earlier rows sharing a key."""

    name: str
    fields: tuple[FieldDefinition, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for definition in self.fields:
            for key in definition.keys:
                seen.setdefault(key, None)
        return tuple(seen)

    def definitions_for(self, key: str) -> list[FieldDefinition]:
        return [d for d in self.fields if key in d.keys]


@dataclass(frozen=True)
class PanelResult:
    """Flat parameter parse of a report, independent of its category."""

    values: FieldMap = field(default_factory=dict)
    raw_text: str = ""
