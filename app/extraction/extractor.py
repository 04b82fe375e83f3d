from app.extraction.models import (
    FieldMap,
    FieldSchema,
    PanelResult,
    ReportCategory,
)
from app.extraction.recognizers import FieldRecognizer, build_recognizer
from app.extraction.schemas import CATEGORY_SCHEMAS, PANEL_SCHEMA
from app.logging.logger import Log


class _CompiledSchema:
    """A field table with every row compiled to its recognizer."""

    def __init__(self, schema: FieldSchema, lookahead_chars: int) -> None:
        self.schema = schema
        self.recognizers: list[FieldRecognizer] = [
            build_recognizer(definition, lookahead_chars) for definition in schema.fields
        ]

    def apply(self, text: str) -> FieldMap:
        values: FieldMap = {}
        for recognizer in self.recognizers:
            definition = recognizer.definition
            value = recognizer.recognize(text)
            if value is None:
                Log.debug(f"[{self.schema.name}] {definition.key} not found")
                continue
            for key in definition.keys:
                values[key] = value
        return values


class FieldExtractor:
    """Schema-driven field extraction for every report category.

    Tables are compiled once at construction; ``extract`` is a pure function
    of its arguments and never raises for unmatched or malformed text.
    """

    DEFAULT_LOOKAHEAD_CHARS = 40

    def __init__(
        self,
        schemas: dict[ReportCategory, FieldSchema] | None = None,
        panel_schema: FieldSchema | None = None,
        lookahead_chars: int = DEFAULT_LOOKAHEAD_CHARS,
    ) -> None:
        if lookahead_chars < 0:
            raise ValueError(f"lookahead_chars must be >= 0, got {lookahead_chars}")
        tables = CATEGORY_SCHEMAS if schemas is None else schemas
        self._compiled = {
            category: _CompiledSchema(schema, lookahead_chars)
            for category, schema in tables.items()
        }
        self._panel = _CompiledSchema(panel_schema or PANEL_SCHEMA, lookahead_chars)

    def schema_for(self, category: ReportCategory) -> FieldSchema | None:
        compiled = self._compiled.get(category)
        return compiled.schema if compiled else None

    def extract(self, category: ReportCategory, text: str) -> FieldMap:
        """Populate the category's fields found in ``text``.

        Unknown categories and empty text yield an empty map.
        """
        compiled = self._compiled.get(category)
        if compiled is None or not text:
            return {}
        values = compiled.apply(text)
        Log.debug(
            f"[{compiled.schema.name}] extracted {len(values)} fields: {sorted(values)}"
        )
        return values

    def extract_panel(self, text: str) -> PanelResult:
        """Flat parse of common lab and vital parameters, regardless of category."""
        values = self._panel.apply(text) if text else {}
        return PanelResult(values=values, raw_text=text)
