from app.extraction.extractor import FieldExtractor
from app.extraction.models import FieldMap, FieldValue, PanelResult, ReportCategory
from app.extraction.schemas import (
    CATEGORY_SCHEMAS,
    EXPECTED_FIELD_COUNTS,
    expected_field_count,
    schema_fields,
)

__all__ = [
    "CATEGORY_SCHEMAS",
    "EXPECTED_FIELD_COUNTS",
    "FieldExtractor",
    "FieldMap",
    "FieldValue",
    "PanelResult",
    "ReportCategory",
    "expected_field_count",
    "schema_fields",
]
