from app.extraction.models import ReportCategory
from app.extraction.schemas import EXPECTED_FIELD_COUNTS


def score(
    category: ReportCategory,
    field_count: int,
    expected_counts: dict[ReportCategory, int] | None = None,
) -> float:
    """Percentage of the category's expected fields that were found, capped at 100.

    Raises:
        ValueError: for a negative count or a category without an expected count.
    """
    if field_count < 0:
        raise ValueError(f"field_count must be >= 0, got {field_count}")
    counts = EXPECTED_FIELD_COUNTS if expected_counts is None else expected_counts
    expected = counts.get(category)
    if not expected:
        raise ValueError(f"No expected field count for category '{category.value}'")
    return min(100.0, field_count / expected * 100)
