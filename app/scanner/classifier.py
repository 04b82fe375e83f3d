from typing import ClassVar

from app.extraction.models import ReportCategory

Vocabulary = tuple[tuple[ReportCategory, tuple[str, ...]], ...]


class ReportClassifier:
    """Keyword classifier for report text.

    Title markers are checked before clinical terms, each tier in its own
    fixed category order; the first category with a matching phrase wins.
    Matching is a case-insensitive substring test.
    """

    TITLE_MARKERS: ClassVar[Vocabulary] = (
        (ReportCategory.LIVER, ("liver function test", "lft", "liver report", "hepatic")),
        (ReportCategory.DIABETES, ("diabetes", "diabetic", "diabetes report", "glucose test")),
        (ReportCategory.KIDNEY, ("kidney", "renal", "kidney function test", "kft")),
        (
            ReportCategory.HEART,
            ("heart", "cardiac", "ecg", "electrocardiogram", "heart function test"),
        ),
    )

    CLINICAL_TERMS: ClassVar[Vocabulary] = (
        (ReportCategory.LIVER, ("bilirubin", "sgpt", "sgot", "alkaline phosphatase")),
        (ReportCategory.KIDNEY, ("creatinine", "urea", "glomerular", "nephrology")),
        (ReportCategory.DIABETES, ("insulin", "hba1c", "glycated hemoglobin")),
        (ReportCategory.HEART, ("chest pain", "angina", "coronary", "myocardial")),
    )

    def classify(self, text: str) -> ReportCategory:
        lower_text = text.lower()
        for tier in (self.TITLE_MARKERS, self.CLINICAL_TERMS):
            category = self._match(tier, lower_text)
            if category is not None:
                return category
        return ReportCategory.UNKNOWN

    @staticmethod
    def _match(tier: Vocabulary, lower_text: str) -> ReportCategory | None:
        for category, phrases in tier:
            if any(phrase in lower_text for phrase in phrases):
                return category
        return None


def classify(text: str) -> ReportCategory:
    """Classify report text with the default vocabulary."""
    return ReportClassifier().classify(text)
