from app.extraction.exceptions import FieldMapValidationError
from app.extraction.extractor import FieldExtractor
from app.extraction.models import ReportCategory
from app.extraction.validator import validate_field_map
from app.logging.logger import Log
from app.normalization.base import BaseTextNormalizer
from app.normalization.exceptions import NormalizationError
from app.scanner import confidence
from app.scanner.acquisition import TextAcquirer
from app.scanner.classifier import ReportClassifier
from app.scanner.exceptions import (
    AcquisitionError,
    InvalidFieldMapError,
    UnidentifiedReportTypeError,
)
from app.scanner.pipeline import ScanContext, ScanStep


class AcquireTextStep(ScanStep):
    def __init__(self, acquirer: TextAcquirer) -> None:
        self._acquirer = acquirer

    async def run(self, context: ScanContext) -> ScanContext:
        if context.document is None:
            raise ValueError("ScanContext.document must be set before text acquisition")
        context.raw_text = await self._acquirer.acquire(context.document)
        return context


class NormalizeTextStep(ScanStep):
    def __init__(self, normalizer: BaseTextNormalizer) -> None:
        self._normalizer = normalizer

    async def run(self, context: ScanContext) -> ScanContext:
        try:
            context.text = self._normalizer.normalize(context.raw_text)
        except NormalizationError as exc:
            raise AcquisitionError(str(exc)) from exc
        Log.debug(f"Normalized text preview: {Log.preview(context.text)}")
        return context


class ClassifyStep(ScanStep):
    def __init__(self, classifier: ReportClassifier) -> None:
        self._classifier = classifier

    async def run(self, context: ScanContext) -> ScanContext:
        context.category = self._classifier.classify(context.text)
        Log.info(
            f"Detected report type '{context.category.value}' "
            f"from {len(context.text)} chars"
        )
        if context.category is ReportCategory.UNKNOWN:
            raise UnidentifiedReportTypeError(
                "Could not identify report type. "
                "Please ensure the report contains clear medical terminology."
            )
        return context


class ExtractFieldsStep(ScanStep):
    def __init__(self, extractor: FieldExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: ScanContext) -> ScanContext:
        values = self._extractor.extract(context.category, context.text)
        schema = self._extractor.schema_for(context.category)
        if schema is None:
            raise InvalidFieldMapError(
                f"No field schema for report type '{context.category.value}'"
            )
        try:
            context.values = validate_field_map(schema, values)
        except FieldMapValidationError as exc:
            raise InvalidFieldMapError(str(exc)) from exc
        Log.info(f"Extracted {len(context.values)} {context.category.value} fields")
        return context


class ScoreConfidenceStep(ScanStep):
    def __init__(self, expected_counts: dict[ReportCategory, int] | None = None) -> None:
        self._expected_counts = expected_counts

    async def run(self, context: ScanContext) -> ScanContext:
        context.confidence = confidence.score(
            context.category,
            len(context.values),
            self._expected_counts,
        )
        Log.info(f"Extraction confidence: {context.confidence:.1f}%")
        return context
