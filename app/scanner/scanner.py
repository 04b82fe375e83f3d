from app.config.settings import Settings
from app.extraction.extractor import FieldExtractor
from app.logging.logger import Log
from app.normalization.text_normalizer import TextNormalizer
from app.ocr.base import BaseOcrEngine
from app.ocr.factory import OcrEngineFactory
from app.pdf.base import BasePdfExtractor
from app.pdf.factory import PdfExtractorFactory
from app.scanner.acquisition import TextAcquirer
from app.scanner.classifier import ReportClassifier
from app.scanner.exceptions import ScanError
from app.scanner.models import ExtractionResult, RawDocument, ScanResult
from app.scanner.pipeline import ScanContext, ScanStep
from app.scanner.steps import (
    AcquireTextStep,
    ClassifyStep,
    ExtractFieldsStep,
    NormalizeTextStep,
    ScoreConfidenceStep,
)


class ReportScanner:
    """Orchestrates the report understanding pipeline.

    Pipeline: acquire -> normalize -> classify -> extract -> score.
    Steps run sequentially; any ScanError ends the scan with a failed result
    and no partial data.
    """

    def __init__(self, acquire_step: ScanStep, analysis_steps: list[ScanStep]) -> None:
        self._acquire_step = acquire_step
        self._analysis_steps = analysis_steps

    async def scan(self, document: RawDocument) -> ScanResult:
        """Run the full pipeline for an uploaded document."""
        Log.info(
            f"Scanning '{document.filename or 'document'}' "
            f"({document.media_type}, {len(document.content)} bytes)"
        )
        context = ScanContext(document=document)
        return await self._run([self._acquire_step, *self._analysis_steps], context)

    async def scan_text(self, raw_text: str) -> ScanResult:
        """Run the pipeline on already acquired text."""
        context = ScanContext(raw_text=raw_text)
        return await self._run(self._analysis_steps, context)

    async def _run(self, steps: list[ScanStep], context: ScanContext) -> ScanResult:
        try:
            for step in steps:
                context = await step.run(context)
        except ScanError as exc:
            Log.error(f"Scan failed ({exc.code}): {exc}")
            return ScanResult.failure(exc)

        result = ExtractionResult(
            report_type=context.category,
            values=context.values,
            confidence=context.confidence,
        )
        Log.info(
            f"Scan complete: {result.report_type.value}, {len(result.values)} fields, "
            f"{result.confidence:.1f}% confidence"
        )
        return ScanResult.ok(result)


def build_scanner(
    settings: Settings,
    pdf_extractor: BasePdfExtractor | None = None,
    ocr_engine: BaseOcrEngine | None = None,
) -> ReportScanner:
    """Configure logging and build a ReportScanner with all required adapters."""
    Log.configure(settings.log_level)
    acquirer = TextAcquirer(
        pdf_extractor=pdf_extractor or PdfExtractorFactory.create(settings),
        ocr_engine=ocr_engine or OcrEngineFactory.create(settings),
    )
    extractor = FieldExtractor(lookahead_chars=settings.value_lookahead_chars)
    return ReportScanner(
        acquire_step=AcquireTextStep(acquirer),
        analysis_steps=[
            NormalizeTextStep(TextNormalizer()),
            ClassifyStep(ReportClassifier()),
            ExtractFieldsStep(extractor),
            ScoreConfidenceStep(),
        ],
    )
