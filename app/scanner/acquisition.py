import asyncio
from collections.abc import Callable

from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError
from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError
from app.scanner.exceptions import AcquisitionError, UnsupportedFileTypeError
from app.scanner.models import RawDocument


class TextAcquirer:
    """Turns a PDF or image document into raw text.

    Adapters are blocking; they run in a worker thread so callers can await
    acquisition without stalling the event loop.
    """

    def __init__(self, pdf_extractor: BasePdfExtractor, ocr_engine: BaseOcrEngine) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine

    async def acquire(self, document: RawDocument) -> str:
        """Return the document text.

        Raises:
            UnsupportedFileTypeError: if the MIME type is neither PDF nor image.
            AcquisitionError: if the adapter fails or returns no text value.
        """
        adapter = self._select_adapter(document)
        try:
            text = await asyncio.to_thread(adapter, document.content)
        except (PdfExtractionError, OcrError) as exc:
            raise AcquisitionError(str(exc)) from exc
        if not isinstance(text, str):
            raise AcquisitionError(
                f"Text acquisition returned no usable output for '{document.media_type}'"
            )
        Log.info(f"Acquired {len(text)} chars from {document.media_type} document")
        return text

    def _select_adapter(self, document: RawDocument) -> Callable[[bytes], str]:
        if document.is_pdf:
            return self._pdf_extractor.extract
        if document.is_image:
            return self._ocr_engine.recognize
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{document.mime_type}'. "
            "Please upload a PDF or image file."
        )
