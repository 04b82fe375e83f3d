from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    DEFAULT_MAX_PAGES = 3

    def __init__(self, max_pages: int = DEFAULT_MAX_PAGES) -> None:
        if max_pages < 1:
            raise ValueError(f"max_pages must be positive, got {max_pages}")
        self._max_pages = max_pages

    @property
    def max_pages(self) -> int:
        return self._max_pages

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from the leading pages of a PDF.

        Only the first ``max_pages`` pages are read. Page texts are joined
        with a newline in page order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text; empty string for a PDF without a text layer.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
