from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all image OCR adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Run full-document OCR on an encoded image.

        Args:
            image_bytes: Raw image file content (PNG, JPEG, TIFF, ...).

        Returns:
            Recognized text, stripped. Empty string when nothing was read.

        Raises:
            OcrError: if the image cannot be decoded or the engine fails.
        """
