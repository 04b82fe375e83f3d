from abc import ABC, abstractmethod


class BaseTextNormalizer(ABC):
    """Contract for raw report text normalizers."""

    @abstractmethod
    def normalize(self, text: str) -> str:
        """Clean OCR / PDF text before classification and field extraction.

        Args:
            text: Raw text produced by text acquisition.

        Returns:
            Normalized text with the same line structure. Empty input
            yields an empty string.

        Raises:
            NormalizationError: on any failure.
        """
