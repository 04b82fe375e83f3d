from app.normalization.base import BaseTextNormalizer
from app.normalization.exceptions import NormalizationError
from app.normalization.text_normalizer import TextNormalizer

__all__ = ["BaseTextNormalizer", "NormalizationError", "TextNormalizer"]
