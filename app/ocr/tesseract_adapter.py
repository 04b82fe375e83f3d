import io

import pytesseract
from PIL import Image

from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes image text with Tesseract at default engine settings.

    ``tesseract_cmd`` is written to ``pytesseract.pytesseract.tesseract_cmd``,
    which pytesseract reads for every call in the process. An empty value
    leaves pytesseract's binary lookup untouched.
    """

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                text = pytesseract.image_to_string(image, lang=self._language)
            return text.strip()
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
