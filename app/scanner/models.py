from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from app.extraction.models import FieldValue, ReportCategory
from app.scanner.exceptions import ScanError

PDF_MIME_TYPE = "application/pdf"
IMAGE_MIME_PREFIX = "image/"


@dataclass(frozen=True)
class RawDocument:
    """Uploaded file content, consumed once by text acquisition."""

    content: bytes
    mime_type: str
    filename: str = ""

    @property
    def media_type(self) -> str:
        """MIME type without parameters, lowercased."""
        return self.mime_type.split(";", 1)[0].strip().lower()

    @property
    def is_pdf(self) -> bool:
        return self.media_type == PDF_MIME_TYPE

    @property
    def is_image(self) -> bool:
        return self.media_type.startswith(IMAGE_MIME_PREFIX)


@dataclass(frozen=True)
class ExtractionResult:
    """Classified report with its typed field map and completeness score."""

    report_type: ReportCategory
    values: Mapping[str, FieldValue] = field(default_factory=dict)
    confidence: float = 0.0

    def __post_init__(self) -> None:
        if self.report_type is ReportCategory.UNKNOWN:
            raise ValueError("ExtractionResult requires an identified report type")
        if not 0.0 <= self.confidence <= 100.0:
            raise ValueError(f"confidence must be within [0, 100], got {self.confidence}")
        # read-only snapshot, detached from the pipeline's working dict
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))


@dataclass(frozen=True)
class ScanResult:
    """Either a complete ExtractionResult or the error that stopped the scan."""

    success: bool
    data: ExtractionResult | None = None
    error: ScanError | None = None

    @classmethod
    def ok(cls, data: ExtractionResult) -> "ScanResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: ScanError) -> "ScanResult":
        return cls(success=False, error=error)

    @property
    def error_message(self) -> str:
        return str(self.error) if self.error is not None else ""
