from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.extraction.models import FieldMap, ReportCategory
from app.scanner.models import RawDocument


@dataclass(slots=True)
class ScanContext:
    document: RawDocument | None = None
    raw_text: str = ""
    text: str = ""
    category: ReportCategory = ReportCategory.UNKNOWN
    values: FieldMap = field(default_factory=dict)
    confidence: float = 0.0


class ScanStep(ABC):
    @abstractmethod
    async def run(self, context: ScanContext) -> ScanContext:
        raise NotImplementedError
