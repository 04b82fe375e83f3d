class ScanError(Exception):
    """Base exception for every failure that aborts a scan."""

    code: str = "scan_error"


class UnsupportedFileTypeError(ScanError):
    """Raised when the document is neither a PDF nor an image."""

    code = "unsupported_file_type"


class AcquisitionError(ScanError):
    """Raised when OCR or PDF text extraction fails."""

    code = "acquisition_failure"


class UnidentifiedReportTypeError(ScanError):
    """Raised when the report text matches no known category."""

    code = "unidentified_report_type"


class InvalidFieldMapError(ScanError):
    """Raised when extracted fields do not fit the category schema."""

    code = "invalid_field_map"
