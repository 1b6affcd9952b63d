class ExtractionError(Exception):
    """Base exception for text extraction failures. Never leaves the extractor."""


class DocxExtractionError(ExtractionError):
    """Raised when a Word document cannot be parsed."""
