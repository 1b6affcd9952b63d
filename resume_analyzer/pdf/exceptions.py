class PdfExtractionError(Exception):
    """Raised when a PDF document cannot be opened or read."""
