from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Each page's text runs are joined with single spaces and pages are
        joined with a newline. A page whose text layer is missing or broken
        contributes an empty string instead of failing the document.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text, stripped.

        Raises:
            PdfExtractionError: if the document itself cannot be opened.
        """
