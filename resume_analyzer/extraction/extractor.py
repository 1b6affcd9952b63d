from resume_analyzer.extraction.docx_extractor import DocxExtractor
from resume_analyzer.extraction.exceptions import ExtractionError
from resume_analyzer.extraction.models import DocumentFormat
from resume_analyzer.extraction.text_normalizer import normalize_text
from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError


class TextExtractor:
    """Turns raw document bytes into normalized plain text.

    Never raises: a document that cannot be parsed yields an empty string,
    which the processor treats as low content.
    """

    def __init__(self, pdf_extractor: BasePdfExtractor, docx_extractor: DocxExtractor) -> None:
        self._pdf_extractor = pdf_extractor
        self._docx_extractor = docx_extractor

    def extract(
        self,
        content: bytes,
        file_name: str | None = None,
        content_type: str | None = None,
    ) -> str:
        if not content:
            Log.info(f"No bytes to extract for {file_name!r}")
            return ""

        document_format = DocumentFormat.detect(file_name, content_type, content)
        try:
            raw_text = self._extract_raw(content, document_format)
        except (ExtractionError, PdfExtractionError) as exc:
            Log.warning(f"Extraction failed for {file_name!r} ({document_format.value}): {exc}")
            return ""

        text = normalize_text(raw_text)
        Log.info(
            f"Extracted {len(text)} chars from {file_name!r} ({document_format.value})"
        )
        return text

    def _extract_raw(self, content: bytes, document_format: DocumentFormat) -> str:
        if document_format is DocumentFormat.PDF:
            return self._pdf_extractor.extract(content)
        if document_format in (DocumentFormat.DOCX, DocumentFormat.DOC):
            # Legacy .doc uploads are frequently DOCX files with the old suffix.
            return self._docx_extractor.extract(content)
        return content.decode("utf-8", errors="replace")
