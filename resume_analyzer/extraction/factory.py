from typing import ClassVar

from resume_analyzer.config.settings import Settings
from resume_analyzer.extraction.docx_extractor import DocxExtractor
from resume_analyzer.extraction.extractor import TextExtractor
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Creates a TextExtractor wired with the configured PDF engine."""

    PDF_ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            pdf_extractor=cls.create_pdf_extractor(settings.pdf_engine),
            docx_extractor=DocxExtractor(),
        )

    @classmethod
    def create_pdf_extractor(cls, engine: str) -> BasePdfExtractor:
        key = engine.strip().lower()
        adapter_cls = cls.PDF_ENGINES.get(key)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{key}'. Choose from: {sorted(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
