import io

import pdfplumber
from pdfplumber.page import Page

from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [
                    self._page_text(page, number)
                    for number, page in enumerate(pdf.pages, start=1)
                ]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc

    @staticmethod
    def _page_text(page: Page, number: int) -> str:
        try:
            return " ".join(word["text"] for word in page.extract_words())
        except Exception as exc:
            Log.warning(f"pdfplumber could not read page {number}: {exc}")
            return ""
