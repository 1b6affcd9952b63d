from typing import Any

import pymupdf

from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError

# Position of the word string in the tuples returned by get_text("words").
_WORD_TEXT_INDEX = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [
                    self._page_text(page, number)
                    for number, page in enumerate(doc, start=1)
                ]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc

    @staticmethod
    def _page_text(page: Any, number: int) -> str:
        try:
            words = page.get_text("words")
            return " ".join(word[_WORD_TEXT_INDEX] for word in words)
        except Exception as exc:
            Log.warning(f"pymupdf could not read page {number}: {exc}")
            return ""
