from unittest.mock import MagicMock, patch

import pytest

from resume_analyzer.pdf.exceptions import PdfExtractionError
from resume_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(sample_pdf_bytes)
        assert "Hello PDF World" in result

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(multi_page_pdf_bytes)
        assert result.splitlines() == ["Page one content", "Page two content"]

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfAdapter().extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError):
            PyMuPdfAdapter().extract(b"not a pdf")

    def test_broken_page_contributes_empty_string(self) -> None:
        good_page = MagicMock()
        good_page.get_text.return_value = [
            (0, 0, 10, 10, "Python", 0, 0, 0),
            (12, 0, 30, 10, "Developer", 0, 0, 1),
        ]
        broken_page = MagicMock()
        broken_page.get_text.side_effect = RuntimeError("no text layer")
        doc = MagicMock()
        doc.__enter__.return_value = doc
        doc.__iter__.return_value = iter([broken_page, good_page])

        with patch(
            "resume_analyzer.pdf.pymupdf_adapter.pymupdf.open",
            return_value=doc,
        ):
            result = PyMuPdfAdapter().extract(b"%PDF-fake")

        assert result == "Python Developer"
        good_page.get_text.assert_called_once_with("words")
