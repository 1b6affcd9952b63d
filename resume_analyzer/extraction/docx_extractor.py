import io

import docx

from resume_analyzer.extraction.exceptions import DocxExtractionError


class DocxExtractor:
    """Extracts body paragraph text from Word documents using python-docx.

    Headers, footers, styling and embedded objects are ignored.
    """

    def extract(self, docx_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(docx_bytes))
            paragraphs = [paragraph.text for paragraph in document.paragraphs]
        except Exception as exc:
            raise DocxExtractionError(f"python-docx extraction failed: {exc}") from exc
        return "\n".join(paragraphs).strip()
