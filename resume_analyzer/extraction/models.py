from enum import Enum
from pathlib import PurePosixPath


class DocumentFormat(str, Enum):
    """Document formats the extractor knows how to read."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    TEXT = "text"
    UNKNOWN = "unknown"

    @classmethod
    def detect(
        cls,
        file_name: str | None,
        content_type: str | None,
        content: bytes = b"",
    ) -> "DocumentFormat":
        """Pick a format from the file suffix, then the content type, then magic bytes.

        The declared suffix wins over a content type because storage metadata
        is often a generic ``application/octet-stream``.
        """
        for candidate in (
            cls.from_file_name(file_name),
            cls.from_content_type(content_type),
            cls.from_magic(content),
        ):
            if candidate is not cls.UNKNOWN:
                return candidate
        return cls.UNKNOWN

    @classmethod
    def from_file_name(cls, file_name: str | None) -> "DocumentFormat":
        if not file_name:
            return cls.UNKNOWN
        suffix = PurePosixPath(file_name.strip()).suffix.lower()
        return cls(_SUFFIX_FORMATS.get(suffix, cls.UNKNOWN.value))

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "DocumentFormat":
        if not content_type:
            return cls.UNKNOWN
        mime = content_type.split(";", 1)[0].strip().lower()
        if mime.startswith("text/"):
            return cls.TEXT
        return cls(_CONTENT_TYPE_FORMATS.get(mime, cls.UNKNOWN.value))

    @classmethod
    def from_magic(cls, content: bytes) -> "DocumentFormat":
        if content.startswith(b"%PDF-"):
            return cls.PDF
        if content.startswith(b"PK\x03\x04"):
            return cls.DOCX
        if content.startswith(b"\xd0\xcf\x11\xe0"):
            return cls.DOC
        return cls.UNKNOWN


_SUFFIX_FORMATS: dict[str, str] = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "doc",
    ".txt": "text",
    ".md": "text",
    ".text": "text",
}

_CONTENT_TYPE_FORMATS: dict[str, str] = {
    "application/pdf": "pdf",
    "application/x-pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "application/msword": "doc",
}
