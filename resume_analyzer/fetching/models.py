from dataclasses import dataclass


@dataclass(frozen=True)
class StorageReference:
    """Location of an object inside the private object store."""

    bucket: str
    path: str

    def __str__(self) -> str:
        return f"{self.bucket}/{self.path}"


@dataclass(frozen=True)
class FetchedDocument:
    """Raw bytes of a fetched document plus the content type reported for it."""

    content: bytes
    content_type: str | None = None


DocumentSource = StorageReference | str
