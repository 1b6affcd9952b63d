from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

from resume_analyzer.fetching.models import DocumentSource, StorageReference
from resume_analyzer.inference.models import ResumeProfile
from resume_analyzer.processor.exceptions import MissingSourceError

DEFAULT_BUCKET = "resumes"
DEFAULT_FILE_NAME = "resume"


@dataclass(frozen=True)
class AnalysisRequest:
    """Where to find the resume and what it is called."""

    storage_path: str | None = None
    bucket: str = DEFAULT_BUCKET
    file_url: str | None = None
    file_name: str | None = None

    def source(self) -> DocumentSource:
        """Return the storage reference or URL to fetch, preferring the storage path.

        Raises:
            MissingSourceError: if neither a storage path nor an http(s) URL is given.
        """
        path = (self.storage_path or "").strip().lstrip("/")
        if path:
            bucket = (self.bucket or "").strip() or DEFAULT_BUCKET
            return StorageReference(bucket=bucket, path=path)
        url = (self.file_url or "").strip()
        if urlsplit(url).scheme in ("http", "https"):
            return url
        raise MissingSourceError("Request must include a storagePath or an http(s) fileUrl")

    def display_name(self) -> str:
        """Declared file name, else the basename of the source, else a generic name."""
        if self.file_name and self.file_name.strip():
            return self.file_name.strip()
        candidates = [self.storage_path or "", unquote(urlsplit(self.file_url or "").path)]
        for candidate in candidates:
            name = PurePosixPath(candidate.strip()).name
            if name:
                return name
        return DEFAULT_FILE_NAME


@dataclass(frozen=True)
class ResumeDocument:
    """Raw bytes of one resume, owned by a single pipeline run."""

    content: bytes
    file_name: str
    content_type: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Response envelope: the profile plus whether any stage degraded."""

    ok: bool
    profile: ResumeProfile
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"ok": self.ok}
        if self.error:
            payload["error"] = self.error
        payload.update(self.profile.to_dict())
        return payload
