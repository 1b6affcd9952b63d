from typing import ClassVar
from urllib.parse import quote, unquote, urlsplit

import httpx

from resume_analyzer.fetching.base import BaseObjectStorage
from resume_analyzer.fetching.exceptions import DocumentNotFoundError, StorageUnavailableError
from resume_analyzer.fetching.models import FetchedDocument, StorageReference


class SupabaseStorage(BaseObjectStorage):
    """Downloads private objects through the Supabase Storage REST API."""

    OBJECT_PREFIX: ClassVar[str] = "/storage/v1/object/"
    # Optional access segment between the prefix and the bucket name.
    ACCESS_SEGMENTS: ClassVar[frozenset[str]] = frozenset(
        {"public", "sign", "authenticated"}
    )

    def __init__(
        self,
        *,
        base_url: str,
        service_key: str,
        timeout_seconds: int,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._service_key = service_key
        self._owns_client = http_client is None
        self._client = (
            http_client if http_client is not None else httpx.Client(timeout=timeout_seconds)
        )

    def download(self, reference: StorageReference) -> FetchedDocument:
        if not self._base_url or not self._service_key:
            raise StorageUnavailableError(
                "Object storage is not configured: STORAGE_URL and "
                "STORAGE_SERVICE_KEY are required"
            )
        url = f"{self._base_url}{self.OBJECT_PREFIX}{reference.bucket}/{quote(reference.path)}"
        try:
            response = self._client.get(
                url,
                headers={
                    "Authorization": f"Bearer {self._service_key}",
                    "apikey": self._service_key,
                },
            )
        except httpx.TimeoutException as exc:
            raise StorageUnavailableError(f"Object storage timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise StorageUnavailableError(f"Object storage unreachable: {exc}") from exc

        if self._is_not_found(response):
            raise DocumentNotFoundError(f"Object not found: {reference}")
        if not response.is_success:
            raise StorageUnavailableError(
                f"Object storage returned {response.status_code} for {reference}"
            )
        return FetchedDocument(
            content=response.content,
            content_type=response.headers.get("content-type"),
        )

    def resolve_url(self, url: str) -> StorageReference | None:
        if not self._base_url:
            return None
        parts = urlsplit(url)
        own = urlsplit(self._base_url)
        if parts.netloc.lower() != own.netloc.lower():
            return None
        if not parts.path.startswith(self.OBJECT_PREFIX):
            return None

        segments = parts.path[len(self.OBJECT_PREFIX):].split("/")
        if segments and segments[0] in self.ACCESS_SEGMENTS:
            segments = segments[1:]
        if len(segments) < 2:
            return None
        bucket, path = segments[0], unquote("/".join(segments[1:]))
        if not bucket or not path:
            return None
        return StorageReference(bucket=bucket, path=path)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    @staticmethod
    def _is_not_found(response: httpx.Response) -> bool:
        if response.status_code == 404:
            return True
        # Supabase reports missing objects as 400 with a not_found payload.
        if response.status_code == 400:
            body = response.text.lower()
            return "not_found" in body or "not found" in body
        return False
