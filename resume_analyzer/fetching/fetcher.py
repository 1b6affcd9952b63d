import httpx

from resume_analyzer.fetching.base import BaseObjectStorage
from resume_analyzer.fetching.exceptions import HttpFetchError
from resume_analyzer.fetching.models import DocumentSource, FetchedDocument, StorageReference
from resume_analyzer.logging.logger import Log


class DocumentFetcher:
    """Retrieves resume bytes from the private object store or a plain URL.

    URLs that point into the object store are downloaded with the service
    credentials instead of an anonymous GET, since private buckets answer
    anonymous requests with an error page rather than the file.
    No retries happen here.
    """

    def __init__(
        self,
        storage: BaseObjectStorage,
        timeout_seconds: int,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._storage = storage
        self._owns_client = http_client is None
        self._client = (
            http_client
            if http_client is not None
            else httpx.Client(timeout=timeout_seconds, follow_redirects=True)
        )

    def fetch(self, source: DocumentSource) -> FetchedDocument:
        """Download the document behind a storage reference or URL.

        Raises:
            StorageUnavailableError: object store unreachable or not configured.
            DocumentNotFoundError: object missing from the store.
            HttpFetchError: plain URL download failed.
        """
        if isinstance(source, StorageReference):
            return self._download(source)

        reference = self._storage.resolve_url(source)
        if reference is not None:
            Log.info(f"URL points into object storage, downloading {reference} directly")
            return self._download(reference)
        return self._http_get(source)

    def close(self) -> None:
        """Close the storage adapter and the HTTP client this fetcher created."""
        self._storage.close()
        if self._owns_client:
            self._client.close()

    def _download(self, reference: StorageReference) -> FetchedDocument:
        document = self._storage.download(reference)
        Log.info(f"Downloaded {len(document.content)} bytes from storage {reference}")
        return document

    def _http_get(self, url: str) -> FetchedDocument:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise HttpFetchError(f"HTTP fetch failed for {url}: {exc}") from exc

        if not response.is_success:
            raise HttpFetchError(
                f"HTTP fetch returned {response.status_code} for {url}",
                status_code=response.status_code,
            )
        Log.info(f"Downloaded {len(response.content)} bytes from {url}")
        return FetchedDocument(
            content=response.content,
            content_type=response.headers.get("content-type"),
        )
