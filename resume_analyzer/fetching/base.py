from abc import ABC, abstractmethod

from resume_analyzer.fetching.models import FetchedDocument, StorageReference


class BaseObjectStorage(ABC):
    """Contract for private object store adapters."""

    @abstractmethod
    def download(self, reference: StorageReference) -> FetchedDocument:
        """Download an object with the service credentials.

        Args:
            reference: Bucket and object path.

        Returns:
            FetchedDocument with the object bytes and its content type.

        Raises:
            DocumentNotFoundError: if the object does not exist.
            StorageUnavailableError: if the store cannot be reached or
                                     credentials are missing.
        """

    @abstractmethod
    def resolve_url(self, url: str) -> StorageReference | None:
        """Return the storage reference a URL points to, or None if it is foreign."""

    def close(self) -> None:
        """Release connections held by the adapter. No-op by default."""
