class FetchError(Exception):
    """Base exception for all document fetch errors."""


class StorageUnavailableError(FetchError):
    """Raised when the object store cannot be reached or is not configured."""


class DocumentNotFoundError(FetchError):
    """Raised when the requested object does not exist in the store."""


class HttpFetchError(FetchError):
    """Raised when a plain HTTP download fails.

    ``status_code`` is None when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
