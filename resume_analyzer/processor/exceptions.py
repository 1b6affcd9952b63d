class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InputError(ProcessorError):
    """Raised when a request cannot be processed at all."""


class MissingSourceError(InputError):
    """Raised when a request names neither a storage path nor a usable URL."""
