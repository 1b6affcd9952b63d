class InferenceError(Exception):
    """Raised when profile inference fails."""


class MalformedResponseError(InferenceError):
    """Raised when the service response holds no usable JSON object."""


class InferenceHttpError(InferenceError):
    """Raised when the inference service answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InferenceNetworkError(InferenceError):
    """Raised when the inference service cannot be reached."""


class InferenceTimeoutError(InferenceNetworkError):
    """Raised when the inference call exceeds its timeout."""


class InferenceConfigurationError(InferenceError):
    """Raised when the inference service credential or model is not configured."""
