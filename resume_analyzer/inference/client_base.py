from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the provider response as plain text.

        Raises:
            InferenceNetworkError: the provider could not be reached or timed out.
            InferenceHttpError: the provider answered with an error status.
            InferenceConfigurationError: credentials are missing.
            InferenceError: the provider returned no content.
        """
