import httpx
import openai

from resume_analyzer.inference.client_base import BaseCompletionClient
from resume_analyzer.inference.exceptions import (
    InferenceConfigurationError,
    InferenceError,
    InferenceHttpError,
    InferenceNetworkError,
    InferenceTimeoutError,
)


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        require_api_key: bool = True,
    ) -> None:
        self._api_key = api_key
        self._require_api_key = require_api_key
        # No retries: a fresh request from the caller is the retry unit.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        if self._require_api_key and not self._api_key:
            raise InferenceConfigurationError("Inference API key is not configured")
        if not model:
            raise InferenceConfigurationError("Inference model name is not configured")

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "resume_profile",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise InferenceTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise InferenceNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise InferenceHttpError(
                f"AI provider returned {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except openai.APIError as exc:
            raise InferenceHttpError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise InferenceError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise InferenceError("AI returned empty response")
        return content
