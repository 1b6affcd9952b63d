from typing import ClassVar

from resume_analyzer.config.settings import Settings
from resume_analyzer.inference.openai_client_adapter import OpenAIClientAdapter
from resume_analyzer.inference.profile_inference_client import ProfileInferenceClient


class ProfileInferenceClientFactory:
    """Creates the configured profile inference client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "ollama": "http://localhost:11434/v1",
    }
    # Local providers that accept requests without a credential.
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> ProfileInferenceClient:
        """Create a profile inference client from application settings.

        A missing API key is not an error here; it surfaces on each request
        through the fallback profile's error message.
        """
        provider = settings.inference_provider.strip().lower()
        client = OpenAIClientAdapter(
            api_key=settings.inference_api_key,
            timeout_seconds=settings.inference_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            require_api_key=provider not in cls.KEYLESS_PROVIDERS,
        )
        return ProfileInferenceClient(
            client=client,
            model=settings.inference_model_name,
            temperature=settings.inference_temperature,
            max_input_chars=settings.inference_max_input_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        explicit = settings.inference_base_url.strip()
        if provider == "openai":
            return explicit or None
        if provider == "openai_compatible":
            if not explicit:
                raise ValueError(
                    "inference_base_url is required for inference_provider=openai_compatible"
                )
            return explicit
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return explicit or default_base_url
        supported = ["openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
        raise ValueError(
            f"Unknown inference provider '{provider}'. Choose from: {supported}"
        )
