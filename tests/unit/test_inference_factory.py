"""Tests for ProfileInferenceClientFactory."""

from unittest.mock import patch

import pytest

from resume_analyzer.config.settings import Settings
from resume_analyzer.inference.factory import ProfileInferenceClientFactory
from resume_analyzer.inference.profile_inference_client import ProfileInferenceClient

_ADAPTER_PATH = "resume_analyzer.inference.factory.OpenAIClientAdapter"


class TestProfileInferenceClientFactory:
    def test_creates_profile_inference_client(self) -> None:
        settings = Settings(inference_provider="openai", inference_api_key="test-key")
        with patch(_ADAPTER_PATH):
            client = ProfileInferenceClientFactory.create(settings)
        assert isinstance(client, ProfileInferenceClient)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            inference_provider="openai",
            inference_api_key="openai-key",
            inference_timeout_seconds=42,
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            ProfileInferenceClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
            require_api_key=True,
        )

    def test_missing_key_does_not_fail_creation(self) -> None:
        settings = Settings(inference_provider="openai", inference_api_key="")
        with patch(_ADAPTER_PATH):
            client = ProfileInferenceClientFactory.create(settings)
        assert isinstance(client, ProfileInferenceClient)

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(inference_provider="openrouter", inference_api_key="k")
        with patch(_ADAPTER_PATH) as mock_adapter:
            ProfileInferenceClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://openrouter.ai/api/v1",
            require_api_key=True,
        )

    def test_gemini_uses_openai_compatible_endpoint(self) -> None:
        settings = Settings(inference_provider="Gemini", inference_api_key="k")
        with patch(_ADAPTER_PATH) as mock_adapter:
            ProfileInferenceClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == (
            "https://generativelanguage.googleapis.com/v1beta/openai/"
        )

    def test_ollama_does_not_require_key(self) -> None:
        settings = Settings(inference_provider="ollama")
        with patch(_ADAPTER_PATH) as mock_adapter:
            ProfileInferenceClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["require_api_key"] is False

    def test_explicit_base_url_overrides_provider_default(self) -> None:
        settings = Settings(
            inference_provider="groq",
            inference_api_key="k",
            inference_base_url="https://proxy.internal/v1",
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            ProfileInferenceClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://proxy.internal/v1"

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            inference_provider="openai_compatible",
            inference_api_key="k",
            inference_base_url="https://llm.test/v1",
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            ProfileInferenceClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://llm.test/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(inference_provider="openai_compatible", inference_api_key="k")
        with pytest.raises(ValueError, match="inference_base_url"):
            ProfileInferenceClientFactory.create(settings)

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(inference_provider="unknown", inference_api_key="k")
        with pytest.raises(ValueError, match="Unknown inference provider"):
            ProfileInferenceClientFactory.create(settings)
