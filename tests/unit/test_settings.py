import pytest
from pydantic import ValidationError

from resume_analyzer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_storage_bucket(self) -> None:
        s = Settings()
        assert s.storage_default_bucket == "resumes"

    def test_default_fetch_timeout(self) -> None:
        s = Settings()
        assert s.fetch_timeout_seconds == 30

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_min_content_chars(self) -> None:
        s = Settings()
        assert s.min_content_chars == 50

    def test_default_inference_provider(self) -> None:
        s = Settings()
        assert s.inference_provider == "openai"

    def test_default_inference_limits(self) -> None:
        s = Settings()
        assert s.inference_timeout_seconds == 30
        assert s.inference_max_input_chars == 120_000


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_storage_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_URL", "https://proj.supabase.co")
        s = Settings()
        assert s.storage_url == "https://proj.supabase.co"

    def test_loads_inference_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INFERENCE_PROVIDER", "groq")
        s = Settings()
        assert s.inference_provider == "groq"

    def test_loads_min_content_chars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIN_CONTENT_CHARS", "80")
        s = Settings()
        assert s.min_content_chars == 80


class TestSettingsValidation:
    def test_invalid_api_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ValidationError):
            Settings()
