from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    storage_url: str = ""
    storage_service_key: str = ""
    storage_default_bucket: str = "resumes"
    fetch_timeout_seconds: int = 30

    pdf_engine: str = "pdfplumber"
    min_content_chars: int = 50

    inference_provider: str = "openai"
    inference_api_key: str = ""
    inference_model_name: str = "gpt-4o-mini"
    inference_base_url: str = ""
    inference_temperature: float = 0.0
    inference_timeout_seconds: int = 30
    inference_max_input_chars: int = 120_000
