import json
from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from resume_analyzer.api.app import create_app
from resume_analyzer.config.settings import Settings
from resume_analyzer.extraction.factory import TextExtractorFactory
from resume_analyzer.fetching.fetcher import DocumentFetcher
from resume_analyzer.fetching.supabase_storage import SupabaseStorage
from resume_analyzer.inference.client_base import BaseCompletionClient
from resume_analyzer.inference.profile_inference_client import ProfileInferenceClient
from resume_analyzer.processor.processor import Processor
from resume_analyzer.processor.steps import (
    EstimateExperienceStep,
    ExtractTextStep,
    FetchDocumentStep,
    InferProfileStep,
)

STORAGE_URL = "https://project.supabase.test"

AI_RESPONSE = {
    "skills": ["Python", "PostgreSQL", "Docker", "Kubernetes", "AWS"],
    "job_role": "Senior Backend Engineer",
    "experience_years": 8,
    "ats_score": 86,
    "summary": [
        "Senior backend engineer with eight years of experience.",
        "Builds Python services on PostgreSQL.",
    ],
    "recommendations": ["Quantify the impact of each role"],
    "missing_skills": ["Terraform"],
    "strength_areas": ["Backend architecture"],
}


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        storage_url=STORAGE_URL,
        storage_service_key="service-key",
        inference_api_key="test-key",
    )


@pytest.fixture
def stored_objects() -> dict[str, tuple[bytes, str]]:
    """Objects served by the fake storage, keyed by ``bucket/path``."""
    return {}


@pytest.fixture
def storage_handler(
    stored_objects: dict[str, tuple[bytes, str]],
) -> Callable[[httpx.Request], httpx.Response]:
    prefix = "/storage/v1/object/"

    def handler(request: httpx.Request) -> httpx.Response:
        if request.headers.get("apikey") != "service-key":
            return httpx.Response(401)
        key = request.url.path[len(prefix):]
        if key not in stored_objects:
            return httpx.Response(
                400, json={"statusCode": "404", "error": "not_found", "message": "missing"}
            )
        content, content_type = stored_objects[key]
        return httpx.Response(200, content=content, headers={"content-type": content_type})

    return handler


@pytest.fixture
def completion_client() -> MagicMock:
    client = MagicMock(spec=BaseCompletionClient)
    client.create_chat_completion.return_value = json.dumps(AI_RESPONSE)
    return client


@pytest.fixture
def processor(
    test_settings: Settings,
    storage_handler: Callable[[httpx.Request], httpx.Response],
    completion_client: MagicMock,
) -> Processor:
    http_client = httpx.Client(transport=httpx.MockTransport(storage_handler))
    storage = SupabaseStorage(
        base_url=test_settings.storage_url,
        service_key=test_settings.storage_service_key,
        timeout_seconds=5,
        http_client=http_client,
    )
    fetcher = DocumentFetcher(storage, timeout_seconds=5, http_client=http_client)
    inference_client = ProfileInferenceClient(client=completion_client, model="test-model")
    return Processor(
        steps=[
            FetchDocumentStep(fetcher),
            ExtractTextStep(TextExtractorFactory.create(test_settings)),
            EstimateExperienceStep(),
            InferProfileStep(inference_client),
        ]
    )


@pytest.fixture
def api_client(test_settings: Settings, processor: Processor) -> TestClient:
    return TestClient(create_app(test_settings, processor))
