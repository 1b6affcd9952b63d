from collections.abc import Sequence

from resume_analyzer.config.settings import Settings
from resume_analyzer.extraction.factory import TextExtractorFactory
from resume_analyzer.fetching.base import BaseObjectStorage
from resume_analyzer.fetching.fetcher import DocumentFetcher
from resume_analyzer.fetching.supabase_storage import SupabaseStorage
from resume_analyzer.inference.factory import ProfileInferenceClientFactory
from resume_analyzer.inference.sanitizer import fallback_profile
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.models import AnalysisRequest, AnalysisResult
from resume_analyzer.processor.pipeline import PipelineContext, PipelineStage, PipelineStep
from resume_analyzer.processor.steps import (
    EstimateExperienceStep,
    ExtractTextStep,
    FetchDocumentStep,
    InferProfileStep,
)


class Processor:
    """Runs one resume through fetch -> extract -> estimate -> infer.

    Every stage degrades instead of failing, so a complete profile is always
    returned. Only a request without any usable source raises
    (MissingSourceError). Each external call is attempted once per run.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, request: AnalysisRequest) -> AnalysisResult:
        source = request.source()
        context = PipelineContext(source=source, file_name=request.display_name())
        Log.info(f"Analyzing resume {context.file_name!r} from {source}")

        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.exception(f"{type(step).__name__} failed for {context.file_name!r}")
                context.record_error(f"{step.stage.value} stage failed: {exc}")
            context.stage = step.stage

        profile = context.profile
        if profile is None:
            profile = fallback_profile(context.experience_years)
        context.stage = PipelineStage.DONE

        if context.errors:
            Log.warning(
                f"Resume {context.file_name!r} analyzed with degraded result: "
                f"{'; '.join(context.errors)}"
            )
            return AnalysisResult(ok=False, profile=profile, error="; ".join(context.errors))
        Log.info(f"Resume {context.file_name!r} analyzed successfully")
        return AnalysisResult(ok=True, profile=profile)

    def close(self) -> None:
        for step in self._steps:
            step.close()


def build_processor(
    settings: Settings,
    storage: BaseObjectStorage | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if storage is None:
        storage = SupabaseStorage(
            base_url=settings.storage_url,
            service_key=settings.storage_service_key,
            timeout_seconds=settings.fetch_timeout_seconds,
        )
    fetcher = DocumentFetcher(storage, timeout_seconds=settings.fetch_timeout_seconds)
    extractor = TextExtractorFactory.create(settings)
    inference_client = ProfileInferenceClientFactory.create(settings)
    return Processor(
        steps=[
            FetchDocumentStep(fetcher),
            ExtractTextStep(extractor, min_content_chars=settings.min_content_chars),
            EstimateExperienceStep(),
            InferProfileStep(inference_client),
        ]
    )
