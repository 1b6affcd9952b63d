from collections.abc import Callable
from datetime import date

from resume_analyzer.estimation.experience_estimator import estimate_experience_years
from resume_analyzer.extraction.extractor import TextExtractor
from resume_analyzer.fetching.exceptions import FetchError
from resume_analyzer.fetching.fetcher import DocumentFetcher
from resume_analyzer.inference.profile_inference_client import ProfileInferenceClient
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.models import ResumeDocument
from resume_analyzer.processor.pipeline import PipelineContext, PipelineStage, PipelineStep

DEFAULT_MIN_CONTENT_CHARS = 50


def low_content_description(file_name: str) -> str:
    """Stand-in text sent to inference when a document yields almost nothing."""
    return f"Resume document: {file_name}. Professional document requiring analysis."


class FetchDocumentStep(PipelineStep):
    stage = PipelineStage.FETCHED

    def __init__(self, fetcher: DocumentFetcher) -> None:
        self._fetcher = fetcher

    def close(self) -> None:
        self._fetcher.close()

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            fetched = self._fetcher.fetch(context.source)
        except FetchError as exc:
            # Degrade: inference still runs on the file name alone.
            Log.warning(
                f"Fetch failed for {context.file_name!r}, continuing without bytes: {exc}"
            )
            context.record_error(f"Document fetch failed: {exc}")
            context.document = ResumeDocument(content=b"", file_name=context.file_name)
            return context

        context.document = ResumeDocument(
            content=fetched.content,
            file_name=context.file_name,
            content_type=fetched.content_type,
        )
        return context


class ExtractTextStep(PipelineStep):
    stage = PipelineStage.EXTRACTED

    def __init__(
        self,
        extractor: TextExtractor,
        min_content_chars: int = DEFAULT_MIN_CONTENT_CHARS,
    ) -> None:
        self._extractor = extractor
        self._min_content_chars = min_content_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        if document is not None:
            context.extracted_text = self._extractor.extract(
                document.content,
                document.file_name,
                document.content_type,
            )
        # Raw bytes are not needed past this point.
        context.document = None

        if len(context.extracted_text) < self._min_content_chars:
            Log.info(
                f"Only {len(context.extracted_text)} chars extracted from "
                f"{context.file_name!r}, using file name description"
            )
            context.analysis_text = low_content_description(context.file_name)
        else:
            context.analysis_text = context.extracted_text
        return context


class EstimateExperienceStep(PipelineStep):
    stage = PipelineStage.ESTIMATED

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def run(self, context: PipelineContext) -> PipelineContext:
        context.experience_years = estimate_experience_years(
            context.analysis_text, today=self._today()
        )
        Log.info(
            f"Estimated {context.experience_years} years of experience for {context.file_name!r}"
        )
        return context


class InferProfileStep(PipelineStep):
    stage = PipelineStage.INFERRED

    def __init__(self, inference_client: ProfileInferenceClient) -> None:
        self._inference_client = inference_client

    def run(self, context: PipelineContext) -> PipelineContext:
        text = context.analysis_text or low_content_description(context.file_name)
        outcome = self._inference_client.infer_with_outcome(
            text, context.file_name, context.experience_years
        )
        context.profile = outcome.profile
        if outcome.error:
            context.record_error(outcome.error)
        return context
