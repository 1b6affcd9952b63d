from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from resume_analyzer.fetching.models import DocumentSource
from resume_analyzer.inference.models import ResumeProfile
from resume_analyzer.processor.models import ResumeDocument


class PipelineStage(str, Enum):
    """Linear stages of one analysis run. There is no backtracking."""

    START = "start"
    FETCHED = "fetched"
    EXTRACTED = "extracted"
    ESTIMATED = "estimated"
    INFERRED = "inferred"
    DONE = "done"


@dataclass(slots=True)
class PipelineContext:
    source: DocumentSource
    file_name: str
    stage: PipelineStage = PipelineStage.START
    document: ResumeDocument | None = None
    extracted_text: str = ""
    analysis_text: str = ""
    experience_years: float = 0.0
    profile: ResumeProfile | None = None
    errors: list[str] = field(default_factory=list)

    def record_error(self, message: str) -> None:
        self.errors.append(message)


class PipelineStep(ABC):
    stage: PipelineStage

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the step. No-op by default."""
