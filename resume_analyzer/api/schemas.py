from pydantic import BaseModel, ConfigDict, Field

from resume_analyzer.processor.models import AnalysisRequest


class AnalyzeResumeRequest(BaseModel):
    """JSON body of an analysis request. Field names follow the web client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    storage_path: str | None = Field(default=None, alias="storagePath")
    bucket: str | None = None
    file_url: str | None = Field(default=None, alias="fileUrl")
    file_name: str | None = Field(default=None, alias="fileName")

    def to_analysis_request(self, default_bucket: str) -> AnalysisRequest:
        return AnalysisRequest(
            storage_path=self.storage_path,
            bucket=self.bucket or default_bucket,
            file_url=self.file_url,
            file_name=self.file_name,
        )
