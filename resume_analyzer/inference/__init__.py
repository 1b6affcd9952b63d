from resume_analyzer.inference.factory import ProfileInferenceClientFactory
from resume_analyzer.inference.models import InferenceOutcome, ResumeProfile
from resume_analyzer.inference.profile_inference_client import ProfileInferenceClient

__all__ = [
    "InferenceOutcome",
    "ProfileInferenceClient",
    "ProfileInferenceClientFactory",
    "ResumeProfile",
]
