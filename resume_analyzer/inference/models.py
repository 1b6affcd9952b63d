from dataclasses import dataclass, field
from enum import Enum


class ExperienceLevel(str, Enum):
    """Seniority bucket derived from years of experience."""

    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"

    @classmethod
    def from_years(cls, years: float) -> "ExperienceLevel":
        if years < 2:
            return cls.ENTRY
        if years < 5:
            return cls.MID
        if years < 10:
            return cls.SENIOR
        return cls.LEAD


@dataclass(frozen=True)
class ResumeProfile:
    """Sanitized structured profile inferred from a resume."""

    skills: list[str]
    job_role: str
    experience_years: float
    ats_score: int
    summary: list[str]
    recommendations: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    strength_areas: list[str] = field(default_factory=list)

    @property
    def experience_level(self) -> ExperienceLevel:
        return ExperienceLevel.from_years(self.experience_years)

    def to_dict(self) -> dict[str, object]:
        return {
            "skills": list(self.skills),
            "experience_years": self.experience_years,
            "experience_level": self.experience_level.value,
            "job_role": self.job_role,
            "ats_score": self.ats_score,
            "summary": list(self.summary),
            "recommendations": list(self.recommendations),
            "missing_skills": list(self.missing_skills),
            "strength_areas": list(self.strength_areas),
        }


@dataclass(frozen=True)
class InferenceOutcome:
    """Profile returned by inference plus the reason it fell back, if it did."""

    profile: ResumeProfile
    error: str | None = None

    @property
    def degraded(self) -> bool:
        return self.error is not None
