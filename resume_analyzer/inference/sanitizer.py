"""Coerces a raw inference payload into a fully typed ResumeProfile.

Sanitization never rejects a payload: every missing or malformed field is
replaced with a default derived from the heuristic experience estimate.
"""

import math
import re
from typing import Any

from resume_analyzer.inference.models import ResumeProfile

DEFAULT_JOB_ROLE = "Professional"
MAX_SUMMARY_LINES = 5

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\n+")

_FALLBACK_SKILLS = (
    "Microsoft Office",
    "Data Analysis",
    "Project Management",
    "Technical Documentation",
)
_FALLBACK_SUMMARY = (
    "Professional resume received for review.",
    "Automated analysis could not extract detailed insights.",
    "Experience estimated from the dates listed in the document.",
    "Skills shown are generic placeholders pending a full review.",
    "Re-run the analysis or review the resume manually for accurate results.",
)
_FALLBACK_RECOMMENDATIONS = (
    "Use a text-based PDF or DOCX so the resume can be parsed reliably",
    "List technical skills in a dedicated skills section",
    "Add quantifiable achievements to each role",
    "Include start and end dates for every position",
)
_FALLBACK_MISSING_SKILLS = (
    "Cloud Platforms",
    "Version Control",
)
_FALLBACK_STRENGTH_AREAS = (
    "Professional Experience",
)


def heuristic_ats_score(experience_hint: float) -> int:
    """ATS score used when the service gives none: 60 + 2/year, kept within 50..95."""
    return min(95, max(50, 60 + _round_half_up(2 * _finite_or(experience_hint, 0.0))))


def fallback_profile(experience_hint: float) -> ResumeProfile:
    """Fixed profile returned when inference cannot produce a usable result."""
    years = _non_negative_or(experience_hint, 0.0)
    return ResumeProfile(
        skills=list(_FALLBACK_SKILLS),
        job_role=DEFAULT_JOB_ROLE,
        experience_years=years,
        ats_score=heuristic_ats_score(years),
        summary=list(_FALLBACK_SUMMARY),
        recommendations=list(_FALLBACK_RECOMMENDATIONS),
        missing_skills=list(_FALLBACK_MISSING_SKILLS),
        strength_areas=list(_FALLBACK_STRENGTH_AREAS),
    )


def sanitize_profile(data: dict[str, Any], experience_hint: float) -> ResumeProfile:
    """Build a ResumeProfile from parsed JSON, filling gaps from *experience_hint*.

    Accepts both snake_case and camelCase keys.
    """
    hint = _non_negative_or(experience_hint, 0.0)
    return ResumeProfile(
        skills=_string_list(_field(data, "skills")),
        job_role=_job_role(_field(data, "job_role", "jobRole")),
        experience_years=_experience_years(
            _field(data, "experience_years", "experienceYears"), hint
        ),
        ats_score=_ats_score(_field(data, "ats_score", "atsScore"), hint),
        summary=_summary(_field(data, "summary")),
        recommendations=_string_list(_field(data, "recommendations")),
        missing_skills=_string_list(_field(data, "missing_skills", "missingSkills")),
        strength_areas=_string_list(_field(data, "strength_areas", "strengthAreas")),
    )


def _field(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _string_list(raw: Any) -> list[str]:
    """Trim entries, drop blanks and non-strings, dedupe by exact string keeping order."""
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    seen: set[str] = set()
    items: list[str] = []
    for entry in raw:
        if not isinstance(entry, str):
            continue
        value = entry.strip()
        if value and value not in seen:
            seen.add(value)
            items.append(value)
    return items


def _summary(raw: Any) -> list[str]:
    if isinstance(raw, str):
        raw = _SENTENCE_SPLIT_RE.split(raw)
    if not isinstance(raw, list):
        return []
    lines = [line.strip() for line in raw if isinstance(line, str) and line.strip()]
    return lines[:MAX_SUMMARY_LINES]


def _job_role(raw: Any) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return DEFAULT_JOB_ROLE


def _experience_years(raw: Any, hint: float) -> float:
    value = _to_number(raw)
    if value is None or value < 0:
        return hint
    return round(value, 1)


def _ats_score(raw: Any, hint: float) -> int:
    value = _to_number(raw)
    if value is None:
        return heuristic_ats_score(hint)
    return min(100, max(1, _round_half_up(value)))


def _to_number(raw: Any) -> float | None:
    if isinstance(raw, bool):
        return None
    if not isinstance(raw, (int, float, str)):
        return None
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def _finite_or(value: float, default: float) -> float:
    number = _to_number(value)
    return default if number is None else number


def _non_negative_or(value: float, default: float) -> float:
    number = _to_number(value)
    return default if number is None or number < 0 else number


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
