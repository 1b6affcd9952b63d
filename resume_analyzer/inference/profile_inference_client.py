"""LLM-backed resume profile inference."""

import json
import re
from pathlib import Path
from typing import Any

from resume_analyzer.inference.client_base import BaseCompletionClient
from resume_analyzer.inference.exceptions import InferenceError, MalformedResponseError
from resume_analyzer.inference.models import InferenceOutcome, ResumeProfile
from resume_analyzer.inference.prompt_loader import (
    load_json_schema,
    load_prompt_template,
    load_system_prompt,
)
from resume_analyzer.inference.sanitizer import fallback_profile, sanitize_profile
from resume_analyzer.logging.logger import Log

DEFAULT_MAX_INPUT_CHARS = 120_000

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class ProfileInferenceClient:
    """Infers a ResumeProfile from resume text using an AI provider.

    Always returns a usable profile: provider failures and unparseable
    responses are replaced by the fixed fallback profile.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.0,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
        system_prompt_path: Path | None = None,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_input_chars = max_input_chars
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)
        self._json_schema_dict = json.loads(self._json_schema)

    def infer(self, text: str, file_name: str, experience_hint: float) -> ResumeProfile:
        """Return the inferred profile, or the fallback profile on any inference failure."""
        return self.infer_with_outcome(text, file_name, experience_hint).profile

    def infer_with_outcome(
        self, text: str, file_name: str, experience_hint: float
    ) -> InferenceOutcome:
        """Like infer, but also reports why the fallback profile was used."""
        try:
            profile = self._infer(text, file_name, experience_hint)
        except InferenceError as exc:
            Log.warning(f"Profile inference failed for {file_name!r}, using fallback: {exc}")
            return InferenceOutcome(
                profile=fallback_profile(experience_hint),
                error=f"Profile inference failed: {exc}",
            )
        Log.info(
            f"Inferred profile for {file_name!r}: {len(profile.skills)} skills, "
            f"role {profile.job_role!r}, ATS {profile.ats_score}"
        )
        return InferenceOutcome(profile=profile)

    def _infer(self, text: str, file_name: str, experience_hint: float) -> ResumeProfile:
        prompt = self._build_prompt(text, file_name, experience_hint)
        Log.debug(f"Inference prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        return sanitize_profile(parsed, experience_hint)

    def _build_prompt(self, text: str, file_name: str, experience_hint: float) -> str:
        if len(text) > self._max_input_chars:
            Log.info(
                f"Truncating resume text from {len(text)} to {self._max_input_chars} chars"
            )
            text = text[: self._max_input_chars]
        return self._prompt_template.format(
            file_name=file_name,
            experience_hint=experience_hint,
            json_schema=self._json_schema,
            resume_text=text,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, Any]:
        cleaned = _strip_code_fences(raw.strip())
        try:
            parsed = json.loads(cleaned)
        except ValueError:
            parsed = _parse_embedded_object(cleaned)

        if not isinstance(parsed, dict):
            raise MalformedResponseError("JSON response must be an object")
        return parsed


def _strip_code_fences(text: str) -> str:
    if not text.startswith("```"):
        return text
    lines = text.splitlines()
    if lines and lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def _parse_embedded_object(text: str) -> Any:
    """Reparse the outermost ``{...}`` span of a response wrapped in prose."""
    match = _JSON_OBJECT_RE.search(text)
    if match is None:
        raise MalformedResponseError("Response contains no JSON object")
    try:
        return json.loads(match.group(0))
    except ValueError as exc:
        # Also covers integers past the int-string conversion digit limit.
        raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc
