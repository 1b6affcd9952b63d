from pathlib import Path

from resume_analyzer.inference.exceptions import InferenceConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the fixed instruction contract sent as the system message.

    Raises:
        InferenceConfigurationError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "system_prompt.txt", "system prompt")


def load_prompt_template(path: Path | None = None) -> str:
    """Load the user prompt template.

    The template holds ``{file_name}``, ``{experience_hint}``, ``{json_schema}``
    and ``{resume_text}`` placeholders.

    Raises:
        InferenceConfigurationError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "profile_prompt.txt", "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Load the ResumeProfile JSON schema used for structured output.

    Raises:
        InferenceConfigurationError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "profile_schema.json", "JSON schema")


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InferenceConfigurationError(f"Failed to load {what}: {exc}") from exc
