from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PromptPayload:
    """Everything the suggestion generator needs for one comment."""

    reviewer_comment: str
    code_context: str
    original_code: str
    file_path: str | None = None
    language: str | None = None
    project_rules: str | None = None
