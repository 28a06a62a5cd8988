from dataclasses import dataclass
from enum import StrEnum

SUGGESTION_FENCE = "```suggestion"


class SuggestionErrorKind(StrEnum):
    GENERATION_ERROR = "GenerationError"
    RESPONSE_FORMAT_ERROR = "ResponseFormatError"


@dataclass(frozen=True)
class SuggestionError:
    kind: SuggestionErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass(frozen=True, kw_only=True)
class SuggestionResult:
    """Normalized model output for one comment."""

    suggestion_markdown: str
    rationale: str | None = None
    error: SuggestionError | None = None

    @property
    def is_usable(self) -> bool:
        """A result is postable only without an error and with a fenced suggestion block."""
        return self.error is None and SUGGESTION_FENCE in self.suggestion_markdown

    def reply_body(self) -> str:
        return compose_reply_body(self.suggestion_markdown, self.rationale)


def compose_reply_body(suggestion_markdown: str, rationale: str | None = None) -> str:
    """Rationale line (if any) followed by the suggestion block, both verbatim."""
    if rationale:
        return f"Rationale: {rationale}\n{suggestion_markdown}"
    return suggestion_markdown
