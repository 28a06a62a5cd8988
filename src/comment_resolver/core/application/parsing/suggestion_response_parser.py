"""Parses the model's free-text answer into a ``SuggestionResult``.

Expected grammar: one fenced block opened by ```` ```suggestion ```` (an
optional GitLab range such as ``:-0+1`` is tolerated) and closed by a line
holding only ```` ``` ````, plus one line beginning with ``Rationale:``.
"""

import re

from comment_resolver.core.domain.review import (
    SuggestionError,
    SuggestionErrorKind,
    SuggestionResult,
)

_SUGGESTION_BLOCK_RE = re.compile(
    r"```suggestion(?::[-+0-9]*)?[ \t]*\r?\n.*?^```[ \t]*(?=\r?$)",
    re.DOTALL | re.MULTILINE,
)
_RATIONALE_RE = re.compile(r"^[ \t]*Rationale:[ \t]*(.*?)[ \t]*\r?$", re.MULTILINE)

FORMAT_PLACEHOLDER = "```suggestion\n// The model response was not in the expected format.\n```"
GENERATION_PLACEHOLDER = "```suggestion\n// An error occurred while generating the suggestion.\n```"


def parse_suggestion_response(response_text: str) -> SuggestionResult:
    """Extract the first suggestion block and rationale; never raises on bad format."""
    match = _SUGGESTION_BLOCK_RE.search(response_text or "")
    if match is None:
        return SuggestionResult(
            suggestion_markdown=FORMAT_PLACEHOLDER,
            rationale=None,
            error=SuggestionError(
                SuggestionErrorKind.RESPONSE_FORMAT_ERROR,
                "Model response did not contain a fenced suggestion block.",
            ),
        )
    return SuggestionResult(
        suggestion_markdown=match.group(0),
        rationale=extract_rationale(response_text),
    )


def extract_rationale(response_text: str) -> str | None:
    match = _RATIONALE_RE.search(response_text or "")
    if match is None:
        return None
    return match.group(1) or None


def generation_failure(message: str) -> SuggestionResult:
    """Result used when the provider call itself failed."""
    return SuggestionResult(
        suggestion_markdown=GENERATION_PLACEHOLDER,
        rationale=None,
        error=SuggestionError(SuggestionErrorKind.GENERATION_ERROR, message),
    )
