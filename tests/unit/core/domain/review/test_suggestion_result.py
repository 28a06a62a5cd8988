"""Unit tests: validation gate and reply body composition."""

from comment_resolver.core.application.parsing import parse_suggestion_response
from comment_resolver.core.domain.review import (
    SuggestionError,
    SuggestionErrorKind,
    SuggestionResult,
    compose_reply_body,
)


class TestIsUsable:
    def test_needs_a_suggestion_fence(self) -> None:
        assert not SuggestionResult(suggestion_markdown="```python\nx\n```").is_usable

    def test_error_blocks_posting_even_with_fence(self) -> None:
        result = SuggestionResult(
            suggestion_markdown="```suggestion\nx\n```",
            error=SuggestionError(SuggestionErrorKind.GENERATION_ERROR, "boom"),
        )

        assert not result.is_usable


class TestReplyBody:
    def test_rationale_line_precedes_block(self) -> None:
        body = compose_reply_body("```suggestion\nx = 1\n```", "Names the value.")

        assert body == "Rationale: Names the value.\n```suggestion\nx = 1\n```"

    def test_block_alone_without_rationale(self) -> None:
        assert compose_reply_body("```suggestion\nx\n```") == "```suggestion\nx\n```"

    def test_parsed_response_survives_verbatim(self) -> None:
        block = '```suggestion\n    if retries > MAX_RETRIES:\n        raise TimeoutError("\\t")\n```'
        response = f"{block}\nRationale: Guard against runaway retries."

        body = parse_suggestion_response(response).reply_body()

        assert block in body
        assert "Rationale: Guard against runaway retries." in body
