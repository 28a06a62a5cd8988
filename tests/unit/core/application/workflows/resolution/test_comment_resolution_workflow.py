"""Unit tests: CommentResolutionWorkflow (platform and generator mocked)."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from comment_resolver.core.application.parsing import (
    generation_failure,
    parse_suggestion_response,
)
from comment_resolver.core.application.workflows.resolution import CommentResolutionWorkflow
from comment_resolver.core.domain.review import (
    FileSnapshot,
    PromptPayload,
    PullRequestRef,
    ResolutionOutcome,
    ResolutionReason,
    ReviewComment,
)
from comment_resolver.core.domain.shared import LlmProviderType
from comment_resolver.core.exceptions import PostError, SourceFileNotFoundError

FILE_TEXT = "import time\n\nTIMEOUT = 30\nretries = 5\n\ndef run():\n    pass"
GOOD_RESPONSE = "```suggestion\nTIMEOUT_SECONDS = 30\n```\nRationale: Name the unit."

# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture()
def mock_platform() -> AsyncMock:
    platform = AsyncMock()
    platform.read_file.return_value = FileSnapshot(
        path="src/app.py", content=FILE_TEXT, ref="feature/retry"
    )
    return platform


@pytest.fixture()
def mock_generator() -> AsyncMock:
    generator = AsyncMock()
    generator.provider = LlmProviderType.OPENAI
    generator.generate.return_value = parse_suggestion_response(GOOD_RESPONSE)
    return generator


@pytest.fixture()
def workflow(mock_platform: AsyncMock, mock_generator: AsyncMock) -> CommentResolutionWorkflow:
    return CommentResolutionWorkflow(
        platform=mock_platform, generator=mock_generator, window_size=1
    )


# ═══════════════════════════════════════════════════════════════════
# Happy path
# ═══════════════════════════════════════════════════════════════════


class TestHappyPath:
    @pytest.mark.asyncio
    async def test_posts_suggestion_with_rationale(
        self,
        workflow: CommentResolutionWorkflow,
        mock_platform: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        resolution = await workflow.resolve(github_ref, inline_comment)

        assert resolution.outcome is ResolutionOutcome.POSTED
        mock_platform.read_file.assert_awaited_once_with(github_ref, "src/app.py", "feature/retry")
        mock_platform.post_reply.assert_awaited_once_with(
            github_ref, 1001, "```suggestion\nTIMEOUT_SECONDS = 30\n```", "Name the unit."
        )

    @pytest.mark.asyncio
    async def test_payload_carries_window_and_exact_slice(
        self,
        workflow: CommentResolutionWorkflow,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
    ) -> None:
        comment = ReviewComment(
            id=7, body="Merge these", file_path="src/app.py", start_line=3, end_line=4
        )

        await workflow.resolve(github_ref, comment)

        payload: PromptPayload = mock_generator.generate.await_args.args[0]
        assert payload.code_context == "TIMEOUT = 30\nretries = 5\n"
        assert payload.original_code == "TIMEOUT = 30\nretries = 5"
        assert payload.reviewer_comment == "Merge these"
        assert payload.language == "python"

    @pytest.mark.asyncio
    async def test_language_hint_and_rules_override(
        self,
        mock_platform: AsyncMock,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        workflow = CommentResolutionWorkflow(
            mock_platform, mock_generator, language_hint="cython", project_rules="No globals."
        )

        await workflow.resolve(github_ref, inline_comment)

        payload: PromptPayload = mock_generator.generate.await_args.args[0]
        assert payload.language == "cython"
        assert payload.project_rules == "No globals."


# ═══════════════════════════════════════════════════════════════════
# Skips
# ═══════════════════════════════════════════════════════════════════


class TestSkipped:
    @pytest.mark.asyncio
    async def test_comment_without_file_is_skipped_before_any_call(
        self,
        workflow: CommentResolutionWorkflow,
        mock_platform: AsyncMock,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
    ) -> None:
        comment = ReviewComment(id=5, body="General remark", file_path=None, end_line=5)

        resolution = await workflow.resolve(github_ref, comment)

        assert resolution.outcome is ResolutionOutcome.SKIPPED
        assert resolution.reason is ResolutionReason.INELIGIBLE
        mock_platform.read_file.assert_not_awaited()
        mock_generator.generate.assert_not_awaited()
        mock_platform.post_reply.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unreadable_file_is_skipped_for_missing_context(
        self,
        workflow: CommentResolutionWorkflow,
        mock_platform: AsyncMock,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        mock_platform.read_file.side_effect = SourceFileNotFoundError("gone")

        resolution = await workflow.resolve(github_ref, inline_comment)

        assert resolution.outcome is ResolutionOutcome.SKIPPED
        assert resolution.reason is ResolutionReason.NO_CONTEXT
        mock_generator.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_line_past_end_of_file_is_skipped(
        self,
        workflow: CommentResolutionWorkflow,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
    ) -> None:
        comment = ReviewComment(id=8, body="?", file_path="src/app.py", end_line=400)

        resolution = await workflow.resolve(github_ref, comment)

        assert resolution.reason is ResolutionReason.NO_CONTEXT
        mock_generator.generate.assert_not_awaited()


# ═══════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════


class TestFailed:
    @pytest.mark.asyncio
    async def test_unformatted_response_is_never_posted(
        self,
        workflow: CommentResolutionWorkflow,
        mock_platform: AsyncMock,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        result = parse_suggestion_response("no suggestion here")
        mock_generator.generate.return_value = result

        resolution = await workflow.resolve(github_ref, inline_comment)

        assert result.error is not None
        assert resolution.outcome is ResolutionOutcome.FAILED
        assert resolution.reason is ResolutionReason.RESPONSE_FORMAT_ERROR
        mock_platform.post_reply.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generation_error_is_never_posted(
        self,
        workflow: CommentResolutionWorkflow,
        mock_platform: AsyncMock,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        mock_generator.generate.return_value = generation_failure("openai error (HTTP 503)")

        resolution = await workflow.resolve(github_ref, inline_comment)

        assert resolution.reason is ResolutionReason.GENERATION_ERROR
        assert "HTTP 503" in (resolution.detail or "")
        mock_platform.post_reply.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post_failure_is_recorded(
        self,
        workflow: CommentResolutionWorkflow,
        mock_platform: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        mock_platform.post_reply.side_effect = PostError("403 Forbidden")

        resolution = await workflow.resolve(github_ref, inline_comment)

        assert resolution.outcome is ResolutionOutcome.FAILED
        assert resolution.reason is ResolutionReason.POST_ERROR
        assert resolution.detail == "403 Forbidden"

    @pytest.mark.asyncio
    async def test_unexpected_generator_crash_does_not_escape(
        self,
        mock_platform: AsyncMock,
        mock_generator: AsyncMock,
        github_ref: PullRequestRef,
        inline_comment: ReviewComment,
    ) -> None:
        mock_generator.generate.side_effect = RuntimeError("token=sk-abcdefghijklmnopqrstuvwxyz")
        redact = MagicMock(side_effect=lambda text: text.replace("sk-", "[REDACTED]"))
        workflow = CommentResolutionWorkflow(mock_platform, mock_generator, redact_error=redact)

        resolution = await workflow.resolve(github_ref, inline_comment)

        assert resolution.reason is ResolutionReason.UNEXPECTED_ERROR
        assert "sk-" not in (resolution.detail or "")


def test_negative_window_is_rejected(mock_platform: AsyncMock, mock_generator: AsyncMock) -> None:
    with pytest.raises(ValueError):
        CommentResolutionWorkflow(mock_platform, mock_generator, window_size=-1)
