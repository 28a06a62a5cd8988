"""Per-comment resolution pipeline.

Eligibility -> Fetch file -> Extract context -> Build payload -> Generate ->
Validate -> Post. Every comment ends in exactly one of Skipped, Posted or
Failed, and nothing raised while handling one comment escapes ``resolve``.
"""

from collections.abc import Callable

import structlog
from structlog.contextvars import bound_contextvars

from comment_resolver.core.application.context import (
    extract_context,
    extract_exact_slice,
    infer_language,
)
from comment_resolver.core.application.ports import PlatformPort, SuggestionGeneratorPort
from comment_resolver.core.domain.review import (
    CommentResolution,
    FileSnapshot,
    PromptPayload,
    PullRequestRef,
    ResolutionReason,
    ReviewComment,
    SuggestionErrorKind,
    SuggestionResult,
)

logger = structlog.get_logger()

DEFAULT_CONTEXT_WINDOW_LINES = 20


class CommentResolutionWorkflow:
    """Resolves one review comment at a time against a platform and a generator."""

    def __init__(
        self,
        platform: PlatformPort,
        generator: SuggestionGeneratorPort,
        window_size: int = DEFAULT_CONTEXT_WINDOW_LINES,
        language_hint: str | None = None,
        project_rules: str | None = None,
        redact_error: Callable[[str], str] | None = None,
    ) -> None:
        if window_size < 0:
            raise ValueError(f"window_size must be non-negative, got {window_size}")
        self._platform = platform
        self._generator = generator
        self._window_size = window_size
        self._language_hint = language_hint
        self._project_rules = project_rules
        self._redact_error = redact_error or str

    async def resolve(self, ref: PullRequestRef, comment: ReviewComment) -> CommentResolution:
        with bound_contextvars(comment_id=str(comment.id)):
            logger.info("Processing comment", comment_preview=comment.preview())
            try:
                resolution = await self._run_pipeline(ref, comment)
            except Exception as exc:  # noqa: BLE001
                resolution = CommentResolution.failed(
                    comment.id, ResolutionReason.UNEXPECTED_ERROR, self._redact_error(str(exc))
                )
                logger.error(
                    "Unexpected failure while resolving comment",
                    processing_status="ERROR",
                    error_type=type(exc).__name__,
                    error_details=resolution.detail,
                )
            logger.info(
                "Comment resolution finished",
                outcome=resolution.outcome.value,
                reason=resolution.reason.value if resolution.reason else None,
            )
            return resolution

    async def _run_pipeline(self, ref: PullRequestRef, comment: ReviewComment) -> CommentResolution:
        if not self._step_1_is_eligible(comment):
            return CommentResolution.skipped(comment.id, ResolutionReason.INELIGIBLE)

        snapshot = await self._step_2_fetch_file(ref, comment)
        context = self._step_3_extract_context(comment, snapshot)
        if snapshot is None or not context:
            logger.info(
                "No valid code context, skipping",
                file_path=comment.file_path,
                line=comment.end_line,
            )
            return CommentResolution.skipped(comment.id, ResolutionReason.NO_CONTEXT)

        payload = self._step_4_build_payload(comment, snapshot, context)
        result = await self._step_5_generate(payload)
        if not result.is_usable:
            return self._step_6_reject(comment, result)
        return await self._step_7_post(ref, comment, result)

    # ── Step Methods ─────────────────────────────────────────────────

    @staticmethod
    def _step_1_is_eligible(comment: ReviewComment) -> bool:
        if comment.is_eligible:
            return True
        logger.info("Comment is not attached to a file and line, skipping")
        return False

    async def _step_2_fetch_file(
        self, ref: PullRequestRef, comment: ReviewComment
    ) -> FileSnapshot | None:
        """Read the file at the head ref; any failure degrades to "no context"."""
        try:
            return await self._platform.read_file(ref, comment.file_path or "", ref.head_ref)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Could not fetch file content, suggestion will lack context",
                file_path=comment.file_path,
                head_ref=ref.head_ref,
                error_type=type(exc).__name__,
                error_details=self._redact_error(str(exc)),
            )
            return None

    def _step_3_extract_context(
        self, comment: ReviewComment, snapshot: FileSnapshot | None
    ) -> str:
        if snapshot is None or comment.end_line is None:
            return ""
        return extract_context(snapshot.content, comment.end_line, self._window_size)

    def _step_4_build_payload(
        self, comment: ReviewComment, snapshot: FileSnapshot, context: str
    ) -> PromptPayload:
        end_line = comment.end_line or 0
        start_line = comment.effective_start_line or end_line
        original_code = extract_exact_slice(start_line, end_line, snapshot.content)
        return PromptPayload(
            reviewer_comment=comment.body,
            code_context=context,
            original_code=original_code,
            file_path=comment.file_path,
            language=self._language_hint or infer_language(comment.file_path),
            project_rules=self._project_rules,
        )

    async def _step_5_generate(self, payload: PromptPayload) -> SuggestionResult:
        logger.info(
            "Generating suggestion",
            provider=self._generator.provider.value,
            context_chars=len(payload.code_context),
        )
        return await self._generator.generate(payload)

    def _step_6_reject(self, comment: ReviewComment, result: SuggestionResult) -> CommentResolution:
        if result.error is not None and result.error.kind is SuggestionErrorKind.GENERATION_ERROR:
            reason = ResolutionReason.GENERATION_ERROR
        else:
            reason = ResolutionReason.RESPONSE_FORMAT_ERROR
        detail = str(result.error) if result.error else "Malformed suggestion"
        logger.error(
            "Failed to generate a valid suggestion",
            processing_status="ERROR",
            error_type=reason.value,
            error_details=detail,
            rationale=result.rationale,
        )
        return CommentResolution.failed(comment.id, reason, detail)

    async def _step_7_post(
        self, ref: PullRequestRef, comment: ReviewComment, result: SuggestionResult
    ) -> CommentResolution:
        logger.info("Posting suggestion")
        try:
            await self._platform.post_reply(
                ref, comment.id, result.suggestion_markdown, result.rationale
            )
        except Exception as exc:  # noqa: BLE001
            detail = self._redact_error(str(exc))
            logger.error(
                "Failed to post suggestion",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=detail,
            )
            return CommentResolution.failed(comment.id, ResolutionReason.POST_ERROR, detail)
        logger.info("Suggestion posted", processing_status="SUCCESS")
        return CommentResolution.posted(comment.id)
