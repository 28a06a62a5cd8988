"""Run driver: resolve the request once, list its comments once, then drive
the per-comment pipeline sequentially."""

import structlog
from structlog.contextvars import bind_contextvars

from comment_resolver.core.application.ports import PlatformPort, RawIdentifier
from comment_resolver.core.application.workflows.resolution.comment_resolution_workflow import (
    CommentResolutionWorkflow,
)
from comment_resolver.core.domain.review import (
    CommentResolution,
    PullRequestRef,
    ResolutionReason,
    ResolutionRunReport,
    ReviewComment,
)
from comment_resolver.core.exceptions import (
    CommentFetchError,
    RequestFetchError,
    ResolverError,
)

logger = structlog.get_logger()


class ResolutionRunDriver:
    """Drives one run over a single pull/merge request.

    Raises ``IdentifierResolutionError``, ``RequestFetchError`` or
    ``CommentFetchError`` when the batch cannot be established; per-comment
    failures only show up in the returned report.
    """

    def __init__(self, platform: PlatformPort, workflow: CommentResolutionWorkflow) -> None:
        self._platform = platform
        self._workflow = workflow

    async def run(self, identifier: RawIdentifier) -> ResolutionRunReport:
        bind_contextvars(event_type="run.comment_resolution", platform=self._platform.platform.value)
        logger.info("Comment resolution run started")

        ref = await self._step_1_resolve_request(identifier)
        bind_contextvars(pull_request=str(ref))
        comments = await self._step_2_list_comments(ref)

        report = ResolutionRunReport(ref=ref)
        if not comments:
            logger.info("No comments to process")
            return report

        for comment in comments:
            report.resolutions.append(await self._step_3_process(ref, comment))
        logger.info(
            "Comment resolution run finished",
            processing_status="SUCCESS",
            posted=report.posted,
            skipped=report.skipped,
            failed=report.failed,
        )
        return report

    async def _step_1_resolve_request(self, identifier: RawIdentifier) -> PullRequestRef:
        try:
            ref = await self._platform.resolve_request(identifier)
        except ResolverError:
            raise
        except Exception as exc:
            raise RequestFetchError(
                f"Could not load pull/merge request details: {exc}",
                context={"identifier": str(identifier)},
            ) from exc
        logger.info(
            "Fetched request details",
            pull_request=str(ref),
            head_ref=ref.head_ref,
            base_ref=ref.base_ref,
        )
        return ref

    async def _step_2_list_comments(self, ref: PullRequestRef) -> list[ReviewComment]:
        try:
            comments = list(await self._platform.list_comments(ref))
        except CommentFetchError:
            raise
        except Exception as exc:
            raise CommentFetchError(
                f"Could not list comments for {ref}: {exc}",
                context={"pull_request": str(ref)},
            ) from exc
        logger.info("Found review comments", count=len(comments))
        return comments

    async def _step_3_process(self, ref: PullRequestRef, comment: ReviewComment) -> CommentResolution:
        """Ineligible comments are recorded as skipped without entering the pipeline."""
        if not comment.is_eligible:
            logger.info(
                "Skipping comment not attached to a specific file/line",
                comment_id=str(comment.id),
            )
            return CommentResolution.skipped(comment.id, ResolutionReason.INELIGIBLE)
        return await self._workflow.resolve(ref, comment)
