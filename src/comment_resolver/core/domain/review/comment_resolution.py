from dataclasses import dataclass, field
from enum import StrEnum

from comment_resolver.core.domain.review.pull_request_ref import PullRequestRef
from comment_resolver.core.domain.review.review_comment import CommentId


class ResolutionOutcome(StrEnum):
    SKIPPED = "Skipped"
    POSTED = "Posted"
    FAILED = "Failed"


class ResolutionReason(StrEnum):
    INELIGIBLE = "ineligible"
    NO_CONTEXT = "no_context"
    GENERATION_ERROR = "generation_error"
    RESPONSE_FORMAT_ERROR = "response_format_error"
    POST_ERROR = "post_error"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class CommentResolution:
    """Terminal state of one comment in one run."""

    comment_id: CommentId
    outcome: ResolutionOutcome
    reason: ResolutionReason | None = None
    detail: str | None = None

    @classmethod
    def posted(cls, comment_id: CommentId) -> "CommentResolution":
        return cls(comment_id, ResolutionOutcome.POSTED)

    @classmethod
    def skipped(
        cls, comment_id: CommentId, reason: ResolutionReason, detail: str | None = None
    ) -> "CommentResolution":
        return cls(comment_id, ResolutionOutcome.SKIPPED, reason, detail)

    @classmethod
    def failed(
        cls, comment_id: CommentId, reason: ResolutionReason, detail: str | None = None
    ) -> "CommentResolution":
        return cls(comment_id, ResolutionOutcome.FAILED, reason, detail)


@dataclass
class ResolutionRunReport:
    """Batch result for one pull/merge request."""

    ref: PullRequestRef
    resolutions: list[CommentResolution] = field(default_factory=list)

    def _count(self, outcome: ResolutionOutcome) -> int:
        return sum(1 for r in self.resolutions if r.outcome is outcome)

    @property
    def posted(self) -> int:
        return self._count(ResolutionOutcome.POSTED)

    @property
    def skipped(self) -> int:
        return self._count(ResolutionOutcome.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(ResolutionOutcome.FAILED)
