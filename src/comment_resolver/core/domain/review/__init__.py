from comment_resolver.core.domain.review.comment_resolution import (
    CommentResolution,
    ResolutionOutcome,
    ResolutionReason,
    ResolutionRunReport,
)
from comment_resolver.core.domain.review.file_snapshot import FileSnapshot
from comment_resolver.core.domain.review.prompt_payload import PromptPayload
from comment_resolver.core.domain.review.pull_request_ref import PullRequestRef
from comment_resolver.core.domain.review.review_comment import CommentId, ReviewComment
from comment_resolver.core.domain.review.suggestion_result import (
    SUGGESTION_FENCE,
    SuggestionError,
    SuggestionErrorKind,
    SuggestionResult,
    compose_reply_body,
)

__all__ = [
    "SUGGESTION_FENCE",
    "CommentId",
    "CommentResolution",
    "FileSnapshot",
    "PromptPayload",
    "PullRequestRef",
    "ResolutionOutcome",
    "ResolutionReason",
    "ResolutionRunReport",
    "ReviewComment",
    "SuggestionError",
    "SuggestionErrorKind",
    "SuggestionResult",
    "compose_reply_body",
]
