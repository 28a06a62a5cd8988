from comment_resolver.core.application.workflows.resolution.comment_resolution_workflow import (
    DEFAULT_CONTEXT_WINDOW_LINES,
    CommentResolutionWorkflow,
)
from comment_resolver.core.application.workflows.resolution.resolution_run_driver import (
    ResolutionRunDriver,
)

__all__ = ["DEFAULT_CONTEXT_WINDOW_LINES", "CommentResolutionWorkflow", "ResolutionRunDriver"]
