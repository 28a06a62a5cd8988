from comment_resolver.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from comment_resolver.infrastructure.observability.logging.log_schema_processor import (
    log_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "log_schema_processor",
]
