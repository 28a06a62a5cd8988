from comment_resolver.core.exceptions.resolver_errors import (
    CommentFetchError,
    ConfigurationError,
    IdentifierResolutionError,
    PostError,
    RequestFetchError,
    ResolverError,
    SourceFileNotFoundError,
)

__all__ = [
    "CommentFetchError",
    "ConfigurationError",
    "IdentifierResolutionError",
    "PostError",
    "RequestFetchError",
    "ResolverError",
    "SourceFileNotFoundError",
]
