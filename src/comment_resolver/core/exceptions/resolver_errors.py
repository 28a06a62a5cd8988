"""Exception hierarchy for comment resolution.

Run-level errors (configuration, identifier, request and comment fetch) abort
the run; the remaining kinds are caught per comment and turned into a
``CommentResolution`` record.
"""

from typing import Any


class ResolverError(Exception):
    """Base exception for every error raised by comment resolution."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class ConfigurationError(ResolverError):
    """Required settings for the selected platform or model provider are missing."""


class IdentifierResolutionError(ResolverError):
    """The identifier matches no accepted shape or lacks companion configuration."""


class RequestFetchError(ResolverError):
    """The pull/merge request details could not be loaded."""


class CommentFetchError(ResolverError):
    """The comment list could not be loaded; the whole batch depends on it."""


class SourceFileNotFoundError(ResolverError, FileNotFoundError):
    """The path does not resolve to a regular file at the requested ref."""


class PostError(ResolverError):
    """The reply could not be posted back to the platform."""
