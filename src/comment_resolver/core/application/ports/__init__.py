from comment_resolver.core.application.ports.platform_port import PlatformPort, RawIdentifier
from comment_resolver.core.application.ports.suggestion_generator_port import (
    SuggestionGeneratorPort,
)

__all__ = ["PlatformPort", "RawIdentifier", "SuggestionGeneratorPort"]
