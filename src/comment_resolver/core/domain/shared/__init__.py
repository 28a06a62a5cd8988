from comment_resolver.core.domain.shared.llm_provider_type import LlmProviderType
from comment_resolver.core.domain.shared.platform_type import PlatformType

__all__ = ["LlmProviderType", "PlatformType"]
