from comment_resolver.infrastructure.tools.llm.config.llm_settings import LlmSettings

__all__ = ["LlmSettings"]
