from comment_resolver.infrastructure.config.app_config import AppConfig
from comment_resolver.infrastructure.config.app_settings import AppSettings

__all__ = ["AppConfig", "AppSettings"]
