import uvicorn

from comment_resolver.infrastructure.config.app_config import AppConfig
from comment_resolver.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server."""
    config = AppConfig()
    uvicorn.run(
        "comment_resolver.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=config.app.log_level.lower(),
    )


# Instantiate global app for ASGI
app = create_app(AppConfig())
