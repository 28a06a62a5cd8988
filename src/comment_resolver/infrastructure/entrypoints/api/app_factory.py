import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from comment_resolver.infrastructure.config.app_config import AppConfig
from comment_resolver.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from comment_resolver.infrastructure.entrypoints.api.resolution_router import (
    router as resolution_router,
)
from comment_resolver.infrastructure.observability.logger_factory_service import (
    configure_logging,
)
from comment_resolver.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)

logger = structlog.get_logger()


def create_app(config: AppConfig) -> FastAPI:
    configure_logging(config.app.log_level)
    logger.info(
        "Boot diagnostics",
        app_name=config.app.app_name,
        platform=config.app.platform.value if config.app.platform else "auto",
        llm_provider=config.llm.provider.value,
        api_key_configured=bool(config.app.api_key),
    )

    app = FastAPI(title=config.app.app_name)
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(
            "Request validation failed",
            error_type="RequestValidationError",
            error_details=str(exc.errors()),
            url=str(request.url),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors()},
        )

    app.include_router(health_router)
    app.include_router(resolution_router, prefix="/api/v1")

    return app
