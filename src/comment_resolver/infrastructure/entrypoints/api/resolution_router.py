from typing import Any

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends, status
from fastapi.responses import JSONResponse
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars

from comment_resolver.core.application.ports import RawIdentifier
from comment_resolver.core.application.workflows.resolution import ResolutionRunDriver
from comment_resolver.core.exceptions import ConfigurationError, ResolverError
from comment_resolver.infrastructure.config.app_config import AppConfig
from comment_resolver.infrastructure.config.resolution.container import (
    build_run_driver,
    resolve_identifier,
    resolve_platform_type,
)
from comment_resolver.infrastructure.entrypoints.api.dtos import ResolutionRequestDTO
from comment_resolver.infrastructure.entrypoints.api.security import validate_api_key
from comment_resolver.infrastructure.observability.redaction_service import redact_text

logger = structlog.get_logger()
router = APIRouter()


def get_config() -> AppConfig:
    return AppConfig()


@router.post(
    "/resolutions",
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(validate_api_key)],
    response_model=None,
)
async def trigger_resolution(
    payload: ResolutionRequestDTO,
    background_tasks: BackgroundTasks,
    config: AppConfig = Depends(get_config),
) -> dict[str, Any] | JSONResponse:
    """Validate and wire the run now; resolve comments after the response is sent."""
    try:
        identifier = resolve_identifier(config, payload.identifier)
        platform_type = resolve_platform_type(config, identifier, payload.platform)
        driver = build_run_driver(config, platform_type, payload.window)
    except ConfigurationError as exc:
        logger.warning(
            "Rejected resolution request",
            processing_status="REJECTED",
            error_type=type(exc).__name__,
            error_details=redact_text(exc.message),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"status": "rejected", "error": exc.message},
        )

    ctx_snapshot = get_contextvars()
    background_tasks.add_task(_run_in_background, driver, identifier, ctx_snapshot)
    logger.info("Resolution run queued", platform=platform_type.value)
    return {
        "status": "accepted",
        "message": "Comment resolution queued.",
        "platform": platform_type.value,
        "identifier": str(identifier),
    }


async def _run_in_background(
    driver: ResolutionRunDriver, identifier: RawIdentifier, ctx_snapshot: dict[str, Any]
) -> None:
    """Run outside the request scope with the request's log context restored."""
    _restore_context(ctx_snapshot)
    try:
        await driver.run(identifier)
    except ResolverError as exc:
        logger.error(
            "Comment resolution run aborted",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=redact_text(exc.message),
        )


def _restore_context(ctx_snapshot: dict[str, Any]) -> None:
    """Re-bind structlog contextvars from a snapshot captured in the request scope."""
    clear_contextvars()
    bind_contextvars(**ctx_snapshot)
