"""Schema processor for structlog.

Transforms flat structlog event_dict into a nested JSON structure.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, environment, IDs."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "pr-comment-resolver"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    """Cast a value to float, returning None on failure."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract processing metrics block."""
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def _build_resolution(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract the pull request / comment being worked on."""
    pull_request = event_dict.pop("pull_request", None)
    comment_id = event_dict.pop("comment_id", None)
    if pull_request is None and comment_id is None:
        return None
    return {
        "platform": event_dict.pop("platform", None),
        "pull_request": pull_request,
        "comment_id": comment_id,
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract request/execution context block."""
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": event_dict.pop("context_method", None),
    }


def log_schema_processor(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor nesting known fields into blocks; the rest goes to ``extra``."""
    root = _build_root_fields(event_dict)
    blocks = {
        "processing": _build_processing(event_dict),
        "error": _build_error(event_dict),
        "resolution": _build_resolution(event_dict),
        "context": _build_context(event_dict),
    }
    root.update({name: block for name, block in blocks.items() if block is not None})
    event_dict.pop("_record", None)
    event_dict.pop("_from_structlog", None)
    if event_dict:
        root["extra"] = dict(event_dict)
    return root
