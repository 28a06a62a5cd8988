from .container import (
    build_platform_adapter,
    build_run_driver,
    resolve_identifier,
    resolve_platform_type,
    run_resolution,
)

__all__ = [
    "build_platform_adapter",
    "build_run_driver",
    "resolve_identifier",
    "resolve_platform_type",
    "run_resolution",
]
