from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from comment_resolver.infrastructure.config.app_settings import AppSettings

api_key_header = APIKeyHeader(name="X-API-KEY", auto_error=False)


async def validate_api_key(api_key_header: str = Security(api_key_header)) -> str:
    settings = AppSettings()
    if not api_key_header:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials"
        )
    if not settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API key not configured",
        )
    if api_key_header != settings.api_key.get_secret_value():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials"
        )
    return api_key_header
