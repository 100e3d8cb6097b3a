"""HTTP middlewares wrapping every request, matched route or not."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.api.exception_handlers import technical_error_handler
from app.core.messages import get_message
from app.core.security import verify_api_key
from app.errors import ErrorReason
from app.schemas.error import ApiKeyErrorResponse

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _is_api_path(path: str) -> bool:
    return path == API_PREFIX or path.startswith(API_PREFIX + "/")


async def require_api_key(request: Request, call_next):
    """Reject /api requests without the shared api key, before routing."""
    if _is_api_path(request.url.path) and not verify_api_key(
        request.headers.get("api-key")
    ):
        logger.warning(
            "Invalid or missing API key on %s %s", request.method, request.url.path
        )
        body = ApiKeyErrorResponse(error=get_message(ErrorReason.INVALID_API_KEY))
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content=body.model_dump()
        )
    return await call_next(request)


async def catch_technical_errors(request: Request, call_next):
    """Turn any exception escaping a route into the technical 500 response."""
    try:
        return await call_next(request)
    except Exception as exc:
        return technical_error_handler(request, exc)
