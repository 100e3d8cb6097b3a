"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging
import uuid

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.core.messages import get_message
from app.errors import (
    URI_FUNCTIONAL_EXCEPTION,
    URI_TECHNICAL_EXCEPTION,
    ErrorReason,
    FunctionalError,
    TechnicalError,
)
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

# Title reported for every functional error, whatever its subclass
FUNCTIONAL_ERROR_TITLE = "FunctionalError"


def _error_response(
    status_code: int, title: str, detail: str, type_: str, trace_id: str
) -> JSONResponse:
    """Return an error response in the {type, title, detail, status, traceId} shape."""
    body = ErrorResponse(
        type=type_,
        title=title,
        detail=detail,
        status=str(status_code),
        trace_id=trace_id,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def functional_error_handler(request: Request, exc: FunctionalError) -> JSONResponse:
    trace_id = uuid.uuid4().hex
    detail = get_message(exc.reason, *exc.params)
    logger.warning(
        "Functional error on %s %s [%s]: %s",
        request.method,
        request.url.path,
        trace_id,
        detail,
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        FUNCTIONAL_ERROR_TITLE,
        detail,
        URI_FUNCTIONAL_EXCEPTION,
        trace_id,
    )


def technical_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The raw message stays in the logs; clients only get the generic text.
    trace_id = uuid.uuid4().hex
    logger.error(
        "Technical error on %s %s [%s]",
        request.method,
        request.url.path,
        trace_id,
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        type(exc).__name__,
        get_message(ErrorReason.TECHNICAL),
        URI_TECHNICAL_EXCEPTION,
        trace_id,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app.

    Other unexpected exceptions are mapped by the catch_technical_errors middleware.
    """
    app.add_exception_handler(FunctionalError, functional_error_handler)
    app.add_exception_handler(TechnicalError, technical_error_handler)
