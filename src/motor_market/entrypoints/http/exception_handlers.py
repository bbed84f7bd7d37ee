"""Exception handlers turning marketplace errors into ErrorResponse bodies.

Every handler answers ``{"detail", "code"}`` plus ``errors`` when individual
fields are at fault, and logs the failure with the request path and method.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from motor_market.domain.errors import DomainError, FieldError

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422_UNPROCESSABLE,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Pydantic prefixes each error location with where the value came from
_LOCATION_SOURCES = frozenset({"body", "query", "path"})


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


def _error_response(
    status_code: int,
    detail: str,
    code: str,
    errors: list[FieldError] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail, "code": code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """
    Answer a DomainError with the status its ``error_code`` maps to.

    VALIDATION_ERROR is 422, NOT_FOUND 404, CONFLICT 409 (invalid inventory
    transitions included) and INTERNAL_ERROR 500. Any other code is 400.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    log_extra: dict[str, Any] = {
        "error_code": exc.error_code,
        "error_message": exc.message,
        **_request_context(request),
    }

    if status_code >= 500:
        logger.error("Domain error occurred", extra={**log_extra, "context": exc.context})
    else:
        logger.info("Client error", extra=log_extra)

    return _error_response(
        status_code,
        detail=exc.message,
        code=exc.error_code,
        errors=exc.to_dict().get("errors"),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Answer schema violations caught before any use case runs.

    Typical causes are ``price_min=abc``, ``limit=500``, ``fuel_type=steam`` or
    a missing ``buyer_name``. Each violation becomes one field entry keyed by
    its dotted location without the body/query/path prefix.
    """
    errors = [
        FieldError(
            field=".".join(str(part) for part in error["loc"] if part not in _LOCATION_SOURCES),
            message=error["msg"],
            code=error["type"],
        )
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_context(request)})

    return _error_response(
        HTTP_422_UNPROCESSABLE,
        detail="Invalid request parameters",
        code="VALIDATION_ERROR",
        errors=errors,
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Malformed identifiers reaching a repository (e.g. a non-UUID vehicle id on update)."""
    logger.info("Value error", extra={"error_message": str(exc), **_request_context(request)})

    return _error_response(HTTP_422_UNPROCESSABLE, detail=str(exc), code="INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_context(request),
        },
    )

    # The traceback stays in the logs; the client gets a generic body
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
        code="INTERNAL_ERROR",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``. Called once by build_app()."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, handle_request_validation_error  # type: ignore[arg-type]
    )
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered")
