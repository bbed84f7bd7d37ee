"""Body of every non-2xx response, plus ready-made ``responses=`` entries for routes."""

from typing import Any

from pydantic import BaseModel, ConfigDict

_RATING_FIELD_ERROR = {
    "field": "rating",
    "message": "Must be between 1 and 5",
    "code": "INVALID_RANGE",
}

_SALE_VALIDATION_BODY = {
    "detail": "Validation failed",
    "code": "VALIDATION_ERROR",
    "errors": [
        {"field": "sale_price", "message": "Must be a Decimal > 0", "code": "INVALID_VALUE"},
        {"field": "buyer_name", "message": "Must not be blank", "code": "INVALID_VALUE"},
    ],
}


class ErrorDetail(BaseModel):
    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(json_schema_extra={"example": _RATING_FIELD_ERROR})


class ErrorResponse(BaseModel):
    """
    ``detail`` is for humans, ``code`` for clients. ``errors`` lists offending
    fields and is present only on validation failures.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "Vehicle is already sold", "code": "CONFLICT"},
                _SALE_VALIDATION_BODY,
            ]
        }
    )


def _documented(status_code: int, description: str) -> dict[int, dict[str, Any]]:
    return {status_code: {"model": ErrorResponse, "description": description}}


NOT_FOUND_RESPONSE = _documented(404, "Resource not found")
CONFLICT_RESPONSE = _documented(409, "Conflicts with current state")
VALIDATION_RESPONSE = _documented(422, "Validation error")
