"""Errors raised by the marketplace core.

Every error carries a stable ``error_code``. The HTTP entrypoint maps codes to
status codes and never inspects messages.
"""

from typing import Any, TypedDict


class FieldError(TypedDict):
    """One offending field of a request, as echoed back to the client."""

    field: str
    message: str
    code: str


def field_error(field: str, message: str, code: str = "INVALID_VALUE") -> FieldError:
    return FieldError(field=field, message=message, code=code)


class DomainError(Exception):
    """Root of the hierarchy. ``context`` holds ids and values worth echoing back."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """
    A request breaks a business rule the transport schema cannot express.

    Raised either with a single message (``year_min cannot be greater than
    year_max``) or with the per-field entries a ``validate()`` method collected,
    so that a sale with a zero price and a blank buyer reports both at once.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[FieldError] | None = errors or None
        default_message = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default_message, **context)

    @classmethod
    def raise_if_any(cls, errors: list[FieldError]) -> None:
        """Raise with ``errors`` unless the list is empty."""
        if errors:
            raise cls(errors=errors)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """
    A referenced vehicle, dealer or sale does not exist.

    Lookups and updates return None for unknown ids and the HTTP layer raises
    this on their behalf. Use cases raise it themselves only when the missing
    record is one the operation depends on, such as the vehicle and dealer of
    a sale or the target of a review.
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        self.resource = resource
        self.identifier = identifier
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """The request contradicts a resource's current state, e.g. selling a sold vehicle."""

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """An invariant of the core itself was broken. Logged at error level, answered as 500."""

    error_code: str = "INTERNAL_ERROR"
