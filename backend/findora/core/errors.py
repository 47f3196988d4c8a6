"""
Application exception hierarchy.

Every error raised across an API boundary inherits from AppError so the
exception handlers in `findora.api.errors` can turn it into a JSON body
with the matching status code.  InvalidInputError carries field-scoped
messages in the same flattened shape the request validator produces.
"""

from __future__ import annotations

from typing import Any, Iterable


class AppError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        errors: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class UnauthorizedError(AppError):
    """No identity, or an identity that cannot be trusted."""

    status_code = 401
    default_message = "Authentication required"


class InvalidInputError(AppError):
    """Input violated the schema or a business rule."""

    status_code = 400
    default_message = "Invalid input"

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidInputError":
        return cls(message, errors={"formErrors": [], "fieldErrors": {field: [message]}})


class NotFoundError(AppError):
    """The requested record does not exist for this identity."""

    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """The write would break a uniqueness rule."""

    status_code = 409
    default_message = "Conflict"


class InternalError(AppError):
    """Unexpected persistence or runtime fault.  Details stay in the logs."""

    status_code = 500
    default_message = "Internal server error"


class StorageError(AppError):
    """Object storage operation failed."""

    status_code = 500
    default_message = "Internal server error"


def flatten_errors(errors: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """
    Collapse pydantic error dicts into ``{"formErrors": [...], "fieldErrors": {...}}``.

    The field key is the first location segment after the request part
    ("body", "query", "path"), so nested list items report against their
    parent field.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}

    for error in errors:
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        message = _clean_message(error.get("msg", "Invalid value"))
        if not loc:
            form_errors.append(message)
            continue
        field_errors.setdefault(str(loc[0]), []).append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


def _clean_message(message: str) -> str:
    # Custom validators surface as "Value error, <text>"
    prefix = "Value error, "
    return message[len(prefix):] if message.startswith(prefix) else message
