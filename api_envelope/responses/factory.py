"""Construction helpers for the common envelope outcomes.

``ResponseFactory`` is stateless; construct one and pass it wherever
envelopes are built. New outcomes are added by subclassing it or by free
functions that take a factory.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from api_envelope.models.responses import ErrorInfo, Response
from api_envelope.models.status_codes import StatusCode

TData = TypeVar("TData")

Details = Mapping[str, Any] | Iterable[tuple[str, Any]]

NOT_FOUND_MESSAGE = "The specified resource was not found."
BAD_REQUEST_MESSAGE = "Request validation failed."
DUPLICATE_MESSAGE = "Violation of unique constraints."
BUSINESS_RULES_MESSAGE = "Violation of business rules."
LOCKED_MESSAGE = "The resource is currently locked for editing by another user."
PROTECTED_MESSAGE = "The resource is protected and cannot be modified."


def _problem_list(problems: tuple[Any, ...]) -> list[str]:
    # conflict("m", ["a", "b"]) and conflict("m", "a", "b") are equivalent
    if len(problems) == 1 and not isinstance(problems[0], str):
        return list(problems[0] or ())
    return list(problems)


class ResponseFactory:
    """Builds pre-shaped envelopes for success and failure outcomes."""

    def success(self, data: TData | None = None) -> Response[TData]:
        return Response[Any](data=data)

    def error(self, code: int, message: str, details: Details | None = None) -> Response[Any]:
        return Response[Any](
            error=ErrorInfo(
                code=int(code),
                message=message,
                details=dict(details) if details is not None else None,
            )
        )

    def error_from_exception(self, code: int, message: str, exc: BaseException) -> Response[Any]:
        """Failure carrying the original exception under the ``Exception`` detail."""
        return self.error(code, message, {"Exception": exc})

    def not_found(self, id_name: str | None = "Id", id_value: Any = None) -> Response[Any]:
        # detail keys can never be None
        return self.not_found_details({id_name if id_name is not None else "Id": id_value})

    def not_found_details(self, details: Details) -> Response[Any]:
        return self.error(StatusCode.NOT_FOUND, NOT_FOUND_MESSAGE, details)

    def bad_request(self, field_errors: Mapping[str, Sequence[str]] | None) -> Response[Any]:
        details = (
            {field: list(messages) for field, messages in field_errors.items()}
            if field_errors is not None
            else None
        )
        return self.error(StatusCode.BAD_REQUEST, BAD_REQUEST_MESSAGE, details)

    def conflict(self, message: str, *problems: Any) -> Response[Any]:
        """Conflict with a ``Problems`` list; accepts an iterable or varargs."""
        return self.error(StatusCode.CONFLICT, message, {"Problems": _problem_list(problems)})

    def duplicate(self, *problems: Any) -> Response[Any]:
        return self.conflict(DUPLICATE_MESSAGE, _problem_list(problems))

    def business_rules(self, *problems: Any) -> Response[Any]:
        return self.conflict(BUSINESS_RULES_MESSAGE, _problem_list(problems))

    def locked(self, user_id: int | None, display_name: str | None) -> Response[Any]:
        details = {"UserId": user_id, "DisplayName": display_name}
        return self.error(StatusCode.LOCKED, LOCKED_MESSAGE, details)

    def protected(self) -> Response[Any]:
        return self.error(StatusCode.LOCKED, PROTECTED_MESSAGE)
