"""Bridges between validation results and the ``bad_request`` envelope."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from api_envelope.errors import InvalidOperationError
from api_envelope.models.responses import Response
from api_envelope.responses.factory import ResponseFactory

# Location prefixes FastAPI adds in front of the field path.
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


@runtime_checkable
class ValidationResult(Protocol):
    """Anything that can report validity and per-field messages."""

    @property
    def is_valid(self) -> bool: ...

    def errors(self) -> Mapping[str, Sequence[str]]: ...


class FieldErrors:
    """Ordered field -> messages collection implementing ``ValidationResult``."""

    def __init__(self, errors: Mapping[str, Iterable[str]] | None = None) -> None:
        self._errors: dict[str, list[str]] = {}
        for field, messages in (errors or {}).items():
            for message in messages:
                self.add(field, message)

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def errors(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def __len__(self) -> int:
        return len(self._errors)


def field_errors_from_pydantic(errors: Iterable[Mapping[str, Any]]) -> FieldErrors:
    """Group a pydantic / FastAPI error list by dotted field path."""
    result = FieldErrors()
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        result.add(".".join(loc), err.get("msg", "Invalid value"))
    return result


def bad_request_from_validation(factory: ResponseFactory, result: ValidationResult) -> Response[Any]:
    """Build the 400 envelope from a failed validation result.

    The caller must check ``result.is_valid`` first; a valid result raises
    ``InvalidOperationError``.
    """
    if result.is_valid:
        raise InvalidOperationError("Validation result reports no errors.")
    return factory.bad_request(result.errors())
