"""Generic API response envelope model.

Every response is wrapped in the same envelope, emitted in this order:
{ error?: {code, message, details?}, data?: T, diagnostics?: {...} }

Absent fields are omitted from the wire form rather than emitted as null.
``success`` is derived from ``error`` and is never serialized.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, SerializerFunctionWrapHandler, field_serializer, model_serializer

from api_envelope.models.diagnostics import render_value

TData = TypeVar("TData")


def _drop_absent(payload: dict[str, Any]) -> dict[str, Any]:
    # Only top-level absence is elided; nested nulls inside values survive.
    return {key: value for key, value in payload.items() if value is not None}


class ErrorInfo(BaseModel):
    """Failure description; ``code`` doubles as the HTTP status code."""

    code: int
    message: str
    details: dict[str, Any] | None = None

    @field_serializer("details")
    def serialize_details(self, details: dict[str, Any] | None) -> Any:
        return render_value(details)

    @model_serializer(mode="wrap")
    def serialize_error(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _drop_absent(handler(self))


class Response(BaseModel, Generic[TData]):
    """JSON envelope for all API responses."""

    error: ErrorInfo | None = None
    data: TData | None = None
    diagnostics: dict[str, Any] | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @field_serializer("diagnostics")
    def serialize_diagnostics(self, diagnostics: dict[str, Any] | None) -> Any:
        return render_value(diagnostics)

    @model_serializer(mode="wrap")
    def serialize_envelope(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _drop_absent(handler(self))

    def to_json(self, indent: int | None = None) -> bytes:
        """Serialize the envelope to its UTF-8 JSON wire form."""
        return self.model_dump_json(indent=indent).encode("utf-8")
