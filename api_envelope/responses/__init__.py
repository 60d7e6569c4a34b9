"""Envelope construction, manipulation and transport helpers."""

from api_envelope.responses.extensions import as_typed, replace_diagnostics, with_diagnostics
from api_envelope.responses.factory import ResponseFactory
from api_envelope.responses.transport import EnvelopeResponse, as_response
from api_envelope.responses.validation import (
    FieldErrors,
    ValidationResult,
    bad_request_from_validation,
    field_errors_from_pydantic,
)

__all__ = [
    "EnvelopeResponse",
    "FieldErrors",
    "ResponseFactory",
    "ValidationResult",
    "as_response",
    "as_typed",
    "bad_request_from_validation",
    "field_errors_from_pydantic",
    "replace_diagnostics",
    "with_diagnostics",
]
