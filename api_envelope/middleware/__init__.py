"""Middleware package: exception translation and status pages."""

from api_envelope.middleware.exception_handler import (
    Classification,
    ResponseExceptionMiddleware,
    classify_exception,
)
from api_envelope.middleware.registration import register_response_handlers
from api_envelope.middleware.status_pages import StatusPageMiddleware, reason_phrase

__all__ = [
    "Classification",
    "ResponseExceptionMiddleware",
    "StatusPageMiddleware",
    "classify_exception",
    "reason_phrase",
    "register_response_handlers",
]
