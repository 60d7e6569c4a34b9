"""Structured response envelopes and exception translation for FastAPI."""

from api_envelope.errors import AccessDeniedError, InvalidOperationError, OperationCancelledError
from api_envelope.logging_config import JsonFormatter, configure_logging
from api_envelope.middleware import (
    ResponseExceptionMiddleware,
    StatusPageMiddleware,
    register_response_handlers,
)
from api_envelope.models import ErrorInfo, Response, StatusCode, Stopwatch
from api_envelope.responses import (
    ResponseFactory,
    as_response,
    as_typed,
    replace_diagnostics,
    with_diagnostics,
)

__all__ = [
    "AccessDeniedError",
    "ErrorInfo",
    "InvalidOperationError",
    "JsonFormatter",
    "OperationCancelledError",
    "Response",
    "ResponseExceptionMiddleware",
    "ResponseFactory",
    "StatusCode",
    "StatusPageMiddleware",
    "Stopwatch",
    "as_response",
    "as_typed",
    "configure_logging",
    "register_response_handlers",
    "replace_diagnostics",
    "with_diagnostics",
]
