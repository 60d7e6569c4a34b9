"""Public models for the response envelope."""

from api_envelope.models.diagnostics import Stopwatch, describe_exception
from api_envelope.models.responses import ErrorInfo, Response
from api_envelope.models.status_codes import StatusCode

__all__ = [
    "ErrorInfo",
    "Response",
    "StatusCode",
    "Stopwatch",
    "describe_exception",
]
