"""Translation of unhandled exceptions into error envelopes.

``ResponseExceptionMiddleware`` wraps the downstream ASGI app. When the app
raises, the exception is classified (most specific rule first) and written
as an envelope, unless the response has already started, in which case the
original exception is re-raised untouched:

1. ``PermissionError``        -> 403, exception message
2. ``OperationCancelledError`` -> 499, exception message
3. ``NotImplementedError``    -> 501, exception message
4. any other ``Exception``    -> 500, "Unhandled Error" (+ exception detail)

``asyncio.CancelledError`` is a ``BaseException`` and always propagates.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.errors import OperationCancelledError
from api_envelope.middleware.writer import write_envelope
from api_envelope.models.responses import Response
from api_envelope.models.status_codes import StatusCode
from api_envelope.responses.factory import ResponseFactory

logger = logging.getLogger(__name__)

UNHANDLED_MESSAGE = "Unhandled Error"

# Checked in order; the first matching type wins.
_RULES: tuple[tuple[type[Exception], StatusCode], ...] = (
    (PermissionError, StatusCode.FORBIDDEN),
    (OperationCancelledError, StatusCode.CANCELED),
    (NotImplementedError, StatusCode.NOT_IMPLEMENTED),
)


class Classification(NamedTuple):
    """How a raised exception is presented to the client."""

    status_code: int
    message: str
    attach_original: bool


def classify_exception(exc: Exception) -> Classification:
    for exc_type, status_code in _RULES:
        if isinstance(exc, exc_type):
            return Classification(int(status_code), str(exc), False)
    return Classification(int(StatusCode.UNHANDLED), UNHANDLED_MESSAGE, True)


class ResponseExceptionMiddleware:
    """Pure ASGI middleware that turns downstream exceptions into envelopes.

    Implemented at the ASGI level rather than on ``BaseHTTPMiddleware`` so the
    ``http.response.start`` message can be observed directly.
    """

    def __init__(
        self,
        app: ASGIApp,
        factory: ResponseFactory | None = None,
        settings: EnvelopeSettings | None = None,
    ) -> None:
        self.app = app
        self.factory = factory or ResponseFactory()
        self.settings = settings or EnvelopeSettings()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            classification = classify_exception(exc)
            log_extra = {
                "path": scope.get("path"),
                "method": scope.get("method"),
                "status_code": classification.status_code,
                "exception_type": type(exc).__name__,
            }

            # Status and headers are already on the wire; nothing can be rewritten.
            if response_started:
                logger.error(
                    "Exception after response started; re-raising",
                    extra=log_extra,
                    exc_info=exc,
                )
                raise

            self._log(exc, classification, log_extra)
            await write_envelope(
                send,
                classification.status_code,
                self._build(exc, classification),
                self.settings,
            )

    def _build(self, exc: Exception, classification: Classification) -> Response[Any]:
        if classification.attach_original and self.settings.expose_exception_details:
            return self.factory.error_from_exception(
                classification.status_code, classification.message, exc
            )
        return self.factory.error(classification.status_code, classification.message)

    def _log(self, exc: Exception, classification: Classification, extra: dict) -> None:
        if not self.settings.log_handled_exceptions:
            return
        if classification.status_code == StatusCode.UNHANDLED:
            logger.error("Unhandled exception: %s", exc, extra=extra, exc_info=exc)
        else:
            logger.warning(
                "Request failed with %d: %s", classification.status_code, exc, extra=extra
            )
