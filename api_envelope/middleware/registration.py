"""Wiring of the envelope middlewares into a FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response as StarletteResponse

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.logging_config import configure_logging
from api_envelope.middleware.exception_handler import ResponseExceptionMiddleware
from api_envelope.middleware.status_pages import StatusPageMiddleware, reason_phrase
from api_envelope.responses.factory import ResponseFactory
from api_envelope.responses.transport import EnvelopeResponse, as_response
from api_envelope.responses.validation import bad_request_from_validation, field_errors_from_pydantic

# Statuses that must not carry a body.
_BODYLESS_STATUSES = {204, 304}


def register_response_handlers(
    app: FastAPI,
    settings: EnvelopeSettings | None = None,
    factory: ResponseFactory | None = None,
) -> None:
    """Install envelope error handling on ``app``.

    Starlette applies middleware in reverse order of ``add_middleware`` calls,
    so the exception middleware ends up outside the status-page translator.
    """
    settings = settings or EnvelopeSettings()
    factory = factory or ResponseFactory()

    if settings.json_logging:
        configure_logging(settings.log_level)

    async def _validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> EnvelopeResponse:
        """Handle FastAPI / Pydantic RequestValidationError (400)."""
        result = field_errors_from_pydantic(exc.errors())
        return as_response(bad_request_from_validation(factory, result))

    async def _http_error_handler(
        _request: Request, exc: StarletteHTTPException
    ) -> StarletteResponse:
        """Handle HTTPException, including unmatched routes (404) and methods (405)."""
        if exc.status_code in _BODYLESS_STATUSES:
            return StarletteResponse(status_code=exc.status_code, headers=exc.headers)
        message = exc.detail if isinstance(exc.detail, str) else reason_phrase(exc.status_code)
        return as_response(factory.error(exc.status_code, message), headers=exc.headers)

    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]

    if settings.translate_status_pages:
        app.add_middleware(StatusPageMiddleware, factory=factory, settings=settings)
    app.add_middleware(ResponseExceptionMiddleware, factory=factory, settings=settings)
