"""Envelope bodies for bare error status codes.

When a downstream app answers with a 4xx/5xx status and an empty body, the
response is replaced with ``{"error": {"code": <status>, "message": <reason>}}``.
Responses that carry a body are forwarded untouched.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.middleware.writer import write_envelope
from api_envelope.responses.factory import ResponseFactory

logger = logging.getLogger(__name__)


def reason_phrase(status_code: int) -> str:
    """Standard reason phrase for ``status_code``; empty when unknown."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def _is_error_status(status_code: int) -> bool:
    return 400 <= status_code <= 599


class StatusPageMiddleware:
    """Pure ASGI middleware that fills empty error responses with an envelope."""

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
        if scope["type"] != "http" or scope.get("method") == "HEAD":
            await self.app(scope, receive, send)
            return

        # Error starts are held back, along with any empty non-final chunks,
        # until the body shows whether the response is empty.
        pending_start: Message | None = None
        held: list[Message] = []

        async def send_wrapper(message: Message) -> None:
            nonlocal pending_start
            if message["type"] == "http.response.start":
                if _is_error_status(message["status"]):
                    pending_start = message
                    return
                await send(message)
                return

            if pending_start is not None:
                if message["type"] == "http.response.body" and not message.get("body"):
                    if message.get("more_body", False):
                        held.append(message)
                        return
                    start, pending_start = pending_start, None
                    held.clear()
                    await self._write_status_page(start, send)
                    return

                start, pending_start = pending_start, None
                await send(start)
                for chunk in held:
                    await send(chunk)
                held.clear()

            await send(message)

        await self.app(scope, receive, send_wrapper)

    async def _write_status_page(self, start: Message, send: Send) -> None:
        status_code = start["status"]
        envelope = self.factory.error(status_code, reason_phrase(status_code))
        logger.debug("Translated empty %d response into envelope", status_code)
        await write_envelope(send, status_code, envelope, self.settings, start_message=start)
