"""Low-level ASGI writer shared by the envelope middlewares."""

from __future__ import annotations

import logging
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.types import Message, Send

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.models.responses import Response

logger = logging.getLogger(__name__)


async def write_envelope(
    send: Send,
    status_code: int,
    envelope: Response[Any],
    settings: EnvelopeSettings,
    start_message: Message | None = None,
) -> None:
    """Send ``envelope`` as a complete response.

    Headers of ``start_message`` are kept apart from content type and length.
    If the client goes away mid-write the write is abandoned without raising.
    """
    body = envelope.to_json(indent=settings.json_indent)

    message: Message = {
        "type": "http.response.start",
        "status": status_code,
        "headers": list(start_message.get("headers", [])) if start_message else [],
    }
    headers = MutableHeaders(scope=message)
    headers["content-type"] = settings.content_type
    headers["content-length"] = str(len(body))

    try:
        await send(message)
        await send({"type": "http.response.body", "body": body, "more_body": False})
    except OSError:
        logger.debug("Client disconnected while writing error envelope", exc_info=True)
