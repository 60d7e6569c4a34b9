"""Binding between envelopes and Starlette responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi.responses import JSONResponse

from api_envelope.models.responses import Response
from api_envelope.models.status_codes import StatusCode


class EnvelopeResponse(JSONResponse):
    """JSONResponse that renders an envelope with its own serializer."""

    def render(self, content: Any) -> bytes:
        if isinstance(content, Response):
            return content.to_json()
        return super().render(content)


def as_response(
    response: Response[Any],
    default_status: int = StatusCode.SUCCESS,
    headers: Mapping[str, str] | None = None,
) -> EnvelopeResponse:
    """Pick the HTTP status from ``error.code``, else ``default_status``."""
    status_code = response.error.code if response.error is not None else int(default_status)
    return EnvelopeResponse(content=response, status_code=status_code, headers=headers)
