"""Pydantic Settings for the envelope middleware.

All environment variables use the ENVELOPE_ prefix.
Example: ENVELOPE_EXPOSE_EXCEPTION_DETAILS=true, ENVELOPE_JSON_INDENT=2
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class EnvelopeSettings(BaseSettings):
    """Envelope middleware configuration validated from environment variables."""

    # Opt-in: install the JSON log handler on the root logger at registration
    json_logging: bool = False
    log_level: str = "INFO"

    # Attach the raw exception to 500 responses. Leaks stack traces; keep off
    # for anything client-facing.
    expose_exception_details: bool = False
    log_handled_exceptions: bool = True

    # Serialization
    content_type: str = "application/json"
    json_indent: int | None = Field(default=None, ge=0)

    # Empty-bodied 4xx/5xx responses become envelopes
    translate_status_pages: bool = True

    model_config = {"env_prefix": "ENVELOPE_"}
