"""Common HTTP status codes used by envelope responses."""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """Status codes that double as machine-readable error identifiers."""

    SUCCESS = 200
    CREATED = 201
    BAD_REQUEST = 400
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    LOCKED = 423
    CANCELED = 499  # Client closed request
    UNHANDLED = 500
    NOT_IMPLEMENTED = 501
