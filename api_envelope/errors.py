"""Error hierarchy for the envelope library.

The middleware maps raised conditions onto status codes:

- ``PermissionError`` (``AccessDeniedError``) -> 403
- ``OperationCancelledError`` -> 499
- ``NotImplementedError`` -> 501
- anything else -> 500
"""

from __future__ import annotations


class InvalidOperationError(RuntimeError):
    """An operation was invoked on a value it is not valid for."""


class AccessDeniedError(PermissionError):
    """The caller is not allowed to perform the requested operation."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class OperationCancelledError(Exception):
    """Cooperative cancellation of the in-flight request.

    Distinct from ``asyncio.CancelledError``, which is never intercepted.
    """

    def __init__(self, message: str = "The operation was canceled.") -> None:
        super().__init__(message)
