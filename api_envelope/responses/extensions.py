"""Operations on existing envelopes.

``with_diagnostics`` and ``replace_diagnostics`` mutate the envelope in
place and return the same instance, so a caller holding the original
reference observes the change. ``as_typed`` builds a new envelope.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from api_envelope.errors import InvalidOperationError
from api_envelope.models.responses import Response

TResponse = TypeVar("TResponse", bound=Response)
TData = TypeVar("TData")


def with_diagnostics(
    response: TResponse, configure: Callable[[dict[str, Any]], None]
) -> TResponse:
    """Apply ``configure`` to the diagnostics bag, creating it if missing."""
    if response.diagnostics is None:
        response.diagnostics = {}
    configure(response.diagnostics)
    return response


def replace_diagnostics(response: TResponse, diagnostics: dict[str, Any] | None) -> TResponse:
    response.diagnostics = diagnostics
    return response


def as_typed(
    response: Response[Any],
    data_type: type[TData] | None = None,
    diagnostics: dict[str, Any] | None = None,
) -> Response[TData]:
    """Re-type a failed envelope without inventing a payload.

    Raises ``InvalidOperationError`` when ``response`` is a success, since a
    typed payload cannot be produced from nothing.
    """
    if response.success:
        raise InvalidOperationError("Only failed responses can be converted.")

    model = Response[data_type] if data_type is not None else Response[Any]
    return model(
        error=response.error,
        diagnostics=diagnostics if diagnostics is not None else response.diagnostics,
    )
