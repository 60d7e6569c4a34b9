"""Property tests for envelope consistency.

Success envelopes never carry an error; error envelopes are never successful;
absent fields never reach the wire; wire order is error, data, diagnostics.
"""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from api_envelope.models import ErrorInfo, Response
from api_envelope.responses.factory import ResponseFactory

_factory = ResponseFactory()


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=20)
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=10), children, max_size=4),
    max_leaves=10,
)
error_codes = st.integers(min_value=400, max_value=599)
messages = st.text(min_size=1, max_size=50)
diagnostics = st.none() | st.dictionaries(st.text(max_size=10), json_values, max_size=4)


# ---------------------------------------------------------------------------
# Success / failure state
# ---------------------------------------------------------------------------


@settings(max_examples=100)
@given(data=json_values)
def test_success_envelopes_have_no_error(data) -> None:
    resp = _factory.success(data)
    body = json.loads(resp.to_json())

    assert resp.success is True
    assert resp.error is None
    assert "error" not in body
    assert ("data" in body) == (data is not None)


@settings(max_examples=100)
@given(code=error_codes, message=messages, data=json_values)
def test_error_takes_precedence_over_data(code: int, message: str, data) -> None:
    resp = Response(error=ErrorInfo(code=code, message=message), data=data)
    assert resp.success is False


@settings(max_examples=100)
@given(code=error_codes, message=messages)
def test_error_envelopes_expose_code_and_message(code: int, message: str) -> None:
    body = json.loads(_factory.error(code, message).to_json())
    assert body == {"error": {"code": code, "message": message}}


# ---------------------------------------------------------------------------
# Wire form
# ---------------------------------------------------------------------------


@settings(max_examples=100)
@given(
    has_error=st.booleans(),
    data=json_values,
    diag=diagnostics,
)
def test_wire_keys_follow_fixed_order_and_omit_absent(has_error: bool, data, diag) -> None:
    error = ErrorInfo(code=500, message="x") if has_error else None
    resp = Response(error=error, data=data, diagnostics=diag)

    keys = list(json.loads(resp.to_json()))

    expected = [
        name
        for name, value in (("error", error), ("data", data), ("diagnostics", diag))
        if value is not None
    ]
    assert keys == expected
    assert "success" not in keys


@settings(max_examples=100)
@given(data=json_values)
def test_payload_survives_serialization(data) -> None:
    body = json.loads(_factory.success(data).to_json())
    assert body.get("data") == data
