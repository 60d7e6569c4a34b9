"""Property tests for ResponseFactory outcomes."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from api_envelope.responses.factory import ResponseFactory
from api_envelope.responses.validation import FieldErrors, bad_request_from_validation

_factory = ResponseFactory()

id_names = st.none() | st.text(max_size=15)
id_values = st.none() | st.integers() | st.text(max_size=15) | st.uuids().map(str)
problem_lists = st.lists(st.text(max_size=30), max_size=10)
field_error_maps = st.dictionaries(
    st.text(min_size=1, max_size=15),
    st.lists(st.text(min_size=1, max_size=30), min_size=1, max_size=3),
    min_size=1,
    max_size=5,
)


@settings(max_examples=100)
@given(id_name=id_names, id_value=id_values)
def test_not_found_details_key_is_never_empty(id_name, id_value) -> None:
    resp = _factory.not_found(id_name, id_value)

    assert resp.error.code == 404
    (key,) = resp.error.details
    assert key == (id_name if id_name is not None else "Id")
    assert resp.error.details[key] == id_value


@settings(max_examples=100)
@given(problems=problem_lists)
def test_conflict_problems_keep_order(problems: list[str]) -> None:
    resp = _factory.conflict("conflict", problems)
    assert resp.error.code == 409
    assert resp.error.details == {"Problems": problems}


@settings(max_examples=100)
@given(problems=problem_lists)
def test_duplicate_and_business_rules_are_conflicts(problems: list[str]) -> None:
    for resp in (_factory.duplicate(problems), _factory.business_rules(problems)):
        assert resp.success is False
        assert resp.error.code == 409
        assert resp.error.details["Problems"] == problems


@settings(max_examples=100)
@given(errors=field_error_maps)
def test_bad_request_keys_details_by_field(errors: dict[str, list[str]]) -> None:
    resp = bad_request_from_validation(_factory, FieldErrors(errors))

    assert resp.error.code == 400
    assert resp.error.details == errors
