"""Property-based tests for InternalError message composition."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from internal_errors.exceptions import InternalError

PROPERTY_SETTINGS = settings(max_examples=200, deadline=None)

_TEXT = st.text(min_size=1, max_size=40)


@PROPERTY_SETTINGS
@given(module=_TEXT, detail=_TEXT)
def test_module_and_detail_are_joined_with_colon(module: str, detail: str) -> None:
    err = InternalError(module, detail)
    assert str(err) == module + ":" + detail
    assert err.module == module
    assert err.detail == detail


@PROPERTY_SETTINGS
@given(module=_TEXT)
def test_module_alone_is_the_message(module: str) -> None:
    assert str(InternalError(module)) == module


@PROPERTY_SETTINGS
@given(message=st.text(max_size=40))
def test_cause_only_defers_to_cause_message(message: str) -> None:
    cause = RuntimeError(message)
    err = InternalError(cause)
    assert str(err) == str(cause)
    assert err.cause is cause


@PROPERTY_SETTINGS
@given(module=_TEXT, detail=st.one_of(st.none(), _TEXT))
def test_cause_is_preserved_by_identity(module: str, detail: str | None) -> None:
    cause = OSError("underlying")
    err = InternalError(module, detail, cause)
    assert err.cause is cause
    assert err.__cause__ is cause
