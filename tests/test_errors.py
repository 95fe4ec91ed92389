"""
Tests for the error taxonomy.
"""

import pytest

from streamta.errors import (
    DataItemIncompleteError,
    DataItemInvalidError,
    ErrorKind,
    IndicatorError,
    InvalidParameterError,
    validate_period,
)


@pytest.mark.parametrize("exc_cls,kind,text", [
    (InvalidParameterError, ErrorKind.INVALID_PARAMETER, "invalid parameter"),
    (DataItemIncompleteError, ErrorKind.DATA_ITEM_INCOMPLETE, "data item is incomplete"),
    (DataItemInvalidError, ErrorKind.DATA_ITEM_INVALID, "data item is invalid"),
])
def test_kind_and_message(exc_cls, kind, text):
    err = exc_cls()
    assert err.kind is kind
    assert str(err) == text
    assert isinstance(err, IndicatorError)
    assert isinstance(err, ValueError)


def test_detail_is_appended():
    err = DataItemInvalidError("bad window")
    assert str(err) == "data item is invalid: bad window"
    assert err.detail == "bad window"


def test_kinds_are_distinct():
    assert len({k.description for k in ErrorKind}) == 3


def test_validate_period_returns_int():
    assert validate_period(3, "HHV") == 3


def test_validate_period_error_has_fix_hint():
    with pytest.raises(InvalidParameterError) as exc_info:
        validate_period(0, "LLV")
    assert "Fix: LLV(period=14)" in str(exc_info.value)
