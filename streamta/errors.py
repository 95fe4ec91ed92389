"""
Error taxonomy shared by every indicator.

Exactly three kinds exist. All of them are precondition failures detected
synchronously (at construction or state decoding); none is raised from an
indicator's update() path.
"""

from __future__ import annotations

from enum import Enum
from numbers import Integral


class ErrorKind(str, Enum):
    """Kinds of indicator errors."""

    INVALID_PARAMETER = "invalid_parameter"
    DATA_ITEM_INCOMPLETE = "data_item_incomplete"
    DATA_ITEM_INVALID = "data_item_invalid"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.INVALID_PARAMETER: "invalid parameter",
    ErrorKind.DATA_ITEM_INCOMPLETE: "data item is incomplete",
    ErrorKind.DATA_ITEM_INVALID: "data item is invalid",
}


class IndicatorError(ValueError):
    """
    Base class for indicator errors.

    Subclasses ValueError so callers that already guard parameter parsing
    with ``except ValueError`` keep working.

    Attributes:
        kind: The ErrorKind of this failure.
    """

    kind: ErrorKind = ErrorKind.INVALID_PARAMETER

    def __init__(self, detail: str = "") -> None:
        message = self.kind.description
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class InvalidParameterError(IndicatorError):
    """A structural constructor argument violates its contract."""

    kind = ErrorKind.INVALID_PARAMETER


class DataItemIncompleteError(IndicatorError):
    """A data item is missing required fields."""

    kind = ErrorKind.DATA_ITEM_INCOMPLETE


class DataItemInvalidError(IndicatorError):
    """A data item is present but malformed."""

    kind = ErrorKind.DATA_ITEM_INVALID


def validate_period(period: int, owner: str) -> int:
    """
    Validate a window length.

    Raises:
        InvalidParameterError: If period is not a positive integer.
    """
    # bool is an int subclass but never a meaningful window length
    if isinstance(period, bool) or not isinstance(period, Integral) or period < 1:
        raise InvalidParameterError(
            f"{owner} 'period' must be integer >= 1, got {period!r}\n"
            f"\n"
            f"Fix: {owner}(period=14)"
        )
    return int(period)
