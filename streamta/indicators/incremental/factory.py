"""
Factory function and registry for incremental indicators.

Provides create_incremental_indicator() to instantiate any incremental
indicator from a type string and parameter dict, plus registry query
functions used by the bank and the state serializer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ...config.constants import (
    DEFAULT_EXTREMUM_PERIOD,
    DEFAULT_FORECAST_PERIOD,
    DEFAULT_THRESHOLD,
)
from .base import IncrementalIndicator
from .crossover import CrossAbove, CrossBelow
from .extremum import HighestHighValue, LowestLowValue
from .regression import LinearRegressionPrediction

logger = logging.getLogger(__name__)


# =============================================================================
# Type registry
# =============================================================================


INDICATOR_CLASSES: dict[str, type[IncrementalIndicator]] = {
    "cross_above": CrossAbove,
    "cross_below": CrossBelow,
    "hhv": HighestHighValue,
    "llv": LowestLowValue,
    "forecast": LinearRegressionPrediction,
}

# Long-form names accepted alongside the canonical short keys
_ALIASES: dict[str, str] = {
    "crossabove": "cross_above",
    "crossbelow": "cross_below",
    "highest_high_value": "hhv",
    "lowest_low_value": "llv",
    "linear_regression_prediction": "forecast",
    "linreg_forecast": "forecast",
}

_TYPE_BY_CLASS: dict[type[IncrementalIndicator], str] = {
    cls: name for name, cls in INDICATOR_CLASSES.items()
}

_VALID_PARAMS: dict[str, frozenset[str]] = {
    "cross_above": frozenset({"threshold"}),
    "cross_below": frozenset({"threshold"}),
    "hhv": frozenset({"period"}),
    "llv": frozenset({"period"}),
    "forecast": frozenset({"period"}),
}


def normalize_indicator_type(indicator_type: str) -> str:
    """Lower-case an indicator type and resolve aliases."""
    key = indicator_type.strip().lower()
    return _ALIASES.get(key, key)


def _validate_params(indicator_type: str, params: dict[str, Any]) -> None:
    """Raise ValueError if params contains unknown keys for this indicator."""
    valid = _VALID_PARAMS[indicator_type]
    unknown = set(params.keys()) - valid
    if unknown:
        raise ValueError(
            f"Unknown params for '{indicator_type}': {sorted(unknown)}. "
            f"Valid: {sorted(valid)}"
        )


_FACTORY: dict[str, Callable[[dict[str, Any]], IncrementalIndicator]] = {
    "cross_above": lambda p: CrossAbove(threshold=p.get("threshold", DEFAULT_THRESHOLD)),
    "cross_below": lambda p: CrossBelow(threshold=p.get("threshold", DEFAULT_THRESHOLD)),
    "hhv": lambda p: HighestHighValue(period=p.get("period", DEFAULT_EXTREMUM_PERIOD)),
    "llv": lambda p: LowestLowValue(period=p.get("period", DEFAULT_EXTREMUM_PERIOD)),
    "forecast": lambda p: LinearRegressionPrediction(period=p.get("period", DEFAULT_FORECAST_PERIOD)),
}


def create_incremental_indicator(
    indicator_type: str,
    params: dict[str, Any] | None = None,
) -> IncrementalIndicator:
    """
    Create an incremental indicator from type and params.

    Raises:
        KeyError: If the indicator type is not supported.
        ValueError: If params contains unknown keys.
        InvalidParameterError: If a param value is rejected by the indicator.
    """
    params = params or {}
    key = normalize_indicator_type(indicator_type)
    factory_fn = _FACTORY.get(key)
    if factory_fn is None:
        raise KeyError(
            f"Unsupported indicator type '{indicator_type}'. "
            f"Supported: {list_incremental_indicators()}"
        )
    _validate_params(key, params)

    indicator = factory_fn(params)
    logger.debug("created %s with params %s", key, params)
    return indicator


# =============================================================================
# Registry queries
# =============================================================================


def supports_incremental(indicator_type: str) -> bool:
    """Check if an indicator type (or alias) is supported."""
    return normalize_indicator_type(indicator_type) in INDICATOR_CLASSES


def list_incremental_indicators() -> list[str]:
    """Get the canonical type names of all supported indicators."""
    return sorted(INDICATOR_CLASSES)


def indicator_class_for(indicator_type: str) -> type[IncrementalIndicator]:
    """
    Resolve a type string to its indicator class.

    Raises:
        KeyError: If the indicator type is not supported.
    """
    key = normalize_indicator_type(indicator_type)
    if key not in INDICATOR_CLASSES:
        raise KeyError(
            f"Unsupported indicator type '{indicator_type}'. "
            f"Supported: {list_incremental_indicators()}"
        )
    return INDICATOR_CLASSES[key]


def indicator_type_of(indicator: IncrementalIndicator) -> str:
    """
    Reverse lookup: the canonical type string of an indicator instance.

    Raises:
        KeyError: If the instance's class is not registered.
    """
    try:
        return _TYPE_BY_CLASS[type(indicator)]
    except KeyError:
        raise KeyError(
            f"{type(indicator).__name__} is not a registered incremental indicator"
        ) from None
