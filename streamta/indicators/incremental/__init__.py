"""
Incremental indicator computation for streaming samples.

One sample in, one updated output out, without re-scanning history.

Usage:
    from streamta.indicators.incremental import HighestHighValue, CrossAbove

    hhv = HighestHighValue(period=20)
    breakout = CrossAbove(threshold=100.0)

    for price in stream:
        high_20 = hhv.update(price)
        if breakout.update(price):
            ...
"""

from __future__ import annotations

# Base class and snapshots
from .base import IncrementalIndicator, CrossoverState, WindowState

# Storage primitives
from .primitives import RingBuffer

# Edge detectors
from .crossover import CrossAbove, CrossBelow

# Window extremum trackers
from .extremum import HighestHighValue, LowestLowValue

# Regression forecaster
from .regression import LinearRegressionPrediction

# Factory and utilities
from .factory import (
    create_incremental_indicator,
    supports_incremental,
    list_incremental_indicators,
    indicator_class_for,
    indicator_type_of,
    INDICATOR_CLASSES,
)

# State persistence
from .serialization import encode_state, decode_state

__all__ = [
    # Base
    "IncrementalIndicator",
    "CrossoverState",
    "WindowState",
    "RingBuffer",
    # Edge detectors
    "CrossAbove",
    "CrossBelow",
    # Window extremum
    "HighestHighValue",
    "LowestLowValue",
    # Regression
    "LinearRegressionPrediction",
    # Factory and utilities
    "create_incremental_indicator",
    "supports_incremental",
    "list_incremental_indicators",
    "indicator_class_for",
    "indicator_type_of",
    "INDICATOR_CLASSES",
    # Persistence
    "encode_state",
    "decode_state",
]
