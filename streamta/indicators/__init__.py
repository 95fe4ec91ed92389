"""
Indicator Module: streaming technical indicators.

Components:
- incremental: per-sample indicators (crossovers, window extremum,
  regression forecast), factory, and state persistence
- bank: IndicatorBank for driving several indicators from one stream

Usage:
    from streamta.indicators import create_incremental_indicator, IndicatorBank

    hhv = create_incremental_indicator("hhv", {"period": 20})
    hhv.update(101.5)

    bank = IndicatorBank([
        {"type": "llv", "key": "low_10", "params": {"period": 10}},
        {"type": "forecast", "key": "fc", "params": {"period": 14}},
    ])
    outputs = bank.update(101.5)
"""

from .incremental import (
    IncrementalIndicator,
    CrossoverState,
    WindowState,
    RingBuffer,
    CrossAbove,
    CrossBelow,
    HighestHighValue,
    LowestLowValue,
    LinearRegressionPrediction,
    create_incremental_indicator,
    supports_incremental,
    list_incremental_indicators,
    indicator_class_for,
    indicator_type_of,
    INDICATOR_CLASSES,
    encode_state,
    decode_state,
)

from .bank import IndicatorBank, load_indicator_specs


__all__ = [
    # Incremental
    "IncrementalIndicator",
    "CrossoverState",
    "WindowState",
    "RingBuffer",
    "CrossAbove",
    "CrossBelow",
    "HighestHighValue",
    "LowestLowValue",
    "LinearRegressionPrediction",
    "create_incremental_indicator",
    "supports_incremental",
    "list_incremental_indicators",
    "indicator_class_for",
    "indicator_type_of",
    "INDICATOR_CLASSES",
    "encode_state",
    "decode_state",
    # Bank
    "IndicatorBank",
    "load_indicator_specs",
]
