"""
streamta - Streaming Technical Analysis

Stateful technical indicators that consume one sample per call and update
their output without re-scanning history: threshold crossovers, rolling
highest/lowest value, and linear regression forecasting.
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    IndicatorError,
    InvalidParameterError,
    DataItemIncompleteError,
    DataItemInvalidError,
)
from .indicators import (
    IncrementalIndicator,
    CrossAbove,
    CrossBelow,
    HighestHighValue,
    LowestLowValue,
    LinearRegressionPrediction,
    IndicatorBank,
    create_incremental_indicator,
    encode_state,
    decode_state,
)

__all__ = [
    "__version__",
    # Errors
    "ErrorKind",
    "IndicatorError",
    "InvalidParameterError",
    "DataItemIncompleteError",
    "DataItemInvalidError",
    # Indicators
    "IncrementalIndicator",
    "CrossAbove",
    "CrossBelow",
    "HighestHighValue",
    "LowestLowValue",
    "LinearRegressionPrediction",
    "IndicatorBank",
    "create_incremental_indicator",
    "encode_state",
    "decode_state",
]
