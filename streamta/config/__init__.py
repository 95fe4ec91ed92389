"""
Configuration management.
"""

from .config import (
    StreamTAConfig,
    LogConfig,
    get_config,
)

from .constants import (
    DEFAULT_THRESHOLD,
    DEFAULT_EXTREMUM_PERIOD,
    DEFAULT_FORECAST_PERIOD,
    CROSSOVER_PERIOD,
    STATE_FORMAT_VERSION,
    STATE_ENCODING,
)

__all__ = [
    # Config classes
    "StreamTAConfig",
    "LogConfig",
    "get_config",
    # Constants
    "DEFAULT_THRESHOLD",
    "DEFAULT_EXTREMUM_PERIOD",
    "DEFAULT_FORECAST_PERIOD",
    "CROSSOVER_PERIOD",
    "STATE_FORMAT_VERSION",
    "STATE_ENCODING",
]
