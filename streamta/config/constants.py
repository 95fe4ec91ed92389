"""
Centralized constants for streamta.

Indicator defaults mirror the values each indicator uses when constructed
without arguments.
"""

# ==================== Indicator Defaults ====================

DEFAULT_THRESHOLD = 0.0
DEFAULT_EXTREMUM_PERIOD = 7
DEFAULT_FORECAST_PERIOD = 9

# Edge detectors always compare exactly two samples
CROSSOVER_PERIOD = 2


# ==================== Serialization ====================

# Bump when the encoded state layout changes incompatibly
STATE_FORMAT_VERSION = 1
STATE_ENCODING = "utf-8"
