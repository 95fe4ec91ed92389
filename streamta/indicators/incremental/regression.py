"""
Linear regression forecast (FORECAST) with precomputed regressor moments.

Fits y = slope * x + intercept over the held window, with x = 1..n, and
extrapolates one step past the window: slope * (n + 1) + intercept.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ...config.constants import DEFAULT_FORECAST_PERIOD
from ...errors import validate_period
from .base import IncrementalIndicator, WindowState

logger = logging.getLogger(__name__)


@dataclass
class LinearRegressionPrediction(IncrementalIndicator):
    """
    One-step-ahead linear regression forecast.

    Formula:
        x = [1, 2, ..., period],  mean_x = (period + 1) / 2   (fixed)
        n = samples held (1..period)
        cov_xy = sum((x[i] - mean_x) * (y[i] - mean_y)) for i < n
        var_x  = sum((x[i] - mean_x) ** 2)              for i < n
        slope = cov_xy / var_x   (0 when var_x == 0)
        intercept = mean_y - slope * mean_x
        forecast = slope * (n + 1) + intercept

    Warmup policy: before the window fills, n is the number of samples
    held, not `period`, and mean_x stays the full-period mean. The
    extrapolation target therefore moves with n; outputs during warmup are
    deterministic but not those of a shorter-period regression.

    Precomputed at construction (never recomputed from the window):
        - x offsets (x[i] - mean_x)
        - prefix sums of the squared offsets, so var_x is a lookup

    Example:
        >>> lrp = LinearRegressionPrediction(period=3)
        >>> [lrp.update(x) for x in (1.0, 2.0, 3.0, 4.0, 5.0)]
        [1.0, 2.0, 4.0, 5.0, 6.0]
    """

    period: int = DEFAULT_FORECAST_PERIOD
    _window: deque = field(init=False, repr=False)
    _x: tuple[float, ...] = field(init=False, repr=False)
    _mean_x: float = field(init=False, repr=False)
    _dx: tuple[float, ...] = field(init=False, repr=False)
    _var_x: tuple[float, ...] = field(init=False, repr=False)
    _value: float = field(default=np.nan, init=False, repr=False)

    def __post_init__(self) -> None:
        self.period = validate_period(self.period, type(self).__name__)
        self._window = deque(maxlen=self.period)
        self._x = tuple(float(i) for i in range(1, self.period + 1))
        self._mean_x = (self.period + 1.0) / 2.0
        self._dx = tuple(xi - self._mean_x for xi in self._x)

        # var_x for a window holding n samples is _var_x[n - 1]
        prefix = []
        running = 0.0
        for dx in self._dx:
            running += dx * dx
            prefix.append(running)
        self._var_x = tuple(prefix)

    def update(self, sample: float) -> float:
        """Push a sample (evicting the oldest once full) and forecast."""
        self._window.append(sample)
        self._value = self._forecast()
        return self._value

    def _forecast(self) -> float:
        n = len(self._window)

        mean_y = 0.0
        for y in self._window:
            mean_y += y
        mean_y /= n

        cov_xy = 0.0
        for dx, y in zip(self._dx, self._window):
            cov_xy += dx * (y - mean_y)

        var_x = self._var_x[n - 1]
        slope = cov_xy / var_x if var_x != 0.0 else 0.0
        intercept = mean_y - slope * self._mean_x
        return float(slope * (n + 1.0) + intercept)

    def reset(self) -> None:
        # Regressor moments depend only on period and are kept
        self._window.clear()
        self._value = np.nan

    @property
    def mean_x(self) -> float:
        return self._mean_x

    @property
    def x(self) -> tuple[float, ...]:
        return self._x

    @property
    def value(self) -> float:
        return self._value

    @property
    def is_ready(self) -> bool:
        return len(self._window) >= self.period

    def state(self) -> WindowState:
        count = len(self._window)
        return WindowState(
            period=self.period,
            index=count % self.period,
            count=count,
            window=tuple(float(v) for v in self._window),
        )

    @classmethod
    def from_state(cls, period: int, samples: Iterable[float]) -> LinearRegressionPrediction:
        """
        Rebuild a forecaster from persisted samples (oldest first).

        Histories longer than `period` keep only the newest `period` samples.
        """
        instance = cls(period=period)
        history = [float(s) for s in samples]
        if len(history) > instance.period:
            logger.debug(
                "%s: truncating persisted history from %d to %d samples",
                cls.__name__, len(history), instance.period,
            )
        instance._window.extend(history[-instance.period:])
        if instance._window:
            instance._value = instance._forecast()
        return instance

    def to_dict(self) -> dict[str, Any]:
        return {"period": self.period, "window": [float(v) for v in self._window]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LinearRegressionPrediction:
        return cls.from_state(data["period"], data["window"])
