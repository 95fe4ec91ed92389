"""
Edge detectors: threshold crossings over a two-sample window.

Includes CrossAbove and CrossBelow (TradingView-aligned semantics):
- cross_above: prev <= threshold AND curr > threshold
- cross_below: prev >= threshold AND curr < threshold

Equality at the boundary counts as "not yet crossed" in both directions,
so a sample sitting exactly on the threshold only fires once the next
sample strictly crosses it.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ...config.constants import CROSSOVER_PERIOD, DEFAULT_THRESHOLD
from ...errors import InvalidParameterError
from .base import CrossoverState, IncrementalIndicator

logger = logging.getLogger(__name__)


@dataclass
class _ThresholdCross(IncrementalIndicator):
    """Shared two-sample window handling for the crossover detectors."""

    threshold: float = DEFAULT_THRESHOLD
    _window: deque = field(
        default_factory=lambda: deque(maxlen=CROSSOVER_PERIOD), init=False, repr=False
    )
    _signal: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            self.threshold = float(self.threshold)
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(
                f"{type(self).__name__} 'threshold' must be a real number, got {self.threshold!r}\n"
                f"\n"
                f"Fix: {type(self).__name__}(threshold=10.0)"
            ) from e

    @abstractmethod
    def _crossed(self, prev: float, curr: float) -> bool:
        ...

    def update(self, sample: float) -> bool:
        """Push a sample and report whether this step crossed the threshold."""
        # maxlen evicts the oldest sample
        self._window.append(sample)
        self._signal = self._evaluate()
        return self._signal

    def _evaluate(self) -> bool:
        if len(self._window) < CROSSOVER_PERIOD:
            return False
        prev, curr = self._window
        return bool(self._crossed(prev, curr))

    def reset(self) -> None:
        self._window.clear()
        self._signal = False

    @property
    def period(self) -> int:
        return CROSSOVER_PERIOD

    @property
    def value(self) -> bool:
        return self._signal

    @property
    def is_ready(self) -> bool:
        return len(self._window) == CROSSOVER_PERIOD

    def state(self) -> CrossoverState:
        padded = [np.nan] * (CROSSOVER_PERIOD - len(self._window)) + list(self._window)
        return CrossoverState(
            threshold=self.threshold,
            previous=float(padded[0]),
            current=float(padded[1]),
        )

    @classmethod
    def from_state(cls, threshold: float, samples: Iterable[float]) -> _ThresholdCross:
        """
        Rebuild a detector from a persisted threshold and sample history.

        Histories longer than two samples are truncated to the newest two.
        """
        instance = cls(threshold=threshold)
        history = [float(s) for s in samples]
        if len(history) > CROSSOVER_PERIOD:
            logger.debug(
                "%s: truncating persisted history from %d to %d samples",
                cls.__name__, len(history), CROSSOVER_PERIOD,
            )
        instance._window.extend(history[-CROSSOVER_PERIOD:])
        instance._signal = instance._evaluate()
        return instance

    def to_dict(self) -> dict[str, Any]:
        return {"threshold": self.threshold, "window": [float(v) for v in self._window]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> _ThresholdCross:
        return cls.from_state(data["threshold"], data["window"])


@dataclass
class CrossAbove(_ThresholdCross):
    """
    Cross Above with O(1) updates.

    Formula:
        cross_above[t] = (p[t-1] <= threshold) and (p[t] > threshold)

    Returns False until two samples have been seen.

    Example:
        >>> cross = CrossAbove(threshold=10.0)
        >>> [cross.update(x) for x in (9.0, 11.0, 12.0, 9.0, 11.0)]
        [False, True, False, False, True]
    """

    def _crossed(self, prev: float, curr: float) -> bool:
        return prev <= self.threshold and curr > self.threshold


@dataclass
class CrossBelow(_ThresholdCross):
    """
    Cross Below with O(1) updates.

    Formula:
        cross_below[t] = (p[t-1] >= threshold) and (p[t] < threshold)

    Example:
        >>> cross = CrossBelow(threshold=10.0)
        >>> [cross.update(x) for x in (11.0, 9.0, 8.0, 11.0, 9.0)]
        [False, True, False, False, True]
    """

    def _crossed(self, prev: float, curr: float) -> bool:
        return prev >= self.threshold and curr < self.threshold
