"""
Window extremum indicators over a fixed-capacity ring buffer.

Includes HighestHighValue (HHV) and LowestLowValue (LLV) -- the max/min of
the last min(period, samples seen) observations.

Technique:
    - RingBuffer of exactly `period` slots seeded with -inf (HHV) / +inf (LLV)
    - Each update writes at the cursor, then folds over the filled prefix
    - The fold uses numpy fmax/fmin: a NaN operand is skipped in favour of
      the other one, so a NaN sample never poisons the window and an
      all-NaN window reports the sentinel

Cost is O(period) per update with no allocation after construction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar

import numpy as np

from ...config.constants import DEFAULT_EXTREMUM_PERIOD
from ...errors import validate_period
from .base import IncrementalIndicator, WindowState
from .primitives import RingBuffer

logger = logging.getLogger(__name__)


@dataclass
class _WindowExtremum(IncrementalIndicator):
    """Shared ring buffer and fold handling for HHV/LLV."""

    _SENTINEL: ClassVar[float]
    _FOLD: ClassVar[np.ufunc]

    period: int = DEFAULT_EXTREMUM_PERIOD
    _ring: RingBuffer = field(init=False, repr=False)
    _value: float = field(default=np.nan, init=False, repr=False)

    def __post_init__(self) -> None:
        self.period = validate_period(self.period, type(self).__name__)
        self._ring = RingBuffer(self.period, fill=self._SENTINEL)

    def update(self, sample: float) -> float:
        """Push a sample and return the extremum of the filled window."""
        self._ring.push(sample)
        self._value = self._fold()
        return self._value

    def _fold(self) -> float:
        return float(self._FOLD.reduce(self._ring.filled(), initial=self._SENTINEL))

    def reset(self) -> None:
        self._ring.clear()
        self._value = np.nan

    @property
    def value(self) -> float:
        return self._value

    @property
    def is_ready(self) -> bool:
        return self._ring.is_full()

    def state(self) -> WindowState:
        return WindowState(
            period=self.period,
            index=self._ring.head,
            count=len(self._ring),
            window=tuple(float(v) for v in self._ring.to_array()),
        )

    @classmethod
    def from_state(cls, period: int, samples: Iterable[float]) -> _WindowExtremum:
        """
        Rebuild a tracker from persisted samples (oldest first).

        Histories longer than `period` keep only the newest `period` samples.
        """
        instance = cls(period=period)
        history = [float(s) for s in samples]
        if len(history) > instance.period:
            logger.debug(
                "%s: truncating persisted history from %d to %d samples",
                cls.__name__, len(history), instance.period,
            )
            history = history[-instance.period:]
        for sample in history:
            instance._ring.push(sample)
        if history:
            instance._value = instance._fold()
        return instance

    def to_dict(self) -> dict[str, Any]:
        # Physical slots, not chronological order: fmax/fmin return the
        # first operand on ties (e.g. 0.0 vs -0.0), so slot order matters
        return {
            "period": self.period,
            "index": self._ring.head,
            "count": len(self._ring),
            "buffer": self._ring._buffer.tolist(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> _WindowExtremum:
        """
        Rebuild from to_dict() output, restoring the exact ring layout.

        A dict carrying only a chronological ``window`` (no ``buffer``) is
        accepted and goes through from_state().
        """
        if "buffer" not in data:
            return cls.from_state(data["period"], data["window"])

        instance = cls(period=data["period"])
        instance._ring.restore(data["buffer"], data["index"], data["count"])
        if len(instance._ring):
            instance._value = instance._fold()
        return instance


@dataclass
class HighestHighValue(_WindowExtremum):
    """
    Highest High Value (HHV) over the last `period` samples.

    During warmup the maximum is taken over the samples seen so far.

    Example:
        >>> hhv = HighestHighValue(period=3)
        >>> [hhv.update(x) for x in (10.0, 12.0, 8.0, 13.0)]
        [10.0, 12.0, 12.0, 13.0]
    """

    _SENTINEL: ClassVar[float] = -np.inf
    _FOLD: ClassVar[np.ufunc] = np.fmax


@dataclass
class LowestLowValue(_WindowExtremum):
    """
    Lowest Low Value (LLV) over the last `period` samples.

    Example:
        >>> llv = LowestLowValue(period=3)
        >>> [llv.update(x) for x in (10.0, 8.0, 12.0, 7.0)]
        [10.0, 8.0, 8.0, 7.0]
    """

    _SENTINEL: ClassVar[float] = np.inf
    _FOLD: ClassVar[np.ufunc] = np.fmin
