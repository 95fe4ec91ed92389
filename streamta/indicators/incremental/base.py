"""
Base class and shared snapshot types for incremental indicators.

All incremental indicators inherit from IncrementalIndicator, which defines
the per-sample update interface: update(), reset(), period, value,
is_ready, plus state() snapshots and dict round-tripping for persistence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CrossoverState:
    """
    Snapshot of an edge detector.

    Slots that have not received a sample yet are NaN.
    """

    threshold: float
    previous: float
    current: float


@dataclass(frozen=True)
class WindowState:
    """
    Snapshot of a windowed indicator.

    Attributes:
        period: Declared window length.
        index: Slot the next sample will be written to.
        count: Number of samples held (saturates at period).
        window: Held samples, oldest first.
    """

    period: int
    index: int
    count: int
    window: tuple[float, ...]


class IncrementalIndicator(ABC):
    """Base class for incremental indicators."""

    @abstractmethod
    def update(self, sample: float) -> Any:
        """Consume one sample and return the updated output."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset state to initial."""
        ...

    @property
    @abstractmethod
    def period(self) -> int:
        """Number of samples needed for a fully primed output."""
        ...

    @property
    @abstractmethod
    def value(self) -> Any:
        """Most recent output."""
        ...

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True when warmup period complete."""
        ...

    @abstractmethod
    def state(self) -> Any:
        """Read-only snapshot of the internal state."""
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Plain-dict state, enough to rebuild an equivalent instance."""
        ...

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, Any]) -> IncrementalIndicator:
        """Rebuild an instance from to_dict() output."""
        ...
