"""
Fixed-capacity storage primitives for incremental indicators.

Provides:
- RingBuffer: Fixed-size circular buffer seeded with a sentinel value

Performance Contract:
- RingBuffer.push(): O(1), no allocation
- RingBuffer.filled(): O(1), returns a view
- RingBuffer.clear(): O(size), no allocation
- RingBuffer.restore(): O(size), no allocation
"""

from __future__ import annotations

from numbers import Integral

import numpy as np


class RingBuffer:
    """
    Fixed-size circular buffer with a write cursor and a saturating fill
    counter.

    Storage is allocated once. Slots that have never been written hold the
    sentinel ``fill`` value. Because writes start at slot 0 and the counter
    saturates at ``size``, the first ``count`` physical slots are always
    exactly the slots holding real data, so ``filled()`` never exposes the
    sentinel.

    Example:
        >>> buf = RingBuffer(size=3, fill=-np.inf)
        >>> buf.push(1.0)
        >>> buf.push(2.0)
        >>> buf.filled()
        array([1., 2.])
        >>> buf.push(3.0)
        >>> buf.push(4.0)  # overwrites 1.0
        >>> buf.to_array()  # oldest first
        array([2., 3., 4.])

    Attributes:
        size: Maximum number of elements the buffer can hold.
        fill: Sentinel stored in unwritten slots.
    """

    __slots__ = ("size", "fill", "_buffer", "_head", "_count")

    def __init__(self, size: int, fill: float = np.nan) -> None:
        """
        Initialize ring buffer with fixed size.

        Args:
            size: Maximum number of elements (must be >= 1).
            fill: Sentinel for unwritten slots.

        Raises:
            ValueError: If size < 1.
        """
        if size < 1:
            raise ValueError(
                f"size must be >= 1, got {size}\n"
                f"\n"
                f"Fix: RingBuffer(size=5)"
            )
        self.size = size
        self.fill = fill
        self._buffer = np.full(size, fill, dtype=np.float64)
        self._head = 0  # Next write position
        self._count = 0  # Number of elements stored

    def push(self, value: float) -> None:
        """Add a value to the buffer, overwriting oldest if full."""
        self._buffer[self._head] = value
        self._head = self._head + 1 if self._head + 1 < self.size else 0
        if self._count < self.size:
            self._count += 1

    def filled(self) -> np.ndarray:
        """
        View of the physical slots holding real data.

        Order is physical, not chronological; use to_array() when order
        matters.
        """
        return self._buffer[:self._count]

    @property
    def head(self) -> int:
        """Slot the next push writes to."""
        return self._head

    def is_full(self) -> bool:
        """True if buffer contains exactly 'size' elements."""
        return self._count == self.size

    def __len__(self) -> int:
        """Return the number of elements currently in the buffer."""
        return self._count

    def clear(self) -> None:
        """Restore every slot to the sentinel and rewind the cursor."""
        self._buffer.fill(self.fill)
        self._head = 0
        self._count = 0

    def restore(self, slots, head: int, count: int) -> None:
        """
        Overwrite storage with a saved physical layout.

        Args:
            slots: Raw slot contents (sentinels included), length == size.
            head: Saved write cursor.
            count: Saved fill counter.

        Raises:
            ValueError: If the layout is inconsistent with this buffer.
        """
        values = np.asarray(slots, dtype=np.float64)
        if values.shape != (self.size,):
            raise ValueError(f"expected {self.size} slots, got shape {values.shape}")
        for name, n in (("head", head), ("count", count)):
            if isinstance(n, bool) or not isinstance(n, Integral):
                raise ValueError(f"'{name}' must be an integer, got {n!r}")
        if not 0 <= count <= self.size:
            raise ValueError(f"'count' must be in [0, {self.size}], got {count}")
        # Before the first wrap the cursor always equals the fill counter
        if count < self.size and head != count:
            raise ValueError(f"'head' must equal count ({count}) before the buffer fills, got {head}")
        if not 0 <= head < self.size:
            raise ValueError(f"'head' must be in [0, {self.size}), got {head}")
        self._buffer[:] = values
        self._head = int(head)
        self._count = int(count)

    def to_array(self) -> np.ndarray:
        """
        Return a copy of the buffer contents in logical order.

        Returns:
            numpy array with oldest element first, newest last.
            Length equals current count (not size).
        """
        if self._count < self.size:
            return self._buffer[:self._count].copy()
        return np.concatenate((self._buffer[self._head:], self._buffer[:self._head]))
