"""
intervals.py
------------
Half-open time ranges [start, end) and the overlap rule shared by the
availability engine, conflict checks and event filters.

Overlap rule:
    A overlaps B  <=>  A.start < B.end and B.start < A.end

An event that ends exactly when another starts does NOT overlap it, and a
zero-length range never overlaps anything (itself included).
"""

from dataclasses import dataclass
from datetime import datetime


class InvalidWindow(ValueError):
    """Raised when a requested window does not satisfy start < end."""


@dataclass(frozen=True)
class Interval:
    """
    Immutable [start, end) range of comparable instants.

    Invariant: start <= end. Timezone handling is the caller's job; the
    comparisons here work on whatever instants they are given.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Interval start {self.start} is after end {self.end}")

    @classmethod
    def window(cls, start: datetime, end: datetime) -> "Interval":
        """Build a query window, rejecting empty or inverted ranges."""
        if start >= end:
            raise InvalidWindow(f"Window start {start} must be before end {end}.")
        return cls(start, end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: "Interval") -> bool:
        if self.is_empty or other.is_empty:
            return False
        return self.start < other.end and other.start < self.end

    def clip(self, window: "Interval") -> "Interval | None":
        """Return the part of this interval inside 'window', or None."""
        if not self.overlaps(window):
            return None
        return Interval(max(self.start, window.start), min(self.end, window.end))
