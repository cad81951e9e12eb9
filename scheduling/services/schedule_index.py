"""
schedule_index.py
-----------------
Per-staff projection of assigned events into intervals.

- Built fresh for every query and never mutated afterwards.
- overlapping() keeps double bookings as-is; merging them is the
  availability engine's job, deciding whether they are allowed is the
  event manager's.
"""

import logging

from .intervals import Interval

logger = logging.getLogger(__name__)


class ScheduleIndex:
    def __init__(self, intervals=()):
        self._intervals = tuple(intervals)

    @classmethod
    def from_events(cls, events) -> "ScheduleIndex":
        """
        Build an index from event-like objects exposing start/end.
        Rows whose start is after their end can never overlap anything
        and would skew next-available times, so they are skipped.
        """
        intervals = []
        for event in events:
            if event.start > event.end:
                logger.warning(
                    "Skipping malformed event #%s: start %s is after end %s",
                    getattr(event, "pk", None), event.start, event.end,
                )
                continue
            intervals.append(Interval(event.start, event.end))
        return cls(intervals)

    def __iter__(self):
        return iter(self._intervals)

    def overlapping(self, window: Interval) -> list[Interval]:
        """Intervals overlapping 'window', ascending by start (stable)."""
        hits = [iv for iv in self._intervals if iv.overlaps(window)]
        return sorted(hits, key=lambda iv: iv.start)
