"""
availability_engine.py
----------------------
Computes, for every staff member on a roster, whether they are busy during a
requested window, when they are next available, and which parts of the
window are still free.

Per staff member:
1) busy           = schedule index entries overlapping the window (sorted)
2) is_busy        = bool(busy)
3) next_available = window.start when free, otherwise the LATEST end among
                    the busy intervals (a later-ending overlap pushes it out)
4) free_slots     = gaps in the window not covered by any busy interval

The engine is pure: it never queries the database itself. Staff and their
intervals come from a ScheduleSource (see schedule_source.py), so the same
code runs against the ORM in the API and against plain lists in tests.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .intervals import Interval
from .schedule_index import ScheduleIndex


@dataclass(frozen=True)
class StaffAvailability:
    id: int
    name: str
    is_busy: bool
    next_available: datetime
    free_slots: tuple = ()
    busy: tuple = field(default=(), repr=False)


class AvailabilityEngine:
    def __init__(self, source=None):
        self.source = source

    @staticmethod
    def next_available(busy: list[Interval], window: Interval) -> datetime:
        if not busy:
            return window.start
        return max(iv.end for iv in busy)

    @staticmethod
    def free_slots(busy: list[Interval], window: Interval) -> list[Interval]:
        """
        Walk the busy intervals (ascending by start) with a cursor that only
        moves forward, emitting the gaps between them. Touching or nested
        busy intervals collapse into one consumed region.
        """
        slots = []
        cursor = window.start
        for iv in busy:
            if iv.start > cursor:
                slots.append(Interval(cursor, iv.start))
            cursor = max(cursor, iv.end)
        if cursor < window.end:
            slots.append(Interval(cursor, window.end))
        return slots

    def availability_for(self, staff, index: ScheduleIndex, window: Interval) -> StaffAvailability:
        busy = index.overlapping(window)
        return StaffAvailability(
            id=staff.id,
            name=staff.name,
            is_busy=bool(busy),
            next_available=self.next_available(busy, window),
            free_slots=tuple(self.free_slots(busy, window)),
            busy=tuple(busy),
        )

    def evaluate(self, start: datetime, end: datetime, source=None) -> list[StaffAvailability]:
        """
        Availability of every staff member the source returns, in source order.

        Raises:
            InvalidWindow: if start >= end.
        """
        window = Interval.window(start, end)
        source = source or self.source
        if source is None:
            raise ValueError("AvailabilityEngine needs a schedule source.")
        return [
            self.availability_for(staff, index, window)
            for staff, index in source.roster(window)
        ]
