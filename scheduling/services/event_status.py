"""
event_status.py
---------------
Event status as a tagged variant:

- Derived:            computed from "now" against [start, end) on every read
                        now <  start        -> "upcoming"
                        start <= now < end  -> "ongoing"
                        now >= end          -> "completed"
- ManuallyCompleted:  a user marked the event done; always "completed",
                      never re-derived (the transition is one-way).

Handlers ask the variant to resolve itself instead of comparing status
strings.
"""

from dataclasses import dataclass
from datetime import datetime

UPCOMING = "upcoming"
ONGOING = "ongoing"
COMPLETED = "completed"


@dataclass(frozen=True)
class Derived:
    def resolve(self, start: datetime, end: datetime, now: datetime) -> str:
        if now < start:
            return UPCOMING
        if now < end:
            return ONGOING
        return COMPLETED


@dataclass(frozen=True)
class ManuallyCompleted:
    completed_at: datetime

    def resolve(self, start: datetime, end: datetime, now: datetime) -> str:
        return COMPLETED


EventStatus = Derived | ManuallyCompleted


def status_of(event) -> EventStatus:
    if event.completed_at is not None:
        return ManuallyCompleted(event.completed_at)
    return Derived()
