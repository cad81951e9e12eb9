"""
schedule_source.py
------------------
Data access for the availability engine.

A schedule source answers one question: "which staff members are on the
roster, and which event intervals does each of them have?" The engine only
sees (staff, ScheduleIndex) pairs, so it does not care whether they came
from the ORM or from a list built in a test.
"""

from typing import Iterable, Protocol

from django.db.models import Prefetch

from .intervals import Interval
from .schedule_index import ScheduleIndex


class ScheduleSource(Protocol):
    def roster(self, window: Interval | None = None) -> Iterable[tuple[object, ScheduleIndex]]:
        ...


class OrmScheduleSource:
    """
    Loads staff with their assigned events in two queries
    (staff + prefetched events).

    Args:
        staff_ids: limit the roster to these staff members (default: everyone).
        exclude_event_id: ignore this event, e.g. when re-checking an event
            that is being edited against the rest of the schedule.
    """

    def __init__(self, staff_ids=None, exclude_event_id=None):
        self.staff_ids = staff_ids
        self.exclude_event_id = exclude_event_id

    def _staff_queryset(self):
        from staff.models import StaffMember

        qs = StaffMember.objects.all().order_by("id")
        if self.staff_ids is not None:
            qs = qs.filter(id__in=list(self.staff_ids))
        return qs

    def _event_queryset(self, window):
        from ..models import Event

        qs = Event.objects.order_by("start", "id")
        if window is not None:
            # Narrow in SQL with the same half-open rule the index applies.
            qs = qs.filter(start__lt=window.end, end__gt=window.start)
        if self.exclude_event_id is not None:
            qs = qs.exclude(pk=self.exclude_event_id)
        return qs

    def roster(self, window=None):
        staff_qs = self._staff_queryset().prefetch_related(
            Prefetch("events", queryset=self._event_queryset(window), to_attr="scheduled_events")
        )
        for member in staff_qs:
            yield member, ScheduleIndex.from_events(member.scheduled_events)


class StaticScheduleSource:
    """
    In-memory source: a list of (staff, intervals) pairs.
    Handy for callers that already hold the data, and for tests.
    """

    def __init__(self, entries):
        self.entries = list(entries)

    def roster(self, window=None):
        for staff, intervals in self.entries:
            yield staff, ScheduleIndex(intervals)
