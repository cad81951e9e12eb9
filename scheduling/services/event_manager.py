"""
event_manager.py
----------------
Coordinates event writes: create, edit, delete, complete, and the
assignment of staff members to events.

Rules:
- When SCHEDULER["REJECT_CONFLICTS"] is on, an assigned staff member must
  not already have an overlapping event; ScheduleConflict lists who clashes.
- Replacing the assignment list on edit keeps rows for staff that stay
  assigned and removes the rest.
- Completion is one-way: completed_at is set once and never cleared.
"""

import logging

from django.db import transaction
from django.utils import timezone

from ..conf import scheduler_setting
from ..models import Assignment, Event
from .availability_engine import AvailabilityEngine
from .schedule_source import OrmScheduleSource

logger = logging.getLogger(__name__)


class ScheduleConflict(ValueError):
    """Assigned staff already have an overlapping event."""

    def __init__(self, conflicts):
        self.conflicts = list(conflicts)
        names = ", ".join(c.name for c in self.conflicts)
        super().__init__(f"Unavailable: {names}")


class EventManager:
    def __init__(self, reject_conflicts=None):
        self._reject_conflicts = reject_conflicts
        self.availability = AvailabilityEngine()

    @property
    def reject_conflicts(self) -> bool:
        if self._reject_conflicts is None:
            return bool(scheduler_setting("REJECT_CONFLICTS"))
        return self._reject_conflicts

    def find_conflicts(self, staff_ids, start, end, exclude_event_id=None):
        """
        Staff (as StaffAvailability rows) among 'staff_ids' who are busy in
        [start, end), ignoring 'exclude_event_id'.
        """
        staff_ids = list(staff_ids or [])
        if not staff_ids or start >= end:
            return []
        source = OrmScheduleSource(staff_ids=staff_ids, exclude_event_id=exclude_event_id)
        rows = self.availability.evaluate(start, end, source)
        return [row for row in rows if row.is_busy]

    def _check_conflicts(self, staff_ids, start, end, exclude_event_id=None):
        if not self.reject_conflicts:
            return
        conflicts = self.find_conflicts(staff_ids, start, end, exclude_event_id)
        if conflicts:
            logger.info(
                "Rejected schedule for %s-%s: staff %s already booked",
                start, end, [c.id for c in conflicts],
            )
            raise ScheduleConflict(conflicts)

    @transaction.atomic
    def create_event(self, title, start, end, description="", event_type=Event.TYPE_REGULAR, staff=()):
        """
        Create an event and its assignments.

        Args:
            staff: iterable of StaffMember instances to assign.

        Raises:
            ScheduleConflict: if an assigned staff member is already booked.
        """
        staff = list(staff)
        self._check_conflicts([s.id for s in staff], start, end)

        event = Event.objects.create(
            title=title,
            description=description,
            start=start,
            end=end,
            event_type=event_type,
        )
        for member in staff:
            Assignment.objects.create(event=event, staff=member)
        logger.info("Created event #%s (%s) with %d staff", event.id, event.title, len(staff))
        return event

    @transaction.atomic
    def update_event(self, event, staff=None, **changes):
        """
        Apply field changes and, when 'staff' is given, replace the
        assignment list with exactly those members.
        """
        for name, value in changes.items():
            setattr(event, name, value)

        if staff is None:
            staff_ids = list(event.assignments.values_list("staff_id", flat=True))
        else:
            staff_ids = [s.id for s in staff]
        self._check_conflicts(staff_ids, event.start, event.end, exclude_event_id=event.id)

        event.save()

        if staff is not None:
            removed, _ = event.assignments.exclude(staff_id__in=staff_ids).delete()
            existing = set(event.assignments.values_list("staff_id", flat=True))
            for member in staff:
                if member.id not in existing:
                    Assignment.objects.create(event=event, staff=member)
            logger.info(
                "Replaced assignments on event #%s: %d removed, now %s",
                event.id, removed, sorted(staff_ids),
            )
        return event

    @transaction.atomic
    def delete_event(self, event) -> None:
        event_id = event.id
        # Assignments go first so none can outlive the event.
        event.assignments.all().delete()
        event.delete()
        logger.info("Deleted event #%s", event_id)

    @transaction.atomic
    def assign(self, event, staff):
        """
        Assign one staff member to an existing event.

        Raises:
            ValueError: if the member is already assigned.
            ScheduleConflict: if the member is booked elsewhere at that time.
        """
        if event.assignments.filter(staff=staff).exists():
            raise ValueError(f"{staff.name} is already assigned to this event.")
        self._check_conflicts([staff.id], event.start, event.end, exclude_event_id=event.id)
        assignment = Assignment.objects.create(event=event, staff=staff)
        logger.info("Assigned staff #%s to event #%s", staff.id, event.id)
        return assignment

    @transaction.atomic
    def unassign(self, event, staff_id) -> int:
        deleted, _ = event.assignments.filter(staff_id=staff_id).delete()
        logger.info("Unassigned staff #%s from event #%s (%d row(s))", staff_id, event.id, deleted)
        return deleted

    @transaction.atomic
    def complete_event(self, event, now=None):
        """Pin the event to "completed". Calling it again changes nothing."""
        if event.completed_at is not None:
            return event
        event.completed_at = now or timezone.now()
        event.save(update_fields=["completed_at", "updated_at"])
        logger.info("Event #%s marked completed", event.id)
        return event
