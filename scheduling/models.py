# scheduling/models.py
#
# Purpose:
# - Events (meetings and holidays) and the staff assigned to them.
#
# Design highlights:
# - Event:
#   • start/end are stored in UTC (USE_TZ=True) and read as [start, end)
#   • event_type is lowercase "regular" or "holiday"
#   • completed_at pins the status to "completed" once a user marks the event
#     done. It is never cleared, so a manual completion is sticky.
#   • status (upcoming/ongoing/completed) is not stored; see
#     scheduling/services/event_status.py.
# - Assignment:
#   • join row between Event and staff.StaffMember
#   • one row per (event, staff) pair, enforced by a UniqueConstraint
#   • cascades from both sides, so assignments never outlive either parent
#
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from .services.event_status import status_of


# -------------------------
# Event (meeting / holiday)
# -------------------------
class Event(models.Model):
    TYPE_REGULAR = "regular"
    TYPE_HOLIDAY = "holiday"
    TYPE_CHOICES = [
        (TYPE_REGULAR, "Regular"),
        (TYPE_HOLIDAY, "Holiday"),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    start = models.DateTimeField()
    end = models.DateTimeField()
    event_type = models.CharField(
        max_length=10,
        choices=TYPE_CHOICES,
        default=TYPE_REGULAR,
    )
    completed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the event was manually marked completed (if applicable).",
    )
    staff = models.ManyToManyField(
        "staff.StaffMember",
        through="Assignment",
        related_name="events",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start", "id"]

    def __str__(self):
        return f"{self.title} ({self.start} - {self.end})"

    def clean(self):
        super().clean()
        if self.start and self.end and self.end <= self.start:
            raise ValidationError({"end": "End time must be after start time."})

    def status_at(self, now=None) -> str:
        return status_of(self).resolve(self.start, self.end, now or timezone.now())

    @property
    def status(self) -> str:
        return self.status_at()


# -------------------------
# Staff <-> Event join row
# -------------------------
class Assignment(models.Model):
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="assignments")
    staff = models.ForeignKey(
        "staff.StaffMember",
        on_delete=models.CASCADE,
        related_name="assignments",
    )
    assigned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["event_id", "staff_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "staff"],
                name="uniq_assignment_event_staff",
            ),
        ]

    def __str__(self):
        return f"{self.staff} → {self.event.title}"
