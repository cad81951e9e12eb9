# scheduling/signals.py
#
# Purpose:
# - Audit trail of assignment changes in the application log.
#   * post_save on Assignment (created only): staff member assigned
#   * post_delete on Assignment: staff member unassigned, whether directly,
#     by an event edit, or by a cascade from Event/StaffMember deletion
#
import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Assignment

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Assignment)
def log_assignment_created(sender, instance: Assignment, created: bool, **kwargs):
    if created:
        logger.debug("Assignment saved: staff #%s on event #%s", instance.staff_id, instance.event_id)


@receiver(post_delete, sender=Assignment)
def log_assignment_deleted(sender, instance: Assignment, **kwargs):
    logger.debug("Assignment removed: staff #%s from event #%s", instance.staff_id, instance.event_id)
