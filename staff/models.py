# staff/models.py
from django.db import models


class StaffMember(models.Model):
    """
    A person who can be assigned to events.

    - email is unique so admins can tell people apart.
    - designation is a free-text role label ("Engineer", "Team Lead", ...).
    - Deleting a member removes their event assignments as well
      (scheduling.Assignment points here with on_delete=CASCADE).
    """
    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    designation = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name
