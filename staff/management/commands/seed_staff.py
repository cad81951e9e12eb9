"""
seed_staff.py
-------------
Seeds (creates or updates) a starter roster of staff members. You can run
this any time; it will upsert by unique email.

Usage:
    python manage.py seed_staff
"""

from django.core.management.base import BaseCommand
from staff.models import StaffMember


ROSTER = [
    {"name": "Alice", "email": "alice@example.com", "designation": "Engineer"},
    {"name": "Bob", "email": "bob@example.com", "designation": "Designer"},
    {"name": "Charlie", "email": "charlie@example.com", "designation": "Project Manager"},
]


class Command(BaseCommand):
    help = "Seed or update the starter staff roster."

    def handle(self, *args, **options):
        created = 0
        updated = 0

        for item in ROSTER:
            member, is_created = StaffMember.objects.get_or_create(
                email=item["email"],
                defaults={"name": item["name"], "designation": item["designation"]},
            )
            if is_created:
                created += 1
                continue

            changed = False
            if member.name != item["name"]:
                member.name = item["name"]
                changed = True
            if member.designation != item["designation"]:
                member.designation = item["designation"]
                changed = True
            if changed:
                member.save()
                updated += 1

        self.stdout.write(self.style.SUCCESS(f"Seed complete. Created={created}, Updated={updated}"))
