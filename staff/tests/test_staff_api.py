from datetime import datetime, timezone as dt_timezone
from io import StringIO

from django.contrib.auth.models import User
from django.core.management import call_command
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from scheduling.models import Assignment, Event
from staff.models import StaffMember


class StaffMemberApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_create_and_list(self):
        resp = self.client.post(
            "/api/staff/members/",
            {"name": "Alice", "email": "alice@example.com", "designation": "Engineer"},
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["designation"], "Engineer")

        resp = self.client.get("/api/staff/members/")
        self.assertEqual([m["name"] for m in resp.json()], ["Alice"])

    def test_all_fields_required(self):
        for missing in ("name", "email", "designation"):
            payload = {"name": "Alice", "email": "alice@example.com", "designation": "Engineer"}
            payload[missing] = ""
            resp = self.client.post("/api/staff/members/", payload, format="json")
            self.assertEqual(resp.status_code, 400, missing)
            self.assertIn(missing, resp.json())

    def test_duplicate_email_rejected(self):
        StaffMember.objects.create(name="Alice", email="alice@example.com", designation="Engineer")
        resp = self.client.post(
            "/api/staff/members/",
            {"name": "Alice B", "email": "alice@example.com", "designation": "Engineer"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)

    def test_update(self):
        member = StaffMember.objects.create(name="Alice", email="alice@example.com", designation="Engineer")
        resp = self.client.patch(
            f"/api/staff/members/{member.id}/",
            {"designation": "Team Lead"},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        member.refresh_from_db()
        self.assertEqual(member.designation, "Team Lead")

    def test_delete_cascades_to_assignments(self):
        member = StaffMember.objects.create(name="Alice", email="alice@example.com", designation="Engineer")
        other = StaffMember.objects.create(name="Bob", email="bob@example.com", designation="Designer")
        event = Event.objects.create(
            title="Standup",
            start=datetime(2030, 1, 15, 9, tzinfo=dt_timezone.utc),
            end=datetime(2030, 1, 15, 10, tzinfo=dt_timezone.utc),
        )
        Assignment.objects.create(event=event, staff=member)
        Assignment.objects.create(event=event, staff=other)

        resp = self.client.delete(f"/api/staff/members/{member.id}/")
        self.assertEqual(resp.status_code, 204)
        self.assertFalse(StaffMember.objects.filter(pk=member.id).exists())
        self.assertEqual(list(event.assignments.values_list("staff_id", flat=True)), [other.id])
        self.assertTrue(Event.objects.filter(pk=event.id).exists())

    @override_settings(SCHEDULER={"STAFF_WRITE_REQUIRES_ADMIN": True})
    def test_writes_can_be_limited_to_admins(self):
        payload = {"name": "Alice", "email": "alice@example.com", "designation": "Engineer"}
        resp = self.client.post("/api/staff/members/", payload, format="json")
        self.assertIn(resp.status_code, (401, 403))

        admin = User.objects.create_user(username="admin", password="testpass123", is_staff=True)
        self.client.force_authenticate(user=admin)
        resp = self.client.post("/api/staff/members/", payload, format="json")
        self.assertEqual(resp.status_code, 201)

        self.client.force_authenticate(user=None)
        self.assertEqual(self.client.get("/api/staff/members/").status_code, 200)


class SeedStaffCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        out = StringIO()
        call_command("seed_staff", stdout=out)
        self.assertIn("Created=3", out.getvalue())

        StaffMember.objects.filter(email="bob@example.com").update(designation="Intern")
        out = StringIO()
        call_command("seed_staff", stdout=out)
        self.assertIn("Created=0, Updated=1", out.getvalue())
        self.assertEqual(StaffMember.objects.count(), 3)
