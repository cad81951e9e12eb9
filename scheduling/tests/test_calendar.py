from datetime import datetime, timezone as dt_timezone
from unittest.mock import patch

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from scheduling.models import Assignment, Event
from staff.models import StaffMember


@override_settings(SCHEDULER={"DISPLAY_TIME_ZONE": "Australia/Brisbane"})
class CalendarFeedTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        alice = StaffMember.objects.create(name="Alice", email="alice@example.com", designation="Engineer")
        # 2030-03-31 20:00 UTC is 2030-04-01 06:00 in Brisbane (UTC+10, no DST).
        self.early = Event.objects.create(
            title="Early start",
            start=datetime(2030, 3, 31, 20, 0, tzinfo=dt_timezone.utc),
            end=datetime(2030, 3, 31, 21, 0, tzinfo=dt_timezone.utc),
        )
        Assignment.objects.create(event=self.early, staff=alice)
        Event.objects.create(
            title="Public holiday",
            event_type="holiday",
            start=datetime(2030, 4, 24, 14, 0, tzinfo=dt_timezone.utc),
            end=datetime(2030, 4, 25, 14, 0, tzinfo=dt_timezone.utc),
        )

    def test_month_grid_groups_by_local_day(self):
        resp = self.client.get("/api/calendar/", {"year": 2030, "month": 4})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()

        self.assertEqual(data["month_name"], "April")
        self.assertEqual(data["time_zone"], "Australia/Brisbane")
        # April 2030 starts on a Monday: no leading blanks.
        self.assertFalse(data["cells"][0]["blank"])

        days = {c["day"]: c["events"] for c in data["cells"] if not c["blank"]}
        self.assertEqual(len(days), 30)
        self.assertEqual([e["title"] for e in days[1]], ["Early start"])
        self.assertEqual(days[1][0]["time"], "06:00 AM")
        self.assertEqual(days[1][0]["staff"], ["Alice"])
        self.assertEqual(days[1][0]["status"], "upcoming")
        self.assertEqual(days[25][0]["event_type"], "holiday")

    def test_previous_month_excludes_local_next_day_event(self):
        data = self.client.get("/api/calendar/", {"year": 2030, "month": 3}).json()
        titles = [e["title"] for c in data["cells"] if not c["blank"] for e in c["events"]]
        self.assertNotIn("Early start", titles)

    def test_navigation_wraps_year(self):
        data = self.client.get("/api/calendar/", {"year": 2030, "month": 1}).json()
        self.assertEqual((data["prev_year"], data["prev_month"]), (2029, 12))
        data = self.client.get("/api/calendar/", {"year": 2030, "month": 12}).json()
        self.assertEqual((data["next_year"], data["next_month"]), (2031, 1))

    def test_invalid_month_falls_back_to_current(self):
        fixed_now = datetime(2030, 4, 10, 0, 0, tzinfo=dt_timezone.utc)
        with patch("scheduling.views_calendar.timezone.now", return_value=fixed_now):
            data = self.client.get("/api/calendar/", {"year": "abc", "month": 13}).json()
        self.assertEqual((data["year"], data["month"]), (2030, 4))

    def test_year_one_falls_back_to_current(self):
        fixed_now = datetime(2030, 4, 10, 0, 0, tzinfo=dt_timezone.utc)
        with patch("scheduling.views_calendar.timezone.now", return_value=fixed_now):
            resp = self.client.get("/api/calendar/", {"year": 1, "month": 1})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual((resp.json()["year"], resp.json()["month"]), (2030, 4))

    def test_multi_day_event_listed_on_each_day(self):
        # Brisbane 2030-04-27 09:00 to 2030-04-29 17:00
        Event.objects.create(
            title="Offsite",
            start=datetime(2030, 4, 26, 23, 0, tzinfo=dt_timezone.utc),
            end=datetime(2030, 4, 29, 7, 0, tzinfo=dt_timezone.utc),
        )
        data = self.client.get("/api/calendar/", {"year": 2030, "month": 4}).json()
        days = {c["day"]: c["events"] for c in data["cells"] if not c["blank"]}

        spans = {d: [e["continued"] for e in days[d] if e["title"] == "Offsite"] for d in (26, 27, 28, 29, 30)}
        self.assertEqual(spans, {26: [], 27: [False], 28: [True], 29: [True], 30: []})
        # The 24h holiday ends at local midnight, so it stays on one day.
        self.assertEqual([e["title"] for e in days[26]], [])
        self.assertFalse(days[25][0]["continued"])

    def test_event_crossing_month_end_shows_in_next_month(self):
        # Brisbane 2030-04-30 20:00 to 2030-05-01 02:00
        Event.objects.create(
            title="Overnight deploy",
            start=datetime(2030, 4, 30, 10, 0, tzinfo=dt_timezone.utc),
            end=datetime(2030, 4, 30, 16, 0, tzinfo=dt_timezone.utc),
        )
        data = self.client.get("/api/calendar/", {"year": 2030, "month": 5}).json()
        days = {c["day"]: c["events"] for c in data["cells"] if not c["blank"]}
        self.assertEqual([(e["title"], e["continued"]) for e in days[1]], [("Overnight deploy", True)])
        self.assertEqual(days[1][0]["time"], "08:00 PM")
