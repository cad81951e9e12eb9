# scheduling/views_calendar.py
#
# Purpose:
# - Month-view calendar feed of events at /api/calendar/.
# - Returns a flat list of grid cells so a client can render the month
#   without doing any date math.
#
# Behavior:
# - Query params: ?year=YYYY&month=MM (defaults to current month if missing/invalid).
# - Events are stored in UTC and listed on every local day they cover in
#   SCHEDULER["DISPLAY_TIME_ZONE"]. Entries after the first day carry
#   "continued": true.
#
import calendar
from datetime import date, timedelta

from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .models import Event
from .services.time_utils import display_timezone, month_range


@api_view(["GET"])
def calendar_feed(request):
    """
    Query parameters:
      - year (int): YYYY (defaults to current year)
      - month (int): 1..12 (defaults to current month)

    Response:
      - cells: leading {"blank": true} cells for the first week, then one
        {"blank": false, "day": N, "events": [...]} cell per day;
        multi-day events appear on each day they cover
      - prev_year/prev_month and next_year/next_month for navigation
    """
    tz = display_timezone()
    today = timezone.localtime(timezone.now(), tz)

    # 1) Parse year/month safely with fallbacks. Year 1 is excluded because
    #    its local midnight can fall before datetime.min in UTC.
    try:
        year = int(request.query_params.get("year", today.year))
        month = int(request.query_params.get("month", today.month))
        if not (1 <= month <= 12) or not (2 <= year <= 9998):
            raise ValueError()
    except (TypeError, ValueError):
        year, month = today.year, today.month

    # 2) Events touching the local month window
    start_dt, end_dt = month_range(year, month, tz)
    qs = (
        Event.objects
        .filter(start__lt=end_dt, end__gte=start_dt)
        .prefetch_related("assignments__staff")
        .order_by("start", "id")
    )

    # 3) Bucket into every local day the event covers
    _, last_day_num = calendar.monthrange(year, month)
    first_of_month = date(year, month, 1)
    last_of_month = date(year, month, last_day_num)
    days_map = {d: [] for d in range(1, last_day_num + 1)}
    now = timezone.now()
    for event in qs:
        local_start = timezone.localtime(event.start, tz)
        local_end = timezone.localtime(event.end, tz)
        first_day = local_start.date()
        # end is exclusive: an event ending at midnight stops on the day before
        last_day = max(first_day, (local_end - timedelta(microseconds=1)).date())

        entry = {
            "id": event.id,
            "title": event.title,
            "time": local_start.strftime("%I:%M %p"),
            "event_type": event.event_type,
            "status": event.status_at(now),
            "staff": [a.staff.name for a in event.assignments.all()],
        }
        day = max(first_day, first_of_month)
        while day <= min(last_day, last_of_month):
            days_map[day.day].append({**entry, "continued": day != first_day})
            day += timedelta(days=1)

    # 4) Grid cells: blanks before the first weekday (0=Mon..6=Sun)
    first_weekday = calendar.monthrange(year, month)[0]
    cells = [{"blank": True} for _ in range(first_weekday)]
    for d in range(1, last_day_num + 1):
        cells.append({"blank": False, "day": d, "events": days_map[d]})

    # 5) Navigation across year boundaries
    prev_y, prev_m = (year - 1, 12) if month == 1 else (year, month - 1)
    next_y, next_m = (year + 1, 1) if month == 12 else (year, month + 1)

    return Response({
        "year": year,
        "month": month,
        "month_name": calendar.month_name[month],
        "time_zone": str(tz),
        "cells": cells,
        "prev_year": prev_y, "prev_month": prev_m,
        "next_year": next_y, "next_month": next_m,
    })
