# scheduling/urls.py
#
# Purpose:
# - Expose the event API via a DRF router and the month calendar feed.
#
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import EventViewSet
from .views_calendar import calendar_feed

router = DefaultRouter()
router.register(r"events", EventViewSet, basename="event")

urlpatterns = [
    path("calendar/", calendar_feed, name="calendar_feed"),
    path("", include(router.urls)),
]
