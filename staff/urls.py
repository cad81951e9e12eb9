from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import StaffMemberViewSet, StaffAvailabilityView

router = DefaultRouter()
router.register(r"members", StaffMemberViewSet, basename="staff-member")

urlpatterns = [
    path("availability/", StaffAvailabilityView.as_view(), name="staff-availability"),
    path("", include(router.urls)),
]
