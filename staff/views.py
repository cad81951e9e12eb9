# staff/views.py
#
# Purpose:
# - CRUD API for staff members.
# - Availability endpoint: who is busy/free in a requested window.
#
import logging

from rest_framework import status, viewsets
from rest_framework.permissions import SAFE_METHODS, BasePermission
from rest_framework.response import Response
from rest_framework.views import APIView

from scheduling.conf import scheduler_setting
from scheduling.services.availability_engine import AvailabilityEngine
from scheduling.services.schedule_source import OrmScheduleSource
from scheduling.services.time_utils import parse_window
from .models import StaffMember
from .serializers import StaffMemberSerializer, StaffAvailabilitySerializer

logger = logging.getLogger(__name__)


# -------------------- Permissions --------------------
class IsAdminOrReadOnly(BasePermission):
    """
    Read: anyone
    Write: anyone, or Django staff users only when
           SCHEDULER["STAFF_WRITE_REQUIRES_ADMIN"] is on
    """
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        if not scheduler_setting("STAFF_WRITE_REQUIRES_ADMIN"):
            return True
        return bool(request.user and request.user.is_staff)


# -------------------- ViewSets --------------------
class StaffMemberViewSet(viewsets.ModelViewSet):
    """
    - GET/POST          /api/staff/members/
    - GET/PUT/PATCH     /api/staff/members/{id}/
    - DELETE            /api/staff/members/{id}/   (assignments are removed with the member)
    """
    queryset = StaffMember.objects.all().order_by("id")
    serializer_class = StaffMemberSerializer
    permission_classes = [IsAdminOrReadOnly]

    def perform_create(self, serializer):
        member = serializer.save()
        logger.info("Created staff member #%s (%s)", member.id, member.name)

    def perform_destroy(self, instance):
        member_id = instance.id
        instance.delete()
        logger.info("Deleted staff member #%s and their assignments", member_id)


class StaffAvailabilityView(APIView):
    """
    GET /api/staff/availability/?start=ISO&end=ISO[&slots=false]

    One row per staff member:
      { "id", "name", "isBusy", "nextAvailable", "freeSlots": [{"start", "end"}] }

    - start/end are required ISO-8601 datetimes; naive values use the
      current timezone. Missing, malformed, or start >= end -> 400.
    - slots=false leaves out freeSlots.
    """
    engine = AvailabilityEngine()

    def get(self, request):
        try:
            window = parse_window(
                request.query_params.get("start"),
                request.query_params.get("end"),
            )
        except ValueError as e:
            # InvalidWindow is a ValueError too; never "fix" the window here.
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        rows = self.engine.evaluate(window.start, window.end, OrmScheduleSource())

        include_slots = (request.query_params.get("slots") or "").strip().lower() not in ("false", "0", "no")
        out = StaffAvailabilitySerializer(rows, many=True, context={"include_slots": include_slots})
        return Response(out.data)
