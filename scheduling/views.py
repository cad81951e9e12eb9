# scheduling/views.py
#
# Purpose:
# - CRUD API for events, including their staff assignments.
# - Manual completion of an event (sticky "completed" status).
# - Assign / unassign a single staff member.
#
# Notes:
# - Writes go through EventManager so conflict checks and assignment
#   replacement live in one place.
# - ScheduleConflict -> 409 with the clashing staff; other domain rule
#   failures (ValueError) -> 400 with the reason.
#
from django.shortcuts import get_object_or_404

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ParseError
from rest_framework.response import Response

from .models import Event
from .serializers import EventSerializer, AssignStaffSerializer, UnassignStaffSerializer
from .services.event_manager import EventManager, ScheduleConflict
from .services.time_utils import parse_window


def conflict_response(exc: ScheduleConflict) -> Response:
    return Response(
        {
            "detail": str(exc),
            "conflicts": [{"id": c.id, "name": c.name} for c in exc.conflicts],
        },
        status=status.HTTP_409_CONFLICT,
    )


class EventViewSet(viewsets.ModelViewSet):
    """
    Endpoints:
    - GET    /api/events/?start=&end=&staff=    list (optional overlap/staff filters)
    - POST   /api/events/                       create with assigned_to=[staff ids]
    - PUT    /api/events/{id}/                  edit; assigned_to replaces assignments
    - DELETE /api/events/{id}/                  delete event and its assignments
    - POST   /api/events/{id}/complete/         mark completed (sticky)
    - POST   /api/events/{id}/assignments/      {"staff": id} assign one member
    - DELETE /api/events/{id}/assignments/      {"staff": id} unassign one member
    """
    serializer_class = EventSerializer
    manager = EventManager()

    def get_queryset(self):
        qs = Event.objects.all().prefetch_related("assignments__staff").order_by("start", "id")
        params = self.request.query_params

        start_raw = params.get("start")
        end_raw = params.get("end")
        if start_raw or end_raw:
            try:
                window = parse_window(start_raw, end_raw)
            except ValueError as e:
                raise ParseError(str(e))
            qs = qs.filter(start__lt=window.end, end__gt=window.start)

        staff_raw = (params.get("staff") or "").strip()
        if staff_raw:
            if not staff_raw.isdigit():
                raise ParseError("Invalid staff ID.")
            qs = qs.filter(assignments__staff_id=int(staff_raw)).distinct()
        return qs

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            event = self.manager.create_event(
                title=data["title"],
                description=data.get("description", ""),
                start=data["start"],
                end=data["end"],
                event_type=data.get("event_type", Event.TYPE_REGULAR),
                staff=data.get("assigned_to", []),
            )
        except ScheduleConflict as e:
            return conflict_response(e)
        except ValueError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        out = self.get_serializer(event)
        headers = self.get_success_headers(out.data)
        return Response(out.data, status=status.HTTP_201_CREATED, headers=headers)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        event = self.get_object()
        serializer = self.get_serializer(event, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        changes = dict(serializer.validated_data)
        staff = changes.pop("assigned_to", None)
        try:
            self.manager.update_event(event, staff=staff, **changes)
        except ScheduleConflict as e:
            return conflict_response(e)
        except ValueError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        # Drop assignments prefetched by get_object(); they may have changed.
        event._prefetched_objects_cache = {}
        return Response(self.get_serializer(event).data)

    def destroy(self, request, *args, **kwargs):
        event = self.get_object()
        self.manager.delete_event(event)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"])
    def complete(self, request, pk=None):
        """
        Mark an event completed. The status stays "completed" from then on,
        even if the event is later moved into the future.
        """
        event = self.get_object()
        self.manager.complete_event(event)
        return Response(self.get_serializer(event).data)

    @action(detail=True, methods=["post", "delete"], url_path="assignments")
    def assignments(self, request, pk=None):
        event = get_object_or_404(Event, pk=pk)

        if request.method == "DELETE":
            # DELETE bodies are not always forwarded; accept ?staff= too.
            payload = request.data or request.query_params
            ser = UnassignStaffSerializer(data=payload)
            ser.is_valid(raise_exception=True)
            deleted = self.manager.unassign(event, ser.validated_data["staff"])
            return Response({"success": True, "deleted_count": deleted})

        ser = AssignStaffSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            self.manager.assign(event, ser.validated_data["staff"])
        except ScheduleConflict as e:
            return conflict_response(e)
        except ValueError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        # List filters do not apply to a single-event action
        event = Event.objects.prefetch_related("assignments__staff").get(pk=event.pk)
        return Response(self.get_serializer(event).data, status=status.HTTP_201_CREATED)
