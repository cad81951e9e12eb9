from rest_framework import serializers
from .models import StaffMember


class StaffMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = StaffMember
        fields = ["id", "name", "email", "designation", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]


class SlotSerializer(serializers.Serializer):
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()


class StaffAvailabilitySerializer(serializers.Serializer):
    """
    Serializes AvailabilityEngine rows. Keys are camelCase because the
    calendar front end reads them as-is.
    """
    id = serializers.IntegerField()
    name = serializers.CharField()
    isBusy = serializers.BooleanField(source="is_busy")
    nextAvailable = serializers.DateTimeField(source="next_available")
    freeSlots = SlotSerializer(source="free_slots", many=True)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.context.get("include_slots", True):
            self.fields.pop("freeSlots")
