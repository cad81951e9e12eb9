from rest_framework import serializers

from staff.models import StaffMember
from .models import Assignment, Event


class AssignedStaffSerializer(serializers.ModelSerializer):
    class Meta:
        model = StaffMember
        fields = ["name", "email", "designation"]


class AssignmentSerializer(serializers.ModelSerializer):
    staff_id = serializers.IntegerField(read_only=True)
    staff = AssignedStaffSerializer(read_only=True)

    class Meta:
        model = Assignment
        fields = ["staff_id", "staff", "assigned_at"]


class EventSerializer(serializers.ModelSerializer):
    # Accepts a list of staff PKs on write; replaced by the assignment list on read.
    assigned_to = serializers.PrimaryKeyRelatedField(
        queryset=StaffMember.objects.all(),
        many=True,
        required=False,
        write_only=True,
    )
    status = serializers.CharField(read_only=True)

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "description",
            "start",
            "end",
            "event_type",
            "status",
            "completed_at",
            "assigned_to",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["completed_at", "created_at", "updated_at"]

    def validate_assigned_to(self, value):
        # Drop repeats while keeping the caller's order
        seen = set()
        unique = []
        for member in value:
            if member.pk not in seen:
                seen.add(member.pk)
                unique.append(member)
        return unique

    def validate(self, attrs):
        start = attrs.get("start", getattr(self.instance, "start", None))
        end = attrs.get("end", getattr(self.instance, "end", None))
        if start is not None and end is not None and end <= start:
            raise serializers.ValidationError("End time must be after start time.")
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["assigned_to"] = AssignmentSerializer(instance.assignments.all(), many=True).data
        return data


class AssignStaffSerializer(serializers.Serializer):
    staff = serializers.PrimaryKeyRelatedField(queryset=StaffMember.objects.all())


class UnassignStaffSerializer(serializers.Serializer):
    staff = serializers.IntegerField(min_value=1)
