from rest_framework import serializers

from equipment.models import PhysicalAsset, AssetAssignment, AssigneeType
from equipment.services.assets import assignee_name


class PhysicalAssetSerializer(serializers.ModelSerializer):
    assigned_to_name = serializers.SerializerMethodField()
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    expected_version = serializers.IntegerField(write_only=True, required=False, min_value=0)

    class Meta:
        model = PhysicalAsset
        fields = (
            "id",
            "name",
            "serial_number",
            "description",
            "category",
            "condition_notes",
            "status",
            "status_display",
            "assigned_to_id",
            "assigned_to_type",
            "assigned_to_name",
            "rental_start_date",
            "rental_end_date",
            "version",
            "expected_version",
            "created_at",
            "updated_at",
        )
        # lifecycle fields change only through the transition endpoints
        read_only_fields = (
            "status",
            "assigned_to_id",
            "assigned_to_type",
            "rental_start_date",
            "rental_end_date",
            "version",
            "created_at",
            "updated_at",
        )
        # serial clashes surface as 409 from the service
        extra_kwargs = {"serial_number": {"validators": []}}

    def get_assigned_to_name(self, obj):
        return assignee_name(obj.assigned_to_type, obj.assigned_to_id) or None


class AssetAssignmentSerializer(serializers.ModelSerializer):
    asset_name = serializers.CharField(source="asset.name", read_only=True)
    asset_serial_number = serializers.CharField(source="asset.serial_number", read_only=True)
    assigned_to_name = serializers.SerializerMethodField()
    course_title = serializers.SerializerMethodField()

    class Meta:
        model = AssetAssignment
        fields = (
            "id",
            "asset",
            "asset_name",
            "asset_serial_number",
            "assigned_to_id",
            "assigned_to_type",
            "assigned_to_name",
            "assignment_date",
            "return_date",
            "schedule",
            "course_title",
            "notes",
            "assigned_by",
        )
        read_only_fields = fields

    def get_assigned_to_name(self, obj):
        return assignee_name(obj.assigned_to_type, obj.assigned_to_id) or None

    def get_course_title(self, obj):
        return obj.schedule.course.title if obj.schedule else None


class AssignAssetSerializer(serializers.Serializer):
    assignee_id = serializers.IntegerField()
    assignee_type = serializers.ChoiceField(choices=AssigneeType.choices)
    schedule_id = serializers.IntegerField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    assigned_by = serializers.CharField(required=False, allow_blank=True, max_length=255)


class BulkStatusSerializer(serializers.Serializer):
    asset_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)
    status = serializers.ChoiceField(choices=PhysicalAsset.STATUS_CHOICES)
