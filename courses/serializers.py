from rest_framework import serializers

from courses.models import (
    Course,
    CourseMaterial,
    CourseOffering,
    CourseSchedule,
    DeliveryMode,
)
from courses.services.holidays import MAX_WORKING_DAYS
from trainers.models import Trainer


# =========================
# CATALOG
# =========================
class DeliveryModeSerializer(serializers.ModelSerializer):
    class Meta:
        model = DeliveryMode
        fields = (
            "id",
            "name",
            "delivery_method",
            "delivery_type",
            "default_duration_days",
            "default_units",
            "base_fee",
        )


class CourseOfferingSerializer(serializers.ModelSerializer):
    delivery_mode = serializers.PrimaryKeyRelatedField(queryset=DeliveryMode.objects.all())
    delivery_mode_name = serializers.CharField(source="delivery_mode.name", read_only=True)
    duration_days = serializers.IntegerField(min_value=1, max_value=MAX_WORKING_DAYS)

    class Meta:
        model = CourseOffering
        fields = (
            "id",
            "delivery_mode",
            "delivery_mode_name",
            "measure_number",
            "duration_days",
            "units",
            "unit_fee",
            "fee",
            "is_active",
        )
        read_only_fields = ("id",)


class CourseSerializer(serializers.ModelSerializer):
    offerings = CourseOfferingSerializer(many=True, required=False)
    curriculum_url = serializers.CharField(read_only=True)

    class Meta:
        model = Course
        fields = (
            "id",
            "title",
            "description",
            "measure_number",
            "curriculum_file",
            "curriculum_file_name",
            "curriculum_url",
            "offerings",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("curriculum_file_name", "created_at", "updated_at")
        extra_kwargs = {"curriculum_file": {"write_only": True, "required": False}}

    def validate_offerings(self, value):
        modes = [item["delivery_mode"].pk for item in value]
        if len(modes) != len(set(modes)):
            raise serializers.ValidationError(
                "Each delivery mode can be offered only once per course."
            )
        return value


class CourseMaterialSerializer(serializers.ModelSerializer):
    courses = serializers.PrimaryKeyRelatedField(
        queryset=Course.objects.all(),
        many=True,
        required=False,
    )

    class Meta:
        model = CourseMaterial
        fields = (
            "id",
            "title",
            "description",
            "category",
            "file",
            "file_type",
            "file_size",
            "courses",
            "is_active",
            "created_at",
        )
        read_only_fields = ("file_type", "file_size", "created_at")

    def create(self, validated_data):
        upload = validated_data.get("file")
        if upload is not None and not validated_data.get("file_type"):
            validated_data["file_type"] = getattr(upload, "content_type", "") or ""
        return super().create(validated_data)


# =========================
# SCHEDULES
# =========================
class CourseScheduleSerializer(serializers.ModelSerializer):
    course_title = serializers.CharField(source="course.title", read_only=True)
    delivery_mode = serializers.CharField(
        source="course_offering.delivery_mode.name",
        read_only=True,
    )
    duration_days = serializers.IntegerField(
        source="course_offering.duration_days",
        read_only=True,
    )
    instructor_name = serializers.SerializerMethodField()

    class Meta:
        model = CourseSchedule
        fields = (
            "id",
            "course",
            "course_title",
            "course_offering",
            "delivery_mode",
            "duration_days",
            "start_date",
            "end_date",
            "status",
            "instructor",
            "instructor_name",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields

    def get_instructor_name(self, obj):
        return obj.instructor.full_name if obj.instructor else None


class ScheduleWriteSerializer(serializers.Serializer):
    """end_date and status are derived; only these fields are accepted."""

    course_offering = serializers.PrimaryKeyRelatedField(
        queryset=CourseOffering.objects.select_related("course"),
    )
    start_date = serializers.DateField()
    instructor = serializers.PrimaryKeyRelatedField(
        queryset=Trainer.objects.all(),
        required=False,
        allow_null=True,
    )


class DuplicateScheduleSerializer(serializers.Serializer):
    start_date = serializers.DateField()


class PreviewEndDateSerializer(serializers.Serializer):
    course_offering = serializers.PrimaryKeyRelatedField(
        queryset=CourseOffering.objects.all(),
        required=False,
    )
    working_days = serializers.IntegerField(min_value=0, max_value=MAX_WORKING_DAYS, required=False)
    start_date = serializers.DateField()

    def validate(self, attrs):
        if "course_offering" not in attrs and "working_days" not in attrs:
            raise serializers.ValidationError(
                "Provide either course_offering or working_days."
            )
        return attrs
