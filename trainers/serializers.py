from rest_framework import serializers

from courses.models import Course
from trainers.models import Trainer, TrainerDocument, TrainerAssignment


class TrainerDocumentSerializer(serializers.ModelSerializer):
    class Meta:
        model = TrainerDocument
        fields = ("id", "title", "file", "file_type", "file_size", "created_at")
        read_only_fields = ("file_type", "file_size", "created_at")


class TrainerSerializer(serializers.ModelSerializer):
    mobile_number = serializers.CharField(max_length=31, required=False, allow_blank=True)
    expertise_course = serializers.PrimaryKeyRelatedField(
        queryset=Course.objects.all(),
        required=False,
        allow_null=True,
    )
    expertise_course_title = serializers.SerializerMethodField()
    skills = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        write_only=True,
    )
    skill_list = serializers.SerializerMethodField()
    documents = TrainerDocumentSerializer(many=True, read_only=True)

    class Meta:
        model = Trainer
        fields = (
            "id",
            "first_name",
            "last_name",
            "email",
            "mobile_number",
            "expertise_area",
            "expertise_course",
            "expertise_course_title",
            "experience_level",
            "profile_image",
            "skills",
            "skill_list",
            "documents",
            "created_at",
        )
        read_only_fields = ("created_at",)
        # uniqueness is checked case-insensitively by the service
        extra_kwargs = {"email": {"validators": []}}

    def get_expertise_course_title(self, obj):
        return obj.expertise_course.title if obj.expertise_course else None

    def get_skill_list(self, obj):
        return [s.skill for s in obj.skills.all()]


class TrainerAssignmentSerializer(serializers.ModelSerializer):
    trainer_name = serializers.CharField(source="trainer.full_name", read_only=True)
    trainer_email = serializers.EmailField(source="trainer.email", read_only=True)

    class Meta:
        model = TrainerAssignment
        fields = ("id", "trainer", "trainer_name", "trainer_email", "schedule", "created_at")
        read_only_fields = fields


class ScheduleTrainersSerializer(serializers.Serializer):
    trainer_ids = serializers.ListField(child=serializers.IntegerField())


class DocumentUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
