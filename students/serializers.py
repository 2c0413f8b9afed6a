from django_countries.serializer_fields import CountryField
from rest_framework import serializers

from students.models import Student, StudentEducation, ScheduleEnrollment


class CompleteStudentSerializer(serializers.Serializer):
    """
    Flat view of a student with address and education, the shape the
    registration form submits.
    """

    id = serializers.IntegerField(read_only=True)

    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    gender = serializers.ChoiceField(
        choices=Student.GENDER_CHOICES,
        required=False,
        allow_blank=True,
    )
    email = serializers.EmailField()
    mobile_number = serializers.CharField(max_length=31, required=False, allow_blank=True)
    nationality = CountryField()

    street = serializers.CharField(max_length=255, source="address.street")
    postal_code = serializers.CharField(max_length=20, source="address.postal_code")
    city = serializers.CharField(max_length=100, source="address.city")

    education_background = serializers.ChoiceField(
        choices=StudentEducation.BACKGROUND_CHOICES,
        source="education.education_background",
    )
    english_proficiency = serializers.ChoiceField(
        choices=StudentEducation.LEVEL_CHOICES,
        source="education.english_proficiency",
    )
    german_proficiency = serializers.ChoiceField(
        choices=StudentEducation.LEVEL_CHOICES,
        source="education.german_proficiency",
    )

    created_at = serializers.DateTimeField(read_only=True)

    @staticmethod
    def flatten(validated_data):
        """Nested ``source`` paths back to the flat payload the service takes."""
        flat = {}
        for key, value in validated_data.items():
            if isinstance(value, dict):
                flat.update(value)
            else:
                flat[key] = value
        return flat


class EnrollmentSerializer(serializers.ModelSerializer):
    student_name = serializers.CharField(source="student.full_name", read_only=True)
    student_email = serializers.EmailField(source="student.email", read_only=True)

    class Meta:
        model = ScheduleEnrollment
        fields = (
            "id",
            "student",
            "student_name",
            "student_email",
            "schedule",
            "enrollment_date",
            "status",
        )
        read_only_fields = ("student", "schedule", "enrollment_date")


class EnrollStudentsSerializer(serializers.Serializer):
    student_ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=False,
    )


class EnrollmentStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ScheduleEnrollment.STATUS_CHOICES)
