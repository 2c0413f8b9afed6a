from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsConsoleAdmin
from courses.models import CourseSchedule
from students.models import ScheduleEnrollment
from students.serializers import (
    EnrollmentSerializer,
    EnrollmentStatusSerializer,
    EnrollStudentsSerializer,
)
from students.services import enrollments


class ScheduleStudentsAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request, pk):
        schedule = get_object_or_404(CourseSchedule, pk=pk)
        rows = enrollments.enrollments_for_schedule(schedule)
        return Response(EnrollmentSerializer(rows, many=True).data)

    def post(self, request, pk):
        schedule = get_object_or_404(CourseSchedule, pk=pk)
        serializer = EnrollStudentsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        created = enrollments.enroll_students(
            schedule,
            serializer.validated_data["student_ids"],
        )
        return Response(
            EnrollmentSerializer(created, many=True).data,
            status=status.HTTP_201_CREATED,
        )


class EnrollmentDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def patch(self, request, pk):
        enrollment = get_object_or_404(ScheduleEnrollment, pk=pk)
        serializer = EnrollmentStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        enrollment = enrollments.update_enrollment_status(
            enrollment,
            serializer.validated_data["status"],
        )
        return Response(EnrollmentSerializer(enrollment).data)

    def delete(self, request, pk):
        enrollments.remove_enrollment(get_object_or_404(ScheduleEnrollment, pk=pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
