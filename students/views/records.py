from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsConsoleAdmin, get_console_session
from courses.serializers import CourseScheduleSerializer
from students.models import Student
from students.serializers import CompleteStudentSerializer
from students.services import records
from students.services.enrollments import schedules_for_student


def _get_student(pk):
    return get_object_or_404(records.get_complete_students(), pk=pk)


class StudentListAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request):
        students = records.get_complete_students()
        return Response(CompleteStudentSerializer(students, many=True).data)

    def post(self, request):
        serializer = CompleteStudentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        student = records.create_student(
            CompleteStudentSerializer.flatten(serializer.validated_data)
        )
        return Response(
            CompleteStudentSerializer(_get_student(student.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class StudentDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request, pk):
        return Response(CompleteStudentSerializer(_get_student(pk)).data)

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def delete(self, request, pk):
        records.delete_student(get_object_or_404(Student, pk=pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, pk, partial):
        student = _get_student(pk)
        serializer = CompleteStudentSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        records.update_student(
            student,
            CompleteStudentSerializer.flatten(serializer.validated_data),
        )
        return Response(CompleteStudentSerializer(_get_student(pk)).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def student_schedules_view(request):
    """
    Schedules a student is enrolled in, looked up by email.
    Non-admins may only look up their own email.
    """
    session = get_console_session(request)
    email = request.query_params.get("email", "")

    if not session.is_admin:
        email = session.email

    schedules = schedules_for_student(email)
    return Response(CourseScheduleSerializer(schedules, many=True).data)
