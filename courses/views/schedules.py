from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsConsoleAdmin
from courses.models import CourseSchedule
from courses.serializers import (
    CourseScheduleSerializer,
    DuplicateScheduleSerializer,
    PreviewEndDateSerializer,
    ScheduleWriteSerializer,
)
from courses.services import scheduling
from courses.services.holidays import get_holiday_calculator
from courses.services.schedule_status import refresh_schedule_statuses


def _schedule_payload(schedule, calculation=None):
    data = CourseScheduleSerializer(schedule).data
    if calculation is not None:
        data["calculation"] = calculation.as_dict()
    return data


def _get_schedule(pk):
    return get_object_or_404(
        CourseSchedule.objects.select_related(
            "course",
            "course_offering__delivery_mode",
            "instructor",
        ),
        pk=pk,
    )


class ScheduleListAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request):
        schedules = scheduling.list_schedules(status=request.query_params.get("status"))
        return Response(CourseScheduleSerializer(schedules, many=True).data)

    def post(self, request):
        serializer = ScheduleWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        schedule, calculation = scheduling.create_schedule(**serializer.validated_data)
        return Response(
            _schedule_payload(schedule, calculation),
            status=status.HTTP_201_CREATED,
        )


class ScheduleDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request, pk):
        return Response(_schedule_payload(_get_schedule(pk)))

    def patch(self, request, pk):
        schedule = _get_schedule(pk)
        serializer = ScheduleWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        schedule, calculation = scheduling.update_schedule(
            schedule,
            **serializer.validated_data,
        )
        return Response(_schedule_payload(schedule, calculation))

    put = patch

    def delete(self, request, pk):
        scheduling.delete_schedule(_get_schedule(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def duplicate_schedule_view(request, pk):
    serializer = DuplicateScheduleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    schedule, calculation = scheduling.duplicate_schedule(
        _get_schedule(pk),
        start_date=serializer.validated_data["start_date"],
    )
    return Response(
        _schedule_payload(schedule, calculation),
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def preview_end_date_view(request):
    """Live end-date preview for the schedule form. Nothing is saved."""
    serializer = PreviewEndDateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    if "course_offering" in data:
        calculation = scheduling.preview_end_date(data["course_offering"], data["start_date"])
    else:
        calculation = get_holiday_calculator().calculate_end_date(
            data["start_date"],
            data["working_days"],
        )

    return Response(calculation.as_dict())


@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def refresh_statuses_view(request):
    return Response({"updated": refresh_schedule_statuses()})
