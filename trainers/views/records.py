from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsConsoleAdmin, get_console_session
from courses.models import CourseSchedule
from courses.serializers import CourseScheduleSerializer
from trainers.models import Trainer, TrainerAssignment, TrainerDocument
from trainers.serializers import (
    DocumentUploadSerializer,
    ScheduleTrainersSerializer,
    TrainerAssignmentSerializer,
    TrainerDocumentSerializer,
    TrainerSerializer,
)
from trainers.services import trainers as trainer_service


def _trainer_queryset():
    return Trainer.objects.select_related("expertise_course").prefetch_related(
        "skills",
        "documents",
    )


# =========================
# TRAINERS
# =========================
class TrainerListAPI(APIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request):
        return Response(TrainerSerializer(_trainer_queryset(), many=True).data)

    def post(self, request):
        serializer = TrainerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        skills = data.pop("skills", [])

        trainer = trainer_service.create_trainer(data=data, skills=skills)
        return Response(
            TrainerSerializer(_trainer_queryset().get(pk=trainer.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class TrainerDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request, pk):
        return Response(TrainerSerializer(get_object_or_404(_trainer_queryset(), pk=pk)).data)

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def delete(self, request, pk):
        trainer_service.delete_trainer(get_object_or_404(Trainer, pk=pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, pk, partial):
        trainer = get_object_or_404(Trainer, pk=pk)
        serializer = TrainerSerializer(trainer, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        skills = data.pop("skills", None)

        trainer_service.update_trainer(trainer, data=data, skills=skills)
        return Response(TrainerSerializer(_trainer_queryset().get(pk=pk)).data)


# =========================
# DOCUMENTS
# =========================
class TrainerDocumentsAPI(APIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [MultiPartParser, FormParser]

    def get(self, request, pk):
        trainer = get_object_or_404(Trainer, pk=pk)
        return Response(TrainerDocumentSerializer(trainer.documents.all(), many=True).data)

    def post(self, request, pk):
        trainer = get_object_or_404(Trainer, pk=pk)
        serializer = DocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        document = trainer_service.add_document(trainer, **serializer.validated_data)
        return Response(
            TrainerDocumentSerializer(document).data,
            status=status.HTTP_201_CREATED,
        )


@api_view(["DELETE"])
@permission_classes([IsConsoleAdmin])
def delete_document_view(request, pk, document_id):
    document = get_object_or_404(TrainerDocument, pk=document_id, trainer_id=pk)
    trainer_service.remove_document(document)
    return Response(status=status.HTTP_204_NO_CONTENT)


# =========================
# SCHEDULE ASSIGNMENTS
# =========================
class ScheduleTrainersAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request, pk):
        schedule = get_object_or_404(CourseSchedule, pk=pk)
        rows = trainer_service.trainers_for_schedule(schedule)
        return Response(TrainerAssignmentSerializer(rows, many=True).data)

    def put(self, request, pk):
        schedule = get_object_or_404(CourseSchedule, pk=pk)
        serializer = ScheduleTrainersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rows = trainer_service.set_schedule_trainers(
            schedule,
            serializer.validated_data["trainer_ids"],
        )
        return Response(TrainerAssignmentSerializer(rows, many=True).data)

    post = put


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def trainer_schedules_view(request):
    """Schedules a trainer is assigned to. Non-admins see only their own."""
    session = get_console_session(request)
    email = request.query_params.get("email", "")

    if not session.is_admin:
        email = session.email

    schedules = trainer_service.schedules_for_trainer(email)
    return Response(CourseScheduleSerializer(schedules, many=True).data)


@api_view(["DELETE"])
@permission_classes([IsConsoleAdmin])
def remove_schedule_trainer_view(request, pk, trainer_id):
    assignment = get_object_or_404(TrainerAssignment, schedule_id=pk, trainer_id=trainer_id)
    trainer_service.remove_trainer_assignment(assignment)
    return Response(status=status.HTTP_204_NO_CONTENT)
