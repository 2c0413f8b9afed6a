from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsConsoleAdmin
from core.exceptions import BusinessRuleViolation
from courses.models import Course, CourseMaterial, DeliveryMode
from courses.serializers import (
    CourseMaterialSerializer,
    CourseSerializer,
    DeliveryModeSerializer,
)
from courses.services.catalog import create_course, delete_course, update_course


def _course_queryset():
    return Course.objects.prefetch_related("offerings__delivery_mode")


# =========================
# COURSES
# =========================
class CourseListAPI(APIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request):
        return Response(CourseSerializer(_course_queryset(), many=True).data)

    def post(self, request):
        serializer = CourseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        offerings = data.pop("offerings", [])

        course = create_course(data=data, offerings=offerings)
        return Response(
            CourseSerializer(_course_queryset().get(pk=course.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class CourseDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request, pk):
        course = get_object_or_404(_course_queryset(), pk=pk)
        return Response(CourseSerializer(course).data)

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def delete(self, request, pk):
        delete_course(get_object_or_404(Course, pk=pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, pk, partial):
        course = get_object_or_404(Course, pk=pk)
        serializer = CourseSerializer(course, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        offerings = data.pop("offerings", None)

        update_course(course, data=data, offerings=offerings)
        return Response(CourseSerializer(_course_queryset().get(pk=pk)).data)


# =========================
# DELIVERY MODES
# =========================
class DeliveryModeListAPI(generics.ListCreateAPIView):
    permission_classes = [IsConsoleAdmin]
    queryset = DeliveryMode.objects.all()
    serializer_class = DeliveryModeSerializer


class DeliveryModeDetailAPI(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsConsoleAdmin]
    queryset = DeliveryMode.objects.all()
    serializer_class = DeliveryModeSerializer

    def perform_destroy(self, instance):
        if instance.offerings.exists():
            raise BusinessRuleViolation(
                f"Delivery mode '{instance.name}' is used by course offerings."
            )
        instance.delete()


# =========================
# MATERIALS
# =========================
class MaterialListAPI(generics.ListCreateAPIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    serializer_class = CourseMaterialSerializer

    def get_queryset(self):
        qs = CourseMaterial.objects.prefetch_related("courses")
        course_id = self.request.query_params.get("course")
        if course_id:
            qs = qs.filter(courses__id=course_id)
        return qs


class MaterialDetailAPI(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    queryset = CourseMaterial.objects.all()
    serializer_class = CourseMaterialSerializer

    def perform_destroy(self, instance):
        instance.file.delete(save=False)
        instance.delete()
