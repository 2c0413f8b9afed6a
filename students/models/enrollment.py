from django.db import models
from django.utils import timezone

from core.models import TimeStampedModel
from .student import Student


class ScheduleEnrollment(TimeStampedModel):
    STATUS_ENROLLED = "enrolled"
    STATUS_COMPLETED = "completed"
    STATUS_DROPPED = "dropped"

    STATUS_CHOICES = (
        (STATUS_ENROLLED, "Enrolled"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_DROPPED, "Dropped"),
    )

    student = models.ForeignKey(
        Student,
        on_delete=models.CASCADE,
        related_name="enrollments"
    )
    schedule = models.ForeignKey(
        "courses.CourseSchedule",
        on_delete=models.CASCADE,
        related_name="enrollments"
    )

    enrollment_date = models.DateTimeField(default=timezone.now)
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_ENROLLED
    )

    class Meta:
        unique_together = ("student", "schedule")
        ordering = ["-enrollment_date"]

    def __str__(self):
        return f"{self.student} → {self.schedule}"
