from django.db import models

from core.models import TimeStampedModel
from .course import Course
from .offering import CourseOffering


class CourseSchedule(TimeStampedModel):
    """
    One dated batch of a course offering.

    end_date and status are derived; use courses.services.scheduling
    to create or change a schedule so both stay consistent.
    """

    STATUS_UPCOMING = "upcoming"
    STATUS_ONGOING = "ongoing"
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = (
        (STATUS_UPCOMING, "Upcoming"),
        (STATUS_ONGOING, "Ongoing"),
        (STATUS_COMPLETED, "Completed"),
    )

    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="schedules"
    )
    course_offering = models.ForeignKey(
        CourseOffering,
        on_delete=models.CASCADE,
        related_name="schedules"
    )

    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_UPCOMING
    )

    instructor = models.ForeignKey(
        "trainers.Trainer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="led_schedules"
    )

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(fields=["status"], name="schedule_status_idx"),
            models.Index(fields=["start_date"], name="schedule_start_date_idx"),
        ]

    def __str__(self):
        return f"{self.course} · {self.start_date} → {self.end_date}"
