from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.models import TimeStampedModel
from courses.services.holidays import MAX_WORKING_DAYS
from .course import Course
from .delivery_mode import DeliveryMode


class CourseOffering(TimeStampedModel):
    """
    A delivery-mode variant of a course (online / in person,
    full / part time) with its own working-day duration and fee.
    """

    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="offerings"
    )
    delivery_mode = models.ForeignKey(
        DeliveryMode,
        on_delete=models.PROTECT,
        related_name="offerings"
    )

    measure_number = models.CharField(max_length=100, blank=True)

    duration_days = models.PositiveIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(MAX_WORKING_DAYS)],
        help_text="Duration in working days"
    )
    units = models.PositiveIntegerField(null=True, blank=True)
    unit_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True
    )
    fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True
    )

    is_active = models.BooleanField(default=True)

    class Meta:
        unique_together = ("course", "delivery_mode")
        ordering = ["course", "delivery_mode__name"]

    def __str__(self):
        return f"{self.course} ({self.delivery_mode})"
