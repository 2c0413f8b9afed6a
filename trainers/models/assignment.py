from django.db import models

from core.models import TimeStampedModel
from .trainer import Trainer


class TrainerAssignment(TimeStampedModel):
    trainer = models.ForeignKey(
        Trainer,
        on_delete=models.CASCADE,
        related_name="assignments"
    )
    schedule = models.ForeignKey(
        "courses.CourseSchedule",
        on_delete=models.CASCADE,
        related_name="trainer_assignments"
    )

    class Meta:
        unique_together = ("trainer", "schedule")

    def __str__(self):
        return f"{self.trainer} ← {self.schedule}"
