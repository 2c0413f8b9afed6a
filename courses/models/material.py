from django.db import models

from core.models import TimeStampedModel
from .course import Course


class CourseMaterial(TimeStampedModel):
    """Downloadable file shared by one or more courses."""

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True)

    file = models.FileField(upload_to="courses/materials/")
    file_type = models.CharField(max_length=100, blank=True)
    file_size = models.PositiveBigIntegerField(null=True, blank=True)

    courses = models.ManyToManyField(
        Course,
        blank=True,
        related_name="materials"
    )

    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if self.file and self.file_size is None:
            try:
                self.file_size = self.file.size
            except (OSError, ValueError):
                self.file_size = None
        super().save(*args, **kwargs)
