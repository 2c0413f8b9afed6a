from django.db import models
from ckeditor.fields import RichTextField

from core.models import TimeStampedModel


# =====================================================
# COURSE
# =====================================================

class Course(TimeStampedModel):
    title = models.CharField(max_length=255)
    description = RichTextField(blank=True)

    # funding programme reference ("Maßnahmenummer")
    measure_number = models.CharField(max_length=100, blank=True)

    curriculum_file = models.FileField(
        upload_to="courses/curriculum/",
        null=True,
        blank=True
    )
    curriculum_file_name = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    @property
    def curriculum_url(self):
        if self.curriculum_file:
            return self.curriculum_file.url
        return None

    def save(self, *args, **kwargs):
        if self.curriculum_file and not self.curriculum_file_name:
            self.curriculum_file_name = self.curriculum_file.name.rsplit("/", 1)[-1]
        super().save(*args, **kwargs)
