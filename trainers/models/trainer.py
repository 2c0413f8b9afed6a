from django.db import models
from phone_field import PhoneField

from core.models import TimeStampedModel


class Trainer(TimeStampedModel):
    LEVEL_JUNIOR = "junior"
    LEVEL_MID = "mid_level"
    LEVEL_SENIOR = "senior"
    LEVEL_EXPERT = "expert"

    LEVEL_CHOICES = (
        (LEVEL_JUNIOR, "Junior"),
        (LEVEL_MID, "Mid-Level"),
        (LEVEL_SENIOR, "Senior"),
        (LEVEL_EXPERT, "Expert"),
    )

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    mobile_number = PhoneField(blank=True, help_text="Contact phone number")

    expertise_area = models.CharField(max_length=255, blank=True)
    expertise_course = models.ForeignKey(
        "courses.Course",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="expert_trainers"
    )
    experience_level = models.CharField(max_length=20, choices=LEVEL_CHOICES)

    profile_image = models.ImageField(
        upload_to="trainers/images/",
        null=True,
        blank=True
    )

    class Meta:
        ordering = ["last_name", "first_name"]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


class TrainerSkill(TimeStampedModel):
    trainer = models.ForeignKey(
        Trainer,
        on_delete=models.CASCADE,
        related_name="skills"
    )
    skill = models.CharField(max_length=100)

    class Meta:
        unique_together = ("trainer", "skill")
        ordering = ["skill"]

    def __str__(self):
        return self.skill


class TrainerDocument(TimeStampedModel):
    trainer = models.ForeignKey(
        Trainer,
        on_delete=models.CASCADE,
        related_name="documents"
    )
    title = models.CharField(max_length=255)
    file = models.FileField(upload_to="trainers/documents/")
    file_type = models.CharField(max_length=100, blank=True)
    file_size = models.PositiveBigIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title
