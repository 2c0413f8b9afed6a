from django.db import models
from phone_field import PhoneField
from django_countries.fields import CountryField

from core.models import TimeStampedModel


class Student(TimeStampedModel):
    GENDER_CHOICES = (
        ("male", "Male"),
        ("female", "Female"),
        ("other", "Other"),
    )

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True)
    email = models.EmailField(unique=True)

    mobile_number = PhoneField(
        blank=True,
        help_text="Contact phone number",
    )
    nationality = CountryField()

    class Meta:
        ordering = ["last_name", "first_name"]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


class StudentAddress(TimeStampedModel):
    student = models.OneToOneField(
        Student,
        on_delete=models.CASCADE,
        related_name="address"
    )
    street = models.CharField(max_length=255)
    postal_code = models.CharField(max_length=20)
    city = models.CharField(max_length=100)

    def __str__(self):
        return f"{self.street}, {self.postal_code} {self.city}"


class StudentEducation(TimeStampedModel):
    BACKGROUND_CHOICES = (
        ("school", "School"),
        ("graduation", "Graduation"),
        ("masters", "Masters"),
        ("phd", "PhD"),
        ("diploma", "Diploma"),
        ("certification", "Certification"),
    )

    LEVEL_CHOICES = tuple((level, level) for level in ("A1", "A2", "B1", "B2", "C1", "C2"))

    student = models.OneToOneField(
        Student,
        on_delete=models.CASCADE,
        related_name="education"
    )
    education_background = models.CharField(max_length=20, choices=BACKGROUND_CHOICES)
    english_proficiency = models.CharField(max_length=2, choices=LEVEL_CHOICES)
    german_proficiency = models.CharField(max_length=2, choices=LEVEL_CHOICES)

    def __str__(self):
        return f"Education({self.student})"
