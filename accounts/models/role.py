from django.db import models

from core.models import TimeStampedModel


class Role(TimeStampedModel):
    ADMIN = "admin"
    STUDENT = "student"
    TRAINER = "trainer"

    name = models.CharField(max_length=50, unique=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    @property
    def is_admin(self):
        return self.name == self.ADMIN
