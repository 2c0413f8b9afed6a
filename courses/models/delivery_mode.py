from django.db import models

from core.models import TimeStampedModel


class DeliveryMode(TimeStampedModel):
    METHOD_ONLINE = "online"
    METHOD_IN_PERSON = "in_person"

    METHOD_CHOICES = (
        (METHOD_ONLINE, "Online"),
        (METHOD_IN_PERSON, "In person"),
    )

    TYPE_FULL_TIME = "full_time"
    TYPE_PART_TIME = "part_time"

    TYPE_CHOICES = (
        (TYPE_FULL_TIME, "Full time"),
        (TYPE_PART_TIME, "Part time"),
    )

    name = models.CharField(max_length=100, unique=True)
    delivery_method = models.CharField(max_length=20, choices=METHOD_CHOICES)
    delivery_type = models.CharField(max_length=20, choices=TYPE_CHOICES)

    default_duration_days = models.PositiveIntegerField(
        default=20,
        help_text="Suggested duration in working days"
    )
    default_units = models.PositiveIntegerField(null=True, blank=True)
    base_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
