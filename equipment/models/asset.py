from django.db import models

from core.models import TimeStampedModel


class AssigneeType(models.TextChoices):
    STUDENT = "student", "Student"
    EMPLOYEE = "employee", "Employee / Trainer"


class PhysicalAsset(TimeStampedModel):
    STATUS_AVAILABLE = "available"
    STATUS_RENTAL_IN_PROGRESS = "rental_in_progress"
    STATUS_READY_TO_RETURN = "ready_to_return"
    STATUS_RETURNED = "returned"
    STATUS_MAINTENANCE = "maintenance"
    STATUS_LOST = "lost"

    STATUS_CHOICES = (
        (STATUS_AVAILABLE, "Available"),
        (STATUS_RENTAL_IN_PROGRESS, "Assigned"),
        (STATUS_READY_TO_RETURN, "Ready to Return"),
        (STATUS_RETURNED, "Returned"),
        (STATUS_MAINTENANCE, "Maintenance"),
        (STATUS_LOST, "Lost"),
    )

    name = models.CharField(max_length=255)
    serial_number = models.CharField(
        max_length=100,
        unique=True,
        null=True,
        blank=True
    )
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True)
    condition_notes = models.TextField(blank=True)

    status = models.CharField(
        max_length=30,
        choices=STATUS_CHOICES,
        default=STATUS_AVAILABLE
    )

    # current holder, set while a rental is active
    assigned_to_id = models.PositiveBigIntegerField(null=True, blank=True)
    assigned_to_type = models.CharField(
        max_length=20,
        choices=AssigneeType.choices,
        null=True,
        blank=True
    )
    rental_start_date = models.DateField(null=True, blank=True)
    rental_end_date = models.DateField(null=True, blank=True)

    # bumped by every lifecycle write
    version = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="asset_status_idx"),
        ]

    def __str__(self):
        if self.serial_number:
            return f"{self.name} ({self.serial_number})"
        return self.name

    def save(self, *args, **kwargs):
        if not self.serial_number:
            self.serial_number = None
        super().save(*args, **kwargs)
