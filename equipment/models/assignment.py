from django.db import models
from django.utils import timezone

from .asset import PhysicalAsset, AssigneeType


class AssetAssignment(models.Model):
    """
    Rental history. ``return_date`` is null while the assignment is open;
    at most one open assignment exists per asset.
    """

    asset = models.ForeignKey(
        PhysicalAsset,
        on_delete=models.CASCADE,
        related_name="assignments"
    )
    assigned_to_id = models.PositiveBigIntegerField()
    assigned_to_type = models.CharField(max_length=20, choices=AssigneeType.choices)

    assignment_date = models.DateTimeField(default=timezone.now)
    return_date = models.DateTimeField(null=True, blank=True)

    schedule = models.ForeignKey(
        "courses.CourseSchedule",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="asset_assignments"
    )

    notes = models.TextField(blank=True)
    assigned_by = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-assignment_date"]
        indexes = [
            models.Index(fields=["asset", "return_date"], name="assignment_asset_open_idx"),
        ]

    def __str__(self):
        return f"{self.asset} → {self.assigned_to_type}:{self.assigned_to_id}"

    @property
    def is_open(self):
        return self.return_date is None
