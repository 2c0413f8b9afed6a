from django.db import models
from django.conf import settings

from core.models import TimeStampedModel
from .role import Role


class UserProfile(TimeStampedModel):
    STATUS_ACTIVE = "active"
    STATUS_INACTIVE = "inactive"

    STATUS_CHOICES = (
        (STATUS_ACTIVE, "Active"),
        (STATUS_INACTIVE, "Inactive"),
    )

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile"
    )

    # Roles in use cannot be deleted (accounts.services.users.delete_role)
    role = models.ForeignKey(
        Role,
        on_delete=models.PROTECT,
        related_name="profiles"
    )

    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default=STATUS_ACTIVE
    )

    last_login_date = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return self.user.get_username()

    @property
    def display_name(self):
        return self.user.get_full_name() or self.user.get_username()

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE
