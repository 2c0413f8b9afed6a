# accounts/services/users.py
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from accounts.models import Role, UserProfile
from core.exceptions import BusinessRuleViolation, DuplicateEmail, NotFound

logger = logging.getLogger(__name__)
User = get_user_model()


class RoleInUse(BusinessRuleViolation):
    code = "role_in_use"

    def __init__(self, role, count):
        self.role = role
        self.count = count
        super().__init__(
            f"Role '{role.name}' is assigned to {count} user(s) and cannot be deleted."
        )


def _split_name(name):
    first, _, last = (name or "").strip().partition(" ")
    return first, last


# ============================
# USERS
# ============================

@transaction.atomic
def create_user(*, email, name, role, password, status=UserProfile.STATUS_ACTIVE):
    email = email.strip().lower()

    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmail(email)

    first_name, last_name = _split_name(name)
    user = User(
        username=email,
        email=email,
        first_name=first_name,
        last_name=last_name,
        is_staff=role.is_admin,
    )
    user.set_password(password)
    user.save()

    UserProfile.objects.create(user=user, role=role, status=status)

    logger.info("Created console user %s with role %s", email, role.name)
    return user


@transaction.atomic
def update_user(user, *, email=None, name=None, role=None, status=None):
    if email is not None:
        email = email.strip().lower()
        clash = User.objects.filter(email__iexact=email).exclude(pk=user.pk)
        if clash.exists():
            raise DuplicateEmail(email)
        user.email = email
        user.username = email

    if name is not None:
        user.first_name, user.last_name = _split_name(name)

    profile = user.profile
    if role is not None:
        profile.role = role
        user.is_staff = role.is_admin

    if status is not None:
        profile.status = status

    user.save()
    profile.save()
    return user


def set_password(user, password):
    user.set_password(password)
    user.save(update_fields=["password"])


def delete_user(user):
    logger.info("Deleting console user %s", user.email)
    user.delete()


def record_login(user):
    profile = getattr(user, "profile", None)
    if profile is None:
        return
    profile.last_login_date = timezone.now()
    profile.save(update_fields=["last_login_date", "updated_at"])


def get_user(user_id):
    try:
        return User.objects.select_related("profile__role").get(pk=user_id)
    except User.DoesNotExist:
        raise NotFound("User not found.")


# ============================
# ROLES
# ============================

def delete_role(role):
    """Refused while any profile still references the role."""
    in_use = role.profiles.count()
    if in_use:
        raise RoleInUse(role, in_use)

    logger.info("Deleting role %s", role.name)
    role.delete()

