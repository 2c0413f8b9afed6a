import logging
import secrets
from dataclasses import dataclass

from accounts.models import Role
from accounts.services.users import create_user
from accounts.utils.email import send_invite_email
from core.exceptions import InvalidInput

logger = logging.getLogger(__name__)

INVITABLE_TYPES = (Role.STUDENT, Role.TRAINER)


@dataclass
class InviteResult:
    user: object
    email_sent: bool
    error: str = ""


def generate_temporary_password(length=12):
    return secrets.token_urlsafe(length)[:length]


def invite_user(*, name, email, user_type):
    """
    Creates the account, then emails the temporary password.

    A failed email does not undo the account: the result reports
    ``email_sent=False`` so the admin can pass the credentials on.
    """
    if user_type not in INVITABLE_TYPES:
        raise InvalidInput(f"Cannot invite user type '{user_type}'.")

    role, _ = Role.objects.get_or_create(name=user_type)
    password = generate_temporary_password()

    user = create_user(email=email, name=name, role=role, password=password)

    try:
        send_invite_email(
            name=name,
            email=user.email,
            password=password,
            user_type=user_type,
        )
    except Exception as exc:  # account stays; result reports the failure
        logger.exception("Invite email to %s failed", user.email)
        return InviteResult(user=user, email_sent=False, error=str(exc))

    logger.info("Invite email sent to %s", user.email)
    return InviteResult(user=user, email_sent=True)
