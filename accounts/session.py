# accounts/session.py
"""
Explicit console session.

Created at login, stored in the Django session, attached to every request
as ``request.console_session`` by ConsoleSessionMiddleware and invalidated
at logout or once ``expires_at`` has passed.
"""
from dataclasses import dataclass, asdict
from datetime import datetime, timedelta

from django.conf import settings
from django.utils import timezone

from accounts.models import Role

SESSION_KEY = "console_session"


@dataclass
class ConsoleSession:
    user_id: int
    email: str
    name: str
    role: str
    started_at: datetime
    expires_at: datetime

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    def is_expired(self, now=None):
        return (now or timezone.now()) >= self.expires_at

    # -------------------------------------------------
    # SERIALIZATION (session storage is JSON)
    # -------------------------------------------------
    def to_session(self):
        data = asdict(self)
        data["started_at"] = self.started_at.isoformat()
        data["expires_at"] = self.expires_at.isoformat()
        return data

    @classmethod
    def from_session(cls, data):
        try:
            return cls(
                user_id=data["user_id"],
                email=data["email"],
                name=data["name"],
                role=data["role"],
                started_at=datetime.fromisoformat(data["started_at"]),
                expires_at=datetime.fromisoformat(data["expires_at"]),
            )
        except (KeyError, TypeError, ValueError):
            return None

    # -------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------
    @classmethod
    def for_user(cls, user, now=None):
        now = now or timezone.now()
        profile = getattr(user, "profile", None)

        if user.is_superuser:
            role = Role.ADMIN
        elif profile is not None:
            role = profile.role.name
        else:
            role = ""

        return cls(
            user_id=user.pk,
            email=user.email,
            name=user.get_full_name() or user.get_username(),
            role=role,
            started_at=now,
            expires_at=now + timedelta(hours=settings.CONSOLE_SESSION_TTL_HOURS),
        )

    @classmethod
    def start(cls, request, user):
        session = cls.for_user(user)
        request.session[SESSION_KEY] = session.to_session()
        request.console_session = session
        return session

    @classmethod
    def load(cls, request):
        data = request.session.get(SESSION_KEY)
        if not data:
            return None
        return cls.from_session(data)

    @staticmethod
    def end(request):
        request.session.pop(SESSION_KEY, None)
        request.console_session = None
