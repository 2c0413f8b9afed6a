# accounts/permissions.py
from functools import wraps

from django.core.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission

from accounts.session import ConsoleSession


def get_console_session(request):
    session = getattr(request, "console_session", None)
    if session is None and request.user.is_authenticated:
        session = ConsoleSession.for_user(request.user)
    return session


class IsConsoleAdmin(BasePermission):
    message = "Console administrators only."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        session = get_console_session(request)
        return bool(session and session.is_admin)


def console_admin_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):

        # 1. Must be logged in
        if not request.user.is_authenticated:
            from django.shortcuts import redirect
            return redirect("admin:login")

        # 2. Must hold the admin role
        session = get_console_session(request)
        if not session or not session.is_admin:
            raise PermissionDenied("Console administrators only")

        return view_func(request, *args, **kwargs)

    return _wrapped
