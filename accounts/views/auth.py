from django.contrib.auth import authenticate, login, logout
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import get_console_session
from accounts.serializers import LoginSerializer, ConsoleSessionSerializer
from accounts.services.users import record_login
from accounts.session import ConsoleSession

import logging

logger = logging.getLogger(__name__)


def _session_payload(session):
    return ConsoleSessionSerializer({
        "user_id": session.user_id,
        "email": session.email,
        "name": session.name,
        "role": session.role,
        "is_admin": session.is_admin,
        "started_at": session.started_at,
        "expires_at": session.expires_at,
    }).data


@api_view(["POST"])
@permission_classes([AllowAny])
def login_view(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate(
        request,
        username=serializer.validated_data["email"],
        password=serializer.validated_data["password"],
    )

    if user is None:
        logger.info("Failed console login for %s", serializer.validated_data["email"])
        return Response(
            {"error": "Invalid credentials", "code": "invalid_credentials"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    login(request, user)
    session = ConsoleSession.start(request, user)
    record_login(user)

    return Response(_session_payload(session))


@api_view(["POST"])
@permission_classes([AllowAny])
def logout_view(request):
    ConsoleSession.end(request)
    logout(request)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def me_view(request):
    return Response(_session_payload(get_console_session(request)))
