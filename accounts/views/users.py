from django.contrib.auth import get_user_model
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import Role
from accounts.permissions import IsConsoleAdmin
from accounts.serializers import (
    InviteSerializer,
    RoleSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from accounts.services import users as user_service
from accounts.services.invites import invite_user

User = get_user_model()


# =========================
# USERS
# =========================
class UserListAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request):
        users = (
            User.objects
            .filter(profile__isnull=False)
            .select_related("profile__role")
            .order_by("-date_joined")
        )
        return Response(UserSerializer(users, many=True).data)

    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.create_user(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailAPI(APIView):
    permission_classes = [IsConsoleAdmin]

    def get(self, request, pk):
        return Response(UserSerializer(user_service.get_user(pk)).data)

    def patch(self, request, pk):
        user = user_service.get_user(pk)
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        password = data.pop("password", None)

        user = user_service.update_user(user, **data)
        if password:
            user_service.set_password(user, password)

        return Response(UserSerializer(user).data)

    def delete(self, request, pk):
        user_service.delete_user(user_service.get_user(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["POST"])
@permission_classes([IsConsoleAdmin])
def invite_view(request):
    serializer = InviteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    result = invite_user(**serializer.validated_data)

    payload = {
        "user": UserSerializer(result.user).data,
        "email_sent": result.email_sent,
    }
    if not result.email_sent:
        payload["warning"] = "Account created, but the invitation email could not be sent."
        payload["error"] = result.error

    return Response(payload, status=status.HTTP_201_CREATED)


# =========================
# ROLES
# =========================
class RoleListAPI(generics.ListCreateAPIView):
    permission_classes = [IsConsoleAdmin]
    queryset = Role.objects.all()
    serializer_class = RoleSerializer


class RoleDetailAPI(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsConsoleAdmin]
    queryset = Role.objects.all()
    serializer_class = RoleSerializer

    def perform_destroy(self, instance):
        user_service.delete_role(instance)
