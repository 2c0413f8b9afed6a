from django.contrib.auth import get_user_model
from rest_framework import serializers

from accounts.models import Role, UserProfile
from accounts.services.invites import INVITABLE_TYPES

User = get_user_model()


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class ConsoleSessionSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    email = serializers.EmailField()
    name = serializers.CharField()
    role = serializers.CharField()
    is_admin = serializers.BooleanField()
    started_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField()


class RoleSerializer(serializers.ModelSerializer):
    user_count = serializers.SerializerMethodField()

    class Meta:
        model = Role
        fields = ("id", "name", "description", "user_count", "created_at", "updated_at")
        read_only_fields = ("created_at", "updated_at")

    def get_user_count(self, obj):
        return obj.profiles.count()


class UserSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    role = serializers.IntegerField(source="profile.role_id", read_only=True)
    role_name = serializers.CharField(source="profile.role.name", read_only=True)
    status = serializers.CharField(source="profile.status", read_only=True)
    last_login_date = serializers.DateTimeField(source="profile.last_login_date", read_only=True)

    class Meta:
        model = User
        fields = (
            "id",
            "email",
            "name",
            "role",
            "role_name",
            "status",
            "last_login_date",
            "date_joined",
        )

    def get_name(self, obj):
        return obj.get_full_name() or obj.get_username()


class UserCreateSerializer(serializers.Serializer):
    email = serializers.EmailField()
    name = serializers.CharField(max_length=150)
    role = serializers.PrimaryKeyRelatedField(queryset=Role.objects.all())
    password = serializers.CharField(write_only=True, min_length=8, trim_whitespace=False)
    status = serializers.ChoiceField(
        choices=UserProfile.STATUS_CHOICES,
        default=UserProfile.STATUS_ACTIVE,
    )


class UserUpdateSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False)
    name = serializers.CharField(max_length=150, required=False)
    role = serializers.PrimaryKeyRelatedField(queryset=Role.objects.all(), required=False)
    status = serializers.ChoiceField(choices=UserProfile.STATUS_CHOICES, required=False)
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        required=False,
        trim_whitespace=False,
    )


class InviteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    user_type = serializers.ChoiceField(choices=INVITABLE_TYPES)
