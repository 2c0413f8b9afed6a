from django.urls import path

from accounts.views.auth import login_view, logout_view, me_view
from accounts.views.users import (
    UserListAPI,
    UserDetailAPI,
    RoleListAPI,
    RoleDetailAPI,
    invite_view,
)

urlpatterns = [
    # Session
    path("auth/login/", login_view, name="api_login"),
    path("auth/logout/", logout_view, name="api_logout"),
    path("auth/me/", me_view, name="api_me"),

    # Users
    path("users/", UserListAPI.as_view(), name="api_users"),
    path("users/invite/", invite_view, name="api_user_invite"),
    path("users/<int:pk>/", UserDetailAPI.as_view(), name="api_user_detail"),

    # Roles
    path("roles/", RoleListAPI.as_view(), name="api_roles"),
    path("roles/<int:pk>/", RoleDetailAPI.as_view(), name="api_role_detail"),
]
