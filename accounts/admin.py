from django.contrib import admin

from accounts.models import Role, UserProfile


# ============================================================
# ROLES
# ============================================================

@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "description",
        "created_at",
    )

    search_fields = (
        "name",
    )

    readonly_fields = (
        "created_at",
        "updated_at",
    )

    def has_delete_permission(self, request, obj=None):
        # roles in use are protected; the console API reports why
        if obj is not None and obj.profiles.exists():
            return False
        return super().has_delete_permission(request, obj)


# ============================================================
# USER PROFILE
# ============================================================

@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = (
        "user",
        "role",
        "status",
        "last_login_date",
        "created_at",
    )

    search_fields = (
        "user__username",
        "user__email",
    )

    list_filter = (
        "role",
        "status",
    )

    readonly_fields = (
        "last_login_date",
        "created_at",
        "updated_at",
    )

    list_select_related = (
        "user",
        "role",
    )

    ordering = (
        "-created_at",
    )
