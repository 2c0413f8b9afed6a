from django.contrib import admin, messages

from courses.models import (
    Course,
    CourseMaterial,
    CourseOffering,
    CourseSchedule,
    DeliveryMode,
)
from courses.services.scheduling import apply_dates, recompute_schedule
from courses.services.schedule_status import refresh_schedule_statuses


# =========================
# INLINE CONFIGS
# =========================

class CourseOfferingInline(admin.TabularInline):
    model = CourseOffering
    extra = 1
    fields = (
        "delivery_mode",
        "measure_number",
        "duration_days",
        "units",
        "unit_fee",
        "fee",
        "is_active",
    )


# =========================
# MAIN ADMINS
# =========================
@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "measure_number",
        "created_at",
    )
    search_fields = ("title", "measure_number")
    readonly_fields = ("curriculum_file_name", "created_at", "updated_at")
    inlines = [CourseOfferingInline]


@admin.register(DeliveryMode)
class DeliveryModeAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "delivery_method",
        "delivery_type",
        "default_duration_days",
        "base_fee",
    )
    list_filter = ("delivery_method", "delivery_type")


@admin.register(CourseSchedule)
class CourseScheduleAdmin(admin.ModelAdmin):
    list_display = (
        "course",
        "course_offering",
        "start_date",
        "end_date",
        "status",
        "instructor",
    )
    list_filter = ("status", "course")
    date_hierarchy = "start_date"

    # derived from start date and offering duration
    readonly_fields = ("course", "end_date", "status", "created_at", "updated_at")
    actions = ["recompute_dates", "refresh_statuses"]

    def save_model(self, request, obj, form, change):
        obj.course = obj.course_offering.course
        calculation = apply_dates(obj)
        super().save_model(request, obj, form, change)
        for warning in calculation.warnings:
            self.message_user(request, warning, level=messages.WARNING)

    @admin.action(description="Recalculate end dates")
    def recompute_dates(self, request, queryset):
        for schedule in queryset.select_related("course_offering"):
            recompute_schedule(schedule)
        self.message_user(request, f"{queryset.count()} schedule(s) recalculated.")

    @admin.action(description="Refresh statuses")
    def refresh_statuses(self, request, queryset):
        updated = refresh_schedule_statuses(queryset)
        self.message_user(request, f"{updated} status(es) updated.")


@admin.register(CourseMaterial)
class CourseMaterialAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "file_type", "is_active", "created_at")
    list_filter = ("category", "is_active")
    filter_horizontal = ("courses",)
    readonly_fields = ("file_type", "file_size")
