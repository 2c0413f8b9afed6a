from django.contrib import admin

from students.models import Student, StudentAddress, StudentEducation, ScheduleEnrollment


class StudentAddressInline(admin.StackedInline):
    model = StudentAddress
    can_delete = False


class StudentEducationInline(admin.StackedInline):
    model = StudentEducation
    can_delete = False


class ScheduleEnrollmentInline(admin.TabularInline):
    model = ScheduleEnrollment
    extra = 0
    fields = ("schedule", "status", "enrollment_date")


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = (
        "first_name",
        "last_name",
        "email",
        "nationality",
        "created_at",
    )
    search_fields = ("first_name", "last_name", "email")
    list_filter = ("nationality", "gender")
    inlines = [StudentAddressInline, StudentEducationInline, ScheduleEnrollmentInline]


@admin.register(ScheduleEnrollment)
class ScheduleEnrollmentAdmin(admin.ModelAdmin):
    list_display = ("student", "schedule", "status", "enrollment_date")
    list_filter = ("status",)
    search_fields = ("student__email", "student__last_name")
    list_select_related = ("student", "schedule__course")
