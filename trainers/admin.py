from django.contrib import admin

from trainers.models import Trainer, TrainerSkill, TrainerDocument, TrainerAssignment


class TrainerSkillInline(admin.TabularInline):
    model = TrainerSkill
    extra = 1


class TrainerDocumentInline(admin.TabularInline):
    model = TrainerDocument
    extra = 0
    readonly_fields = ("file_type", "file_size")


@admin.register(Trainer)
class TrainerAdmin(admin.ModelAdmin):
    list_display = (
        "first_name",
        "last_name",
        "email",
        "experience_level",
        "expertise_course",
    )
    search_fields = ("first_name", "last_name", "email", "expertise_area")
    list_filter = ("experience_level",)
    inlines = [TrainerSkillInline, TrainerDocumentInline]


@admin.register(TrainerAssignment)
class TrainerAssignmentAdmin(admin.ModelAdmin):
    list_display = ("trainer", "schedule", "created_at")
    list_select_related = ("trainer", "schedule__course")
