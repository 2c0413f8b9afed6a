from django.contrib import admin

from equipment.models import PhysicalAsset, AssetAssignment


class AssetAssignmentInline(admin.TabularInline):
    model = AssetAssignment
    extra = 0
    can_delete = False
    fields = (
        "assigned_to_type",
        "assigned_to_id",
        "assignment_date",
        "return_date",
        "schedule",
        "assigned_by",
    )
    readonly_fields = fields


@admin.register(PhysicalAsset)
class PhysicalAssetAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "serial_number",
        "category",
        "status",
        "rental_start_date",
        "rental_end_date",
    )
    search_fields = ("name", "serial_number", "category")
    list_filter = ("status", "category")

    # status moves through the console lifecycle endpoints
    readonly_fields = (
        "status",
        "assigned_to_id",
        "assigned_to_type",
        "rental_start_date",
        "rental_end_date",
        "version",
    )
    inlines = [AssetAssignmentInline]


@admin.register(AssetAssignment)
class AssetAssignmentAdmin(admin.ModelAdmin):
    list_display = (
        "asset",
        "assigned_to_type",
        "assigned_to_id",
        "assignment_date",
        "return_date",
    )
    list_filter = ("assigned_to_type",)
    list_select_related = ("asset",)
